"""
funcinject - Static argument binding for Python callables

Matches a pool of candidate values to the typed inputs of a function once,
then reuses that binding to assemble arguments and call the function on
every invocation.
"""

from .binding import BindObject, BindType, make_bind_object
from .injector import FuncInjector, make_func_injector

__version__ = "0.1.0"
__author__ = "funcinject Team"

__all__ = ["BindObject", "BindType", "FuncInjector", "make_bind_object", "make_func_injector"]
