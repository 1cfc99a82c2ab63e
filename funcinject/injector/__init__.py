"""
Function injection: build a binding once, call with it many times.
"""
from .func_injector import BindSource, FuncInjector, TargetFuncInput, make_func_injector

__all__ = ["BindSource", "FuncInjector", "TargetFuncInput", "make_func_injector"]
