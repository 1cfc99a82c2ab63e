"""
Bind objects and the type introspection behind them.
"""
from .bind_object import BindObject, BindType, Hijacker, TypeChecker, make_bind_object

__all__ = ["BindObject", "BindType", "Hijacker", "TypeChecker", "make_bind_object"]
