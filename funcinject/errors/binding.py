"""
Binding error classifications for injector construction.

These exceptions describe why a candidate value could not be turned into
a bindable object. They are raised while an injector is being built and are
absorbed by the builder, which degrades the resulting injector instead.
"""

from typing import Any, Dict, Optional


class BindingError(Exception):
    """Base class for binding problems detected at build time."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}
        self.recoverable = True


class BindObjectError(BindingError):
    """A candidate value cannot be wrapped as a bind object."""

    def __init__(self, message: str, binder: Any = None,
                 reason: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.binder = binder
        self.reason = reason


class TypeCheckError(BindObjectError):
    """A function binder was rejected by the type checker."""
