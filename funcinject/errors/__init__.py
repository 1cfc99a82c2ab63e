"""
Error classification for the function injector.

Build-time binding errors are recoverable and never escape the injector
builder; execution errors signal caller misuse.
"""

from .binding import (
    BindingError,
    BindObjectError,
    TypeCheckError,
)
from .execution import (
    ExecutionError,
    InvalidInjectorError,
    ConfigurationError,
)

__all__ = [
    # Binding Errors
    "BindingError",
    "BindObjectError",
    "TypeCheckError",
    # Execution Failures
    "ExecutionError",
    "InvalidInjectorError",
    "ConfigurationError",
]
