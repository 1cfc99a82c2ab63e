"""
Execution and configuration failure classifications.

These exceptions represent misuse that the caller has to fix; retrying
with the same inputs fails the same way.
"""

from typing import Any, Dict, List, Optional


class ExecutionError(Exception):
    """Base class for unrecoverable injection failures."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}
        self.recoverable = False


class InvalidInjectorError(ExecutionError):
    """An injector without bindings was asked to call its function."""

    def __init__(self, message: str, fn_name: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.fn_name = fn_name


class ConfigurationError(ExecutionError):
    """Configuration values failed validation."""

    def __init__(self, message: str, errors: Optional[List[str]] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.errors = errors or []
