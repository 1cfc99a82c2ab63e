"""
Logging configuration and utilities for the function injector.
"""
from .config import configure_logging, get_binding_logger, get_logger, log_binding_decision

__all__ = ["configure_logging", "get_binding_logger", "get_logger", "log_binding_decision"]
