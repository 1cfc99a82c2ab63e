"""
Configuration defaults, loading and validation.
"""
from .defaults import DefaultConfig, InjectorParams, LoggingParams, get_default_config
from .loader import ConfigLoader

__all__ = ["ConfigLoader", "DefaultConfig", "InjectorParams", "LoggingParams", "get_default_config"]
