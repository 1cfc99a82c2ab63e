"""Default configuration parameters for the function injector."""

from dataclasses import dataclass


@dataclass(frozen=True)
class InjectorParams:
    """Injector build and call behaviour."""
    log_bindings: bool = True          # Emit a debug event per recorded binding
    strict_call: bool = False          # Refuse call() on an injector without bindings


@dataclass(frozen=True)
class LoggingParams:
    """Keyword arguments for configure_logging, one field per parameter."""
    level: str = "INFO"
    format_json: bool = False
    include_timestamp: bool = True
    include_caller: bool = False


@dataclass(frozen=True)
class DefaultConfig:
    """Complete default configuration."""
    injector: InjectorParams
    logging: LoggingParams


def get_default_config() -> DefaultConfig:
    """Get the default configuration instance."""
    return DefaultConfig(
        injector=InjectorParams(),
        logging=LoggingParams(),
    )
