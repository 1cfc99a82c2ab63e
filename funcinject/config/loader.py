"""Configuration loader with layered parameter precedence."""

from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Optional

import yaml

from ..errors import ConfigurationError
from .defaults import DefaultConfig, InjectorParams, LoggingParams, get_default_config
from .validation import ConfigValidator

CONFIG_FILENAME = "funcinject.yaml"


@dataclass(frozen=True)
class ConfigLoader:
    """Manages configuration loading with layered precedence."""

    config_dir: Path
    defaults: DefaultConfig

    @classmethod
    def create(cls, config_dir: Optional[Path] = None) -> "ConfigLoader":
        """Create a ConfigLoader instance."""
        if config_dir is None:
            config_dir = Path.cwd()

        return cls(
            config_dir=Path(config_dir),
            defaults=get_default_config(),
        )

    def load_file_config(self) -> dict[str, Any]:
        """Load overrides from the configuration file, if present."""
        config_file = self.config_dir / CONFIG_FILENAME

        if not config_file.exists():
            return {}

        with open(config_file) as f:
            file_config = yaml.safe_load(f)

        if file_config is None:
            return {}
        if not isinstance(file_config, dict):
            raise ConfigurationError(
                f"{CONFIG_FILENAME} must contain a mapping",
                errors=[f"<root>: Must be a mapping (got: {type(file_config).__name__})"],
                context={"config_dir": str(self.config_dir)}
            )

        return file_config

    def merge_config(self, overrides: Optional[dict[str, Any]] = None) -> dict[str, Any]:
        """
        Merge configuration by precedence.

        Priority order:
        1. Explicit overrides (highest priority)
        2. Configuration file
        3. Defaults (lowest priority)
        """
        config = self._dataclass_to_dict(self.defaults)

        config = self._deep_merge(config, self.load_file_config())

        if overrides:
            config = self._deep_merge(config, overrides)

        return config

    def load_injector_params(self, overrides: Optional[dict[str, Any]] = None) -> InjectorParams:
        """Build validated injector parameters from the merged configuration."""
        config = self._validated(overrides)
        return self._from_section(InjectorParams, config["injector"])

    def load_logging_params(self, overrides: Optional[dict[str, Any]] = None) -> LoggingParams:
        """Build validated logging parameters from the merged configuration."""
        config = self._validated(overrides)
        return self._from_section(LoggingParams, config["logging"])

    def _validated(self, overrides: Optional[dict[str, Any]]) -> dict[str, Any]:
        config = self.merge_config(overrides)
        validation_errors = ConfigValidator.validate_config(config)
        if validation_errors:
            error_msgs = [f"{err.field}: {err.message} (got: {err.value})" for err in validation_errors]
            raise ConfigurationError(
                "Configuration validation failed",
                errors=error_msgs,
                context={"config_dir": str(self.config_dir)}
            )
        return config

    @staticmethod
    def _from_section(cls: type, section: dict[str, Any]) -> Any:
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in section.items() if k in known})

    def _dataclass_to_dict(self, obj: Any) -> dict[str, Any]:
        """Convert nested dataclasses to dictionary."""
        if hasattr(obj, '__dataclass_fields__'):
            result = {}
            for field_name, _field in obj.__dataclass_fields__.items():
                value = getattr(obj, field_name)
                if hasattr(value, '__dataclass_fields__'):
                    result[field_name] = self._dataclass_to_dict(value)
                else:
                    result[field_name] = value
            return result
        return obj  # type: ignore[no-any-return]

    def _deep_merge(self, base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
        """Deep merge two dictionaries."""
        result = base.copy()

        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._deep_merge(result[key], value)
            else:
                result[key] = value

        return result
