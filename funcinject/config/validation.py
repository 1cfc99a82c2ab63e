"""Configuration validation utilities."""

from dataclasses import dataclass
from typing import Any

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class ValidationError:
    """Represents a configuration validation error."""
    field: str
    message: str
    value: Any


class ConfigValidator:
    """Validates configuration parameters."""

    @staticmethod
    def validate_injector_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate injector parameters."""
        errors = []

        for field in ("log_bindings", "strict_call"):
            if field in params and not isinstance(params[field], bool):
                errors.append(ValidationError(
                    field=field,
                    message="Must be a boolean",
                    value=params[field]
                ))

        return errors

    @staticmethod
    def validate_logging_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate logging parameters."""
        errors = []

        if "level" in params:
            value = params["level"]
            if not isinstance(value, str) or value.upper() not in LOG_LEVELS:
                errors.append(ValidationError(
                    field="level",
                    message=f"Must be one of {', '.join(LOG_LEVELS)}",
                    value=value
                ))

        for field in ("format_json", "include_timestamp", "include_caller"):
            if field in params and not isinstance(params[field], bool):
                errors.append(ValidationError(
                    field=field,
                    message="Must be a boolean",
                    value=params[field]
                ))

        return errors

    @staticmethod
    def validate_config(config: dict[str, Any]) -> list[ValidationError]:
        """Validate complete configuration."""
        errors = []

        sections = {
            "injector": ConfigValidator.validate_injector_params,
            "logging": ConfigValidator.validate_logging_params,
        }
        for section, validate in sections.items():
            if section not in config:
                continue
            value = config[section]
            if not isinstance(value, dict):
                errors.append(ValidationError(
                    field=section,
                    message="Must be a mapping",
                    value=value
                ))
                continue
            errors.extend(validate(value))

        return errors
