"""Unit tests for configuration management."""

import pytest
from pathlib import Path

import yaml

from funcinject.config.defaults import InjectorParams, LoggingParams, get_default_config
from funcinject.config.loader import CONFIG_FILENAME, ConfigLoader
from funcinject.config.validation import ConfigValidator
from funcinject.errors import ConfigurationError


def write_config(config_dir: Path, data: dict) -> None:
    with open(config_dir / CONFIG_FILENAME, "w") as f:
        yaml.safe_dump(data, f)


class TestDefaultConfig:
    """Test suite for default configuration."""

    def test_default_config_creation(self) -> None:
        """Test that default configuration can be created."""
        config = get_default_config()
        assert config is not None
        assert config.injector.log_bindings is True
        assert config.injector.strict_call is False
        assert config.logging.level == "INFO"

    def test_defaults_are_frozen(self) -> None:
        """Test that default parameters cannot be mutated."""
        params = InjectorParams()
        with pytest.raises(AttributeError):
            params.strict_call = True  # type: ignore[misc]


class TestConfigLoader:
    """Test suite for configuration loader."""

    def test_config_loader_creation(self, tmp_path: Path) -> None:
        """Test that ConfigLoader can be created."""
        loader = ConfigLoader.create(tmp_path)
        assert loader is not None
        assert isinstance(loader.config_dir, Path)

    def test_default_config_dir(self) -> None:
        """Test that the working directory is used by default."""
        loader = ConfigLoader.create()
        assert loader.config_dir == Path.cwd()

    def test_merge_config_defaults_only(self, tmp_path: Path) -> None:
        """Test config merging with defaults only."""
        loader = ConfigLoader.create(tmp_path)
        config = loader.merge_config()

        assert config["injector"]["log_bindings"] is True
        assert config["injector"]["strict_call"] is False
        assert config["logging"]["format_json"] is False

    def test_merge_config_with_file(self, tmp_path: Path) -> None:
        """Test that file values override defaults."""
        write_config(tmp_path, {"injector": {"strict_call": True}})
        loader = ConfigLoader.create(tmp_path)

        config = loader.merge_config()

        assert config["injector"]["strict_call"] is True
        # Other defaults should remain
        assert config["injector"]["log_bindings"] is True

    def test_merge_config_with_overrides(self, tmp_path: Path) -> None:
        """Test that explicit overrides beat the file."""
        write_config(tmp_path, {"injector": {"strict_call": True, "log_bindings": False}})
        loader = ConfigLoader.create(tmp_path)

        config = loader.merge_config({"injector": {"strict_call": False}})

        assert config["injector"]["strict_call"] is False
        assert config["injector"]["log_bindings"] is False

    def test_empty_file(self, tmp_path: Path) -> None:
        """Test that an empty file means no overrides."""
        (tmp_path / CONFIG_FILENAME).write_text("")
        loader = ConfigLoader.create(tmp_path)

        assert loader.load_file_config() == {}

    def test_load_injector_params(self, tmp_path: Path) -> None:
        """Test building typed injector parameters."""
        write_config(tmp_path, {"injector": {"strict_call": True}})
        loader = ConfigLoader.create(tmp_path)

        params = loader.load_injector_params()

        assert params == InjectorParams(log_bindings=True, strict_call=True)

    def test_load_logging_params(self, tmp_path: Path) -> None:
        """Test building typed logging parameters."""
        loader = ConfigLoader.create(tmp_path)

        params = loader.load_logging_params({"logging": {"level": "debug"}})

        assert params == LoggingParams(level="debug")

    def test_unknown_keys_ignored(self, tmp_path: Path) -> None:
        """Test that unknown keys do not break parameter construction."""
        write_config(tmp_path, {"injector": {"unused": 1}})
        loader = ConfigLoader.create(tmp_path)

        assert loader.load_injector_params() == InjectorParams()

    def test_invalid_values_raise(self, tmp_path: Path) -> None:
        """Test that invalid configuration raises ConfigurationError."""
        write_config(tmp_path, {"injector": {"strict_call": "yes"}})
        loader = ConfigLoader.create(tmp_path)

        with pytest.raises(ConfigurationError) as exc_info:
            loader.load_injector_params()

        assert len(exc_info.value.errors) == 1
        assert exc_info.value.errors[0].startswith("strict_call")
        assert exc_info.value.recoverable is False

    def test_empty_section_raises(self, tmp_path: Path) -> None:
        """Test that an empty section is reported instead of crashing."""
        (tmp_path / CONFIG_FILENAME).write_text("injector:\n")
        loader = ConfigLoader.create(tmp_path)

        with pytest.raises(ConfigurationError) as exc_info:
            loader.load_injector_params()

        assert exc_info.value.errors == ["injector: Must be a mapping (got: None)"]

    def test_non_mapping_document_raises(self, tmp_path: Path) -> None:
        """Test that a top-level document other than a mapping is rejected."""
        (tmp_path / CONFIG_FILENAME).write_text("- injector\n- logging\n")
        loader = ConfigLoader.create(tmp_path)

        with pytest.raises(ConfigurationError) as exc_info:
            loader.merge_config()

        assert exc_info.value.errors[0].startswith("<root>")


class TestConfigValidator:
    """Test suite for configuration validation."""

    def test_valid_injector_params(self) -> None:
        """Test validation of valid injector parameters."""
        params = {"log_bindings": False, "strict_call": True}

        errors = ConfigValidator.validate_injector_params(params)
        assert len(errors) == 0

    def test_invalid_log_bindings(self) -> None:
        """Test validation of invalid log_bindings."""
        errors = ConfigValidator.validate_injector_params({"log_bindings": 1})

        assert len(errors) == 1
        assert errors[0].field == "log_bindings"
        assert errors[0].message == "Must be a boolean"

    def test_invalid_level(self) -> None:
        """Test validation of an unknown logging level."""
        errors = ConfigValidator.validate_logging_params({"level": "verbose"})

        assert len(errors) == 1
        assert errors[0].field == "level"
        assert errors[0].value == "verbose"

    def test_level_case_insensitive(self) -> None:
        """Test that logging levels are accepted in any case."""
        assert ConfigValidator.validate_logging_params({"level": "warning"}) == []

    def test_invalid_logging_flag(self) -> None:
        """Test validation of invalid logging flags."""
        errors = ConfigValidator.validate_logging_params({"format_json": "no"})

        assert len(errors) == 1
        assert errors[0].field == "format_json"

    def test_validate_config(self) -> None:
        """Test validation of complete configuration."""
        config = {
            "injector": {"strict_call": "no"},
            "logging": {"level": 10},
        }

        errors = ConfigValidator.validate_config(config)
        assert {err.field for err in errors} == {"strict_call", "level"}

    def test_section_not_a_mapping(self) -> None:
        """Test validation of sections that are not mappings."""
        errors = ConfigValidator.validate_config({"injector": None, "logging": ["DEBUG"]})

        assert [err.field for err in errors] == ["injector", "logging"]
        assert all(err.message == "Must be a mapping" for err in errors)
