#!/usr/bin/env python3
"""Configuration validation script."""

import sys
from pathlib import Path

import yaml

from funcinject.config.loader import CONFIG_FILENAME, ConfigLoader
from funcinject.config.validation import ConfigValidator
from funcinject.errors import ConfigurationError


def main():
    """Main validation function."""
    config_dir = Path(sys.argv[1]) if len(sys.argv) > 1 else None
    loader = ConfigLoader.create(config_dir)

    print(f"Validating {loader.config_dir / CONFIG_FILENAME} ...")

    try:
        config = loader.merge_config()
    except (OSError, yaml.YAMLError) as e:
        print(f"Error loading configuration: {e}")
        sys.exit(1)
    except ConfigurationError as e:
        print(f"Error loading configuration: {e}")
        for message in e.errors:
            print(f"  - {message}")
        sys.exit(1)

    errors = ConfigValidator.validate_config(config)

    if errors:
        print(f"Found {len(errors)} validation errors:")
        for error in errors:
            print(f"  - {error.field}: {error.message} (value: {error.value})")
        sys.exit(1)

    print("Configuration is valid")
    for section, values in config.items():
        if not isinstance(values, dict):
            print(f"  {section} = {values}")
            continue
        print(f"  [{section}]")
        for key, value in values.items():
            print(f"    {key} = {value}")
    sys.exit(0)


if __name__ == "__main__":
    main()
