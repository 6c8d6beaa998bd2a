"""Configuration loading with YAML parsing and validation."""

from pathlib import Path
from typing import Any

import pydantic_yaml

from .schema import DictionaryConfig


def load_config(config_path: Path | str) -> DictionaryConfig:
    """
    Load and validate dictionary configuration from YAML file.

    Args:
        config_path: Path to YAML configuration file

    Returns:
        Validated DictionaryConfig instance

    Raises:
        FileNotFoundError: If config file doesn't exist
        pydantic.ValidationError: If config is invalid
    """
    config_path = Path(config_path)

    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path, "r") as f:
        yaml_content = f.read()

    return pydantic_yaml.parse_yaml_raw_as(DictionaryConfig, yaml_content)


def load_config_with_overrides(
    config_path: Path | str | None,
    overrides: dict[str, Any],
) -> DictionaryConfig:
    """
    Load config from YAML (or defaults) and apply dictionary overrides.

    Useful for CLI flags that override config file values. A changed
    base_url re-derives URL templates that were not set explicitly.

    Args:
        config_path: Path to YAML configuration file, None for defaults
        overrides: Dictionary of values to override (dotted keys supported)

    Returns:
        Validated DictionaryConfig with overrides applied

    Raises:
        FileNotFoundError: If config file doesn't exist
        pydantic.ValidationError: If final config is invalid
    """
    if config_path is None:
        config_dict: dict[str, Any] = {}
    else:
        config_dict = load_config(config_path).model_dump(exclude_unset=True)

    for key, value in overrides.items():
        if "." in key:
            # Nested keys like "api.timeout_seconds"
            parts = key.split(".")
            target = config_dict
            for part in parts[:-1]:
                target = target.setdefault(part, {})
            target[parts[-1]] = value
        else:
            config_dict[key] = value

    return DictionaryConfig.model_validate(config_dict)
