"""
Configuration loading utilities.

This module loads run configurations and provider credentials from JSON
files and converts them into the immutable types used by the pipeline.

Usage:
    from cloud_deployer.core.config_loader import load_run_config

    config = load_run_config(Path("/app/projects/shop/config.json"))
"""

import json
from pathlib import Path
from typing import Any, Dict, Mapping

from cloud_deployer import constants as CONSTANTS
from cloud_deployer.logger import logger
from .config import RunConfig
from .exceptions import ConfigurationError

# External (camelCase) field name -> RunConfig attribute
FIELD_MAP = {
    "label": "label",
    "defaultContainer": "default_container",
    "repoUrl": "repo_url",
    "language": "language",
    "cloudProvider": "cloud_provider",
    "appLabel": "app_label",
    "containerName": "container_name",
    "javaVersion": "java_version",
    "nodeVersion": "node_version",
}

# Keys matched case-insensitively by the binder and the registries
NORMALIZED_FIELDS = {"language", "cloudProvider"}


def _load_json_file(file_path: Path, required: bool = True) -> Any:
    """
    Load a JSON file and return its contents.

    Args:
        file_path: Path to the JSON file
        required: If True, raise error when file is missing. If False, return empty dict.

    Returns:
        Parsed JSON content

    Raises:
        ConfigurationError: If file is missing (when required) or has invalid JSON
    """
    if not file_path.exists():
        if required:
            raise ConfigurationError(
                f"Required configuration file not found: {file_path.name}",
                config_file=str(file_path)
            )
        return {}

    try:
        with open(file_path, "r", encoding="utf-8") as f:
            return json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigurationError(
            f"Invalid JSON in configuration file: {e}",
            config_file=str(file_path)
        )


def _coerce_value(field: str, value: Any, config_file: str = None) -> str:
    # Versions are commonly written as numbers ("javaVersion": 17)
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        value = str(value)
    if not isinstance(value, str):
        raise ConfigurationError(
            f"Field '{field}' must be a string, got {type(value).__name__}",
            config_file=config_file
        )
    value = value.strip()
    if field in NORMALIZED_FIELDS:
        value = value.lower()
    return value


def run_config_from_dict(data: Mapping[str, Any], config_file: str = None) -> RunConfig:
    """
    Build a RunConfig from a mapping using the external field names.

    Args:
        data: Mapping with camelCase keys (label, defaultContainer, ...)
        config_file: Optional source file name, used in error messages

    Returns:
        The validated RunConfig

    Raises:
        ConfigurationError: If the mapping is not an object, a required field
            is missing or empty, or a field is not a string.
    """
    if not isinstance(data, Mapping):
        raise ConfigurationError(
            "Run configuration must be a JSON object",
            config_file=config_file
        )

    for field in CONSTANTS.REQUIRED_CONFIG_FIELDS:
        if field not in data or data[field] is None:
            raise ConfigurationError(
                f"Missing required field '{field}'",
                config_file=config_file
            )

    values = {}
    for field, attribute in FIELD_MAP.items():
        raw = data.get(field)
        if raw is None:
            continue
        value = _coerce_value(field, raw, config_file)
        if field in CONSTANTS.REQUIRED_CONFIG_FIELDS and not value:
            raise ConfigurationError(
                f"Required field '{field}' must not be empty",
                config_file=config_file
            )
        # Empty optional values fall back to their defaults
        if value:
            values[attribute] = value

    unknown = sorted(set(data) - set(FIELD_MAP))
    if unknown:
        logger.debug(f"Ignoring unknown configuration keys: {unknown}")

    return RunConfig(**values)


def load_run_config(config_path: Path) -> RunConfig:
    """
    Load a run configuration file.

    Args:
        config_path: Path to the JSON run configuration

    Returns:
        The validated RunConfig

    Raises:
        ConfigurationError: If the file is missing, invalid, or incomplete

    Example:
        config = load_run_config(Path("config.json"))
        print(config.cloud_provider)  # "aws"
    """
    config_path = Path(config_path)
    data = _load_json_file(config_path, required=True)
    return run_config_from_dict(data, config_file=str(config_path))


def load_credentials(credentials_path: Path) -> Dict[str, dict]:
    """
    Load provider credentials.

    The file maps provider keys to credential dictionaries:
        {"aws": {"aws_access_key_id": "...", ...}, "azure": {...}}

    Args:
        credentials_path: Path to the credentials JSON file

    Returns:
        Dictionary mapping provider keys to their credentials.
        Empty when the file does not exist (CLI tools may fall back to
        their own login state or environment variables).

    Raises:
        ConfigurationError: If the file has invalid JSON or wrong shape
    """
    credentials_path = Path(credentials_path)
    data = _load_json_file(credentials_path, required=False)

    if not isinstance(data, dict):
        raise ConfigurationError(
            "Credentials file must map provider keys to objects",
            config_file=str(credentials_path)
        )

    credentials = {}
    for provider_key, values in data.items():
        if not isinstance(values, dict):
            raise ConfigurationError(
                f"Credentials for '{provider_key}' must be an object",
                config_file=str(credentials_path)
            )
        credentials[provider_key.lower()] = dict(values)

    return credentials
