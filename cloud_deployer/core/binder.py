"""
Variable binder: RunConfig -> TemplateBinding.

Placeholder names are the external (camelCase) configuration field names,
so a template can reference ``${javaVersion}`` or ``${appLabel}`` directly.
"""

from cloud_deployer import constants as CONSTANTS
from .config import RunConfig, TemplateBinding


def bind(config: RunConfig) -> TemplateBinding:
    """
    Produce the rendering variables for a configuration.

    Unset optional fields are replaced by their documented defaults;
    every other value is copied verbatim.

    Example:
        >>> bind(RunConfig(label="ci", default_container="maven", repo_url="https://x",
        ...                language="java", cloud_provider="aws"))["javaVersion"]
        '17'
    """
    return {
        "label": config.label,
        "defaultContainer": config.default_container,
        "repoUrl": config.repo_url,
        "language": config.language,
        "cloudProvider": config.cloud_provider,
        "appLabel": _or_default(config.app_label, CONSTANTS.DEFAULT_APP_LABEL),
        "containerName": _or_default(config.container_name, CONSTANTS.DEFAULT_CONTAINER_NAME),
        "javaVersion": _or_default(config.java_version, CONSTANTS.DEFAULT_JAVA_VERSION),
        "nodeVersion": _or_default(config.node_version, CONSTANTS.DEFAULT_NODE_VERSION),
    }


def _or_default(value, default: str) -> str:
    return default if value is None else value
