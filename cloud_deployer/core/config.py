"""
Run configuration value types.

RunConfig describes one pipeline invocation. It is immutable: the state
machine, binder and strategies only read it, so concurrent runs never share
mutable configuration.

Optional fields are kept as ``None`` here. Defaults are applied by the
variable binder (see ``core.binder``), never by the config itself, so that
"unset" stays distinguishable from "explicitly set to the default".
"""

from dataclasses import dataclass
from typing import Dict, Optional

# Placeholder name -> substituted value
TemplateBinding = Dict[str, str]


@dataclass(frozen=True)
class RunConfig:
    """
    Immutable configuration for a single pipeline run.

    Attributes:
        label: Execution environment label (agent / pod label)
        default_container: Container the pipeline steps run in by default
        repo_url: Repository to check out
        language: Build language key (e.g., "java", "node")
        cloud_provider: Provider key (e.g., "aws", "azure", "gcp")
        app_label: Optional application label (default "default-app")
        container_name: Optional container name (default "main-container")
        java_version: Optional Java version (default "17")
        node_version: Optional Node.js version (default "16")
    """

    label: str
    default_container: str
    repo_url: str
    language: str
    cloud_provider: str
    app_label: Optional[str] = None
    container_name: Optional[str] = None
    java_version: Optional[str] = None
    node_version: Optional[str] = None

    def to_dict(self) -> dict:
        """Return the configuration with its external (camelCase) field names."""
        data = {
            "label": self.label,
            "defaultContainer": self.default_container,
            "repoUrl": self.repo_url,
            "language": self.language,
            "cloudProvider": self.cloud_provider,
            "appLabel": self.app_label,
            "containerName": self.container_name,
            "javaVersion": self.java_version,
            "nodeVersion": self.node_version,
        }
        return {key: value for key, value in data.items() if value is not None}
