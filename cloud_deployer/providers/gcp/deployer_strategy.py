"""
GCP Deployer Strategy implementation.

Deploys to a GKE cluster in ``gcp_region`` (default ``europe-west1``).
"""

from typing import List

from cloud_deployer import constants as CONSTANTS
from cloud_deployer.providers.base import BaseDeployerStrategy, Command

DEFAULT_REGION = "europe-west1"


class GCPDeployerStrategy(BaseDeployerStrategy):
    """GCP implementation of the DeploymentStrategy protocol."""

    name = CONSTANTS.PROVIDER_GCP

    def cluster_commands(self) -> List[Command]:
        region = self.credentials.get("gcp_region") or DEFAULT_REGION
        command = [
            "gcloud", "container", "clusters", "get-credentials",
            self.cluster_name,
            "--region", region,
        ]
        project_id = self.credentials.get("gcp_project_id")
        if project_id:
            command += ["--project", project_id]
        return [command]
