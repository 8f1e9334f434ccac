"""
Azure Deployer Strategy implementation.

Deploys to an AKS cluster. The resource group comes from the credentials
(``azure_resource_group``) and defaults to ``<label>-rg``.
"""

from typing import List

from cloud_deployer import constants as CONSTANTS
from cloud_deployer.providers.base import BaseDeployerStrategy, Command


class AzureDeployerStrategy(BaseDeployerStrategy):
    """Azure implementation of the DeploymentStrategy protocol."""

    name = CONSTANTS.PROVIDER_AZURE

    @property
    def resource_group(self) -> str:
        return self.credentials.get("azure_resource_group") or f"{self.config.label}-rg"

    def cluster_commands(self) -> List[Command]:
        return [[
            "az", "aks", "get-credentials",
            "--resource-group", self.resource_group,
            "--name", self.cluster_name,
            "--overwrite-existing",
        ]]
