"""
Provider strategy implementations.

Each provider is a self-contained package exposing one DeploymentStrategy
and registering it with the ProviderRegistry when imported.

Package Structure:
    providers/
    ├── __init__.py     # This file - imports all providers
    ├── base.py         # BaseDeployerStrategy (kubectl rollout, logging)
    ├── aws/            # EKS
    ├── azure/          # AKS
    └── gcp/            # GKE

Adding a provider:
    1. Add providers/<key>/ with a strategy and a register() call
    2. Add podtemplates/<key>.yaml
    3. Import the package below and add it to BUILTIN_STRATEGIES
"""

from cloud_deployer import constants as CONSTANTS
from cloud_deployer.core.registry import ProviderRegistry

# Import provider modules to trigger auto-registration
from . import aws
from . import azure
from . import gcp

BUILTIN_STRATEGIES = {
    CONSTANTS.PROVIDER_AWS: aws.AWSDeployerStrategy,
    CONSTANTS.PROVIDER_AZURE: azure.AzureDeployerStrategy,
    CONSTANTS.PROVIDER_GCP: gcp.GCPDeployerStrategy,
}


def register_builtin_providers() -> None:
    """
    Register the built-in strategies.

    Import-time registration only happens once per process; this re-applies
    it after ProviderRegistry.clear(). Keys that already have a strategy keep
    it, so a registration made before startup overrides the built-in.
    """
    for key, strategy in BUILTIN_STRATEGIES.items():
        if not ProviderRegistry.is_registered(key):
            ProviderRegistry.register(key, strategy)
