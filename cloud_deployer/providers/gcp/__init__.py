"""
GCP provider package.

Auto-Registration:
    Importing this package registers GCPDeployerStrategy with the
    ProviderRegistry under the key "gcp".
"""

from cloud_deployer import constants as CONSTANTS
from cloud_deployer.core.registry import ProviderRegistry
from .deployer_strategy import GCPDeployerStrategy

# Auto-register this provider unless the key is already taken
if not ProviderRegistry.is_frozen() and not ProviderRegistry.is_registered(CONSTANTS.PROVIDER_GCP):
    ProviderRegistry.register(CONSTANTS.PROVIDER_GCP, GCPDeployerStrategy)

__all__ = ["GCPDeployerStrategy"]
