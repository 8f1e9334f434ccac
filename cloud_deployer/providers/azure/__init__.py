"""
Azure provider package.

Auto-Registration:
    Importing this package registers AzureDeployerStrategy with the
    ProviderRegistry under the key "azure".
"""

from cloud_deployer import constants as CONSTANTS
from cloud_deployer.core.registry import ProviderRegistry
from .deployer_strategy import AzureDeployerStrategy

# Auto-register this provider unless the key is already taken
if not ProviderRegistry.is_frozen() and not ProviderRegistry.is_registered(CONSTANTS.PROVIDER_AZURE):
    ProviderRegistry.register(CONSTANTS.PROVIDER_AZURE, AzureDeployerStrategy)

__all__ = ["AzureDeployerStrategy"]
