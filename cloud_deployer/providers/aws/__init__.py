"""
AWS provider package.

Auto-Registration:
    Importing this package registers AWSDeployerStrategy with the
    ProviderRegistry under the key "aws".
"""

from cloud_deployer import constants as CONSTANTS
from cloud_deployer.core.registry import ProviderRegistry
from .deployer_strategy import AWSDeployerStrategy

# Auto-register this provider unless the key is already taken
if not ProviderRegistry.is_frozen() and not ProviderRegistry.is_registered(CONSTANTS.PROVIDER_AWS):
    ProviderRegistry.register(CONSTANTS.PROVIDER_AWS, AWSDeployerStrategy)

__all__ = ["AWSDeployerStrategy"]
