"""
Deployment dispatcher.

Selects the strategy for ``config.cloud_provider`` from the ProviderRegistry
and runs its deploy operation exactly once.

Usage:
    dispatcher = DeploymentDispatcher()
    dispatcher.dispatch(config, context)
"""

from typing import Type, TYPE_CHECKING

from cloud_deployer.logger import logger
from .exceptions import DeploymentError, ProviderError
from .registry import ProviderRegistry

if TYPE_CHECKING:
    from .config import RunConfig
    from .context import ExecutionContext
    from .protocols import StrategyConstructor


class DeploymentDispatcher:
    """
    Resolves and invokes deployment strategies.

    Errors raised by a strategy are not caught or masked. Errors from the
    deployer hierarchy are re-raised as the same object, tagged with the
    provider key. Any other exception is wrapped in a ProviderError chained
    to the original.
    """

    def __init__(self, registry: Type[ProviderRegistry] = ProviderRegistry):
        self._registry = registry

    def resolve(self, provider_key: str) -> 'StrategyConstructor':
        """
        Look up the strategy constructor without constructing anything.

        Raises:
            UnsupportedProviderError: If no strategy is registered for the key.
        """
        return self._registry.get(provider_key)

    def dispatch(self, config: 'RunConfig', context: 'ExecutionContext') -> None:
        """
        Construct the configured provider's strategy and run deploy().

        Args:
            config: Run configuration; ``cloud_provider`` selects the strategy
            context: Execution context handed to the strategy

        Raises:
            UnsupportedProviderError: Before any provider side effect, if no
                strategy is registered.
            ProviderError: If the strategy fails.
        """
        provider_key = config.cloud_provider
        constructor = self.resolve(provider_key)

        logger.info(f"Dispatching deployment to provider: {provider_key}")
        strategy = constructor(config, context)

        try:
            strategy.deploy()
        except DeploymentError as e:
            if not e.provider:
                e.provider = provider_key
            raise
        except Exception as e:
            raise ProviderError(
                f"Deployment strategy failed: {e}",
                original_error=e,
                provider=provider_key
            ) from e

        logger.info(f"✓ Deployment finished for provider: {provider_key}")
