"""
Provider registry for deployment strategy lookup.

This module implements the Registry pattern, providing the single place
where provider keys are mapped to deployment strategy constructors.
Adding a cloud means one registration call here plus one template file;
the dispatcher itself never changes.

How Registration Works:
    Each provider package (e.g., providers/aws/__init__.py) imports this
    registry and calls register() when the module loads:

        # In providers/aws/__init__.py
        from cloud_deployer.core.registry import ProviderRegistry
        from .deployer_strategy import AWSDeployerStrategy
        ProviderRegistry.register("aws", AWSDeployerStrategy)

    bootstrap() imports the providers package and then freezes the registry.
    After that, the table is read-only for the lifetime of the process.
"""

from typing import Dict, TYPE_CHECKING

from cloud_deployer.logger import logger
from .exceptions import RegistryFrozenError, UnsupportedProviderError

if TYPE_CHECKING:
    from .config import RunConfig
    from .context import ExecutionContext
    from .protocols import DeploymentStrategy, StrategyConstructor


class ProviderRegistry:
    """
    Central registry of deployment strategy constructors.

    This class uses class-level state (not instance state) because
    providers register themselves at import time, before any run exists.

    Thread Safety:
        Registration happens during process initialization only. Once
        freeze() has been called, register() raises and lookups are
        read-only, so concurrent runs need no locking.

    Example Usage:
        # Registration (done by provider packages at import)
        ProviderRegistry.register("aws", AWSDeployerStrategy)

        # Lookup (done by the dispatcher at runtime)
        strategy = ProviderRegistry.create("aws", config, context)
        strategy.deploy()
    """

    # Key: provider key (e.g., "aws")
    # Value: constructor taking (RunConfig, ExecutionContext)
    _providers: Dict[str, 'StrategyConstructor'] = {}
    _frozen: bool = False

    @classmethod
    def register(cls, name: str, constructor: 'StrategyConstructor') -> None:
        """
        Register or override the strategy constructor for a provider key.

        Args:
            name: Provider key (e.g., "aws", "azure", "gcp")
            constructor: Callable taking (RunConfig, ExecutionContext) and
                returning a DeploymentStrategy

        Raises:
            RegistryFrozenError: If the registry has been frozen
        """
        if cls._frozen:
            raise RegistryFrozenError(name)

        existing = cls._providers.get(name)
        if existing is not None and existing is not constructor:
            logger.warning(
                f"Overriding strategy for provider '{name}': "
                f"{getattr(existing, '__name__', existing)} -> "
                f"{getattr(constructor, '__name__', constructor)}"
            )

        cls._providers[name] = constructor

    @classmethod
    def get(cls, name: str) -> 'StrategyConstructor':
        """
        Get the constructor registered for a provider key.

        Raises:
            UnsupportedProviderError: If no strategy is registered for that key.
        """
        if name not in cls._providers:
            raise UnsupportedProviderError(name, cls.list_providers())
        return cls._providers[name]

    @classmethod
    def create(
        cls,
        name: str,
        config: 'RunConfig',
        context: 'ExecutionContext'
    ) -> 'DeploymentStrategy':
        """
        Construct a new strategy for a provider key.

        Creates a fresh instance each time - strategies are not shared
        between runs.

        Raises:
            UnsupportedProviderError: If no strategy is registered for that key.
        """
        constructor = cls.get(name)
        return constructor(config, context)

    @classmethod
    def list_providers(cls) -> list[str]:
        """
        List all registered provider keys.

        Returns:
            List of registered keys, sorted alphabetically.

        Example:
            >>> ProviderRegistry.list_providers()
            ['aws', 'azure', 'gcp']
        """
        return sorted(cls._providers.keys())

    @classmethod
    def is_registered(cls, name: str) -> bool:
        return name in cls._providers

    @classmethod
    def freeze(cls) -> None:
        """Make the registry read-only for the rest of the process."""
        cls._frozen = True

    @classmethod
    def is_frozen(cls) -> bool:
        return cls._frozen

    @classmethod
    def clear(cls) -> None:
        """
        Remove all registrations and unfreeze.

        This is used by tests to reset state between tests.
        Should not be called in production code.
        """
        cls._providers.clear()
        cls._frozen = False
