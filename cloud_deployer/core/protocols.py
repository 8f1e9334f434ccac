"""
Protocol definitions for the pipeline deployer.

This module defines the interfaces the core depends on. Using Python's
Protocol (structural subtyping) allows test doubles and alternative
collaborators to plug in without inheriting from anything.

Design Pattern: Strategy Pattern + Registry
    - DeploymentStrategy: provider-specific deploy capability
    - StrategyConstructor: what the ProviderRegistry stores per provider key
    - RepositoryFetcher / BuildRunner / ProviderCommandExecutor: the external
      collaborators invoked by the pipeline stages
"""

from typing import Callable, Dict, Protocol, Sequence, runtime_checkable, TYPE_CHECKING

if TYPE_CHECKING:
    # Avoid circular imports - only import for type hints
    from .config import RunConfig
    from .context import ExecutionContext
    from cloud_deployer.pipeline.build import BuildCommand


@runtime_checkable
class DeploymentStrategy(Protocol):
    """
    Protocol for a provider-specific deployment strategy.

    Strategies are constructed per invocation from a RunConfig and an
    ExecutionContext and hold no state shared with other runs.

    Example Implementation:
        class AWSDeployerStrategy:
            name = "aws"

            def __init__(self, config, context):
                self._config = config
                self._context = context

            def deploy(self):
                self._context.execute("aws", ["aws", "eks", ...])
    """

    @property
    def name(self) -> str:
        """
        Return the provider key this strategy is bound to.

        Returns:
            str: The provider key (e.g., "aws")
        """
        ...

    def deploy(self) -> None:
        """
        Run the deployment.

        Returns nothing on success.

        Raises:
            ProviderError: If any provider command fails.
        """
        ...


# Registered per provider key; called once per dispatch
StrategyConstructor = Callable[["RunConfig", "ExecutionContext"], DeploymentStrategy]


@runtime_checkable
class RepositoryFetcher(Protocol):
    """Checkout collaborator."""

    def fetch_repository(self, url: str) -> None:
        """
        Fetch the repository at ``url``.

        Raises:
            FetchError: If the repository cannot be retrieved.
        """
        ...


@runtime_checkable
class BuildRunner(Protocol):
    """Build collaborator."""

    def run_build(self, build: "BuildCommand") -> None:
        """
        Run the language build described by ``build``.

        Raises:
            BuildError: If any build command fails.
        """
        ...


@runtime_checkable
class ProviderCommandExecutor(Protocol):
    """Provider CLI collaborator."""

    def execute(
        self,
        provider_key: str,
        command: Sequence[str],
        env: Dict[str, str]
    ) -> None:
        """
        Execute a provider CLI command with credentials injected via ``env``.

        Raises:
            ProviderError: If the command fails.
        """
        ...
