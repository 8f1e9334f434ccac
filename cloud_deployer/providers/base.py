"""
Shared base class for provider deployment strategies.

All built-in strategies deploy the same way: fetch cluster credentials with
the provider's CLI, then restart and wait for the application's Kubernetes
deployment. Only the credential step differs per cloud, so subclasses
implement ``cluster_commands()`` and inherit the rest.
"""

from typing import List, TYPE_CHECKING

from cloud_deployer.core.binder import bind
from cloud_deployer.logger import logger

if TYPE_CHECKING:
    from cloud_deployer.core.config import RunConfig
    from cloud_deployer.core.context import ExecutionContext

Command = List[str]

ROLLOUT_TIMEOUT = "300s"


class BaseDeployerStrategy:
    """
    Common functionality for DeploymentStrategy implementations.

    Subclasses set ``name`` to their provider key and implement
    ``cluster_commands()``.

    Attributes:
        config: The run configuration (read-only)
        context: The execution context (read-only)
        binding: Resolved variables, with defaults applied
    """

    name: str = ""

    def __init__(self, config: 'RunConfig', context: 'ExecutionContext'):
        self._config = config
        self._context = context
        self._binding = bind(config)

    @property
    def config(self) -> 'RunConfig':
        return self._config

    @property
    def context(self) -> 'ExecutionContext':
        return self._context

    @property
    def binding(self) -> dict:
        return dict(self._binding)

    @property
    def credentials(self) -> dict:
        return self._context.credentials_for(self.name)

    @property
    def cluster_name(self) -> str:
        """Cluster from the credentials, falling back to the run label."""
        return self.credentials.get("cluster_name") or self._config.label

    def cluster_commands(self) -> List[Command]:
        """Commands that point kubectl at the provider's cluster."""
        raise NotImplementedError

    def rollout_commands(self) -> List[Command]:
        app_label = self._binding["appLabel"]
        return [
            ["kubectl", "rollout", "restart", f"deployment/{app_label}"],
            ["kubectl", "rollout", "status", f"deployment/{app_label}",
             f"--timeout={ROLLOUT_TIMEOUT}"],
        ]

    def commands(self) -> List[Command]:
        """All commands for one deployment, in execution order."""
        return self.cluster_commands() + self.rollout_commands()

    def deploy(self) -> None:
        """
        Run every command through the execution context.

        Raises:
            ProviderError: From the first failing command; later commands
                are not run.
        """
        self._log_deployment_start()
        for command in self.commands():
            self._context.execute(self.name, command)
        logger.info(f"[{self.name}] ✓ Deployment of '{self._binding['appLabel']}' complete")

    def _log_deployment_start(self) -> None:
        logger.info(
            f"[{self.name}] Deploying '{self._binding['appLabel']}' "
            f"(container: {self._binding['containerName']}) to cluster '{self.cluster_name}'"
        )
