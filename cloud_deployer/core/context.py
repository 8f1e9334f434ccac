"""
Execution context for provider strategies.

Strategies never reach for ambient state. Everything they need to talk to a
cloud (the command executor and the credentials) is passed explicitly in an
ExecutionContext when the dispatcher constructs them.

Design Pattern: Dependency Injection
    - Credentials are loaded once per invocation by the caller
    - The context is handed to each strategy at construction
    - Strategies only read from it
"""

from dataclasses import dataclass, field
from typing import Dict, Optional, Sequence

from cloud_deployer import constants as CONSTANTS
from cloud_deployer.logger import logger
from .protocols import ProviderCommandExecutor


@dataclass(frozen=True)
class ExecutionContext:
    """
    Credentials and command collaborator for one run.

    Attributes:
        executor: Collaborator that runs provider CLI commands
        credentials: Raw credentials by provider key
            e.g., {"aws": {"aws_access_key_id": "...", ...}}
        run_label: Optional label used as logging context

    Example Usage:
        context = ExecutionContext(
            executor=CliCommandExecutor(),
            credentials=load_credentials(Path("config_credentials.json")),
        )
        dispatcher.dispatch(config, context)
    """

    executor: ProviderCommandExecutor
    credentials: Dict[str, dict] = field(default_factory=dict)
    run_label: Optional[str] = None

    def credentials_for(self, provider_key: str) -> dict:
        """
        Get a copy of the credentials for a provider.

        Returns:
            The credential dictionary, or an empty dict when none were given.
        """
        return dict(self.credentials.get(provider_key, {}))

    def credential_env(self, provider_key: str) -> Dict[str, str]:
        """
        Map a provider's credentials to the environment variables its CLI reads.

        Credential fields without a known variable are skipped.

        Example:
            >>> context.credential_env("aws")
            {"AWS_ACCESS_KEY_ID": "...", "AWS_SECRET_ACCESS_KEY": "...", "AWS_DEFAULT_REGION": "eu-central-1"}
        """
        mapping = CONSTANTS.CREDENTIAL_ENV_VARS.get(provider_key, {})
        env = {}
        for key, value in self.credentials_for(provider_key).items():
            env_name = mapping.get(key)
            if env_name is None:
                logger.debug(f"No environment variable for {provider_key} credential '{key}'")
                continue
            env[env_name] = str(value)
        return env

    def execute(self, provider_key: str, command: Sequence[str]) -> None:
        """
        Run a provider command with that provider's credentials injected.

        Raises:
            ProviderError: Propagated from the executor.
        """
        self.executor.execute(provider_key, list(command), self.credential_env(provider_key))
