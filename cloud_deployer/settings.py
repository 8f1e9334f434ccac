"""
Process-wide settings.

Values are read from environment variables prefixed with ``CLOUD_DEPLOYER_``
or from a local ``.env`` file. Run configurations are NOT part of these
settings; they are loaded per run by ``core.config_loader``.
"""

from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

from cloud_deployer import constants as CONSTANTS


class Settings(BaseSettings):
    # Templates (None -> packaged podtemplates/)
    template_dir: Optional[str] = None

    # Logging
    debug: bool = False

    # Collaborators
    command_timeout_seconds: int = CONSTANTS.DEFAULT_COMMAND_TIMEOUT_SECONDS
    workspace_dir: str = CONSTANTS.DEFAULT_WORKSPACE_DIR

    # Fail startup when templates and strategies disagree
    strict_registry: bool = False

    model_config = SettingsConfigDict(
        env_prefix="CLOUD_DEPLOYER_",
        env_file=".env",
        extra="ignore",
    )


def get_settings() -> Settings:
    return Settings()
