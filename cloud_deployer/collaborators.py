"""
Default subprocess-backed collaborators.

These are thin wrappers around external tools (git, mvn/npm, the cloud CLIs
and kubectl). The pipeline core only depends on the protocols in
core.protocols; tests replace these classes with fakes.

Usage:
    workspace = Workspace.create(settings.workspace_dir)
    fetcher = GitRepositoryFetcher(workspace)
    builder = SubprocessBuildRunner(workspace)
    executor = CliCommandExecutor()
"""

import os
import shutil
import subprocess
import tempfile
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Optional, Sequence, Type

from cloud_deployer import constants as CONSTANTS
from cloud_deployer.core.exceptions import (
    BuildError,
    CollaboratorError,
    FetchError,
    ProviderError,
)
from cloud_deployer.logger import logger
from cloud_deployer.pipeline.build import BuildCommand


@dataclass(frozen=True)
class Workspace:
    """Per-run directory shared by checkout and build."""

    path: Path

    @classmethod
    def create(cls, root: str) -> "Workspace":
        """Create a fresh, uniquely named directory under ``root``."""
        root_path = Path(root)
        root_path.mkdir(parents=True, exist_ok=True)
        return cls(Path(tempfile.mkdtemp(prefix="run-", dir=root_path)))

    @property
    def source_dir(self) -> Path:
        return self.path / "source"

    def remove(self) -> None:
        """Delete the workspace directory and everything checked out or built in it."""
        shutil.rmtree(self.path, ignore_errors=True)
        logger.debug(f"Removed workspace {self.path}")


def run_command(
    cmd: Sequence[str],
    error_class: Type[CollaboratorError],
    cwd: Optional[Path] = None,
    env: Optional[Dict[str, str]] = None,
    timeout: int = CONSTANTS.DEFAULT_COMMAND_TIMEOUT_SECONDS,
    provider: Optional[str] = None
) -> subprocess.CompletedProcess:
    """
    Run an external command.

    Args:
        cmd: Command and arguments
        error_class: CollaboratorError subclass raised on failure
        cwd: Working directory
        env: Extra environment variables, added to the current environment.
            Values are never logged.
        timeout: Seconds before the command is killed
        provider: Provider key attached to raised errors

    Returns:
        CompletedProcess with captured output

    Raises:
        error_class: If the command is missing, times out, or exits non-zero
    """
    cmd = list(cmd)
    logger.info(f"Running: {' '.join(cmd)}")

    full_env = None
    if env:
        full_env = dict(os.environ)
        full_env.update(env)

    try:
        result = subprocess.run(
            cmd,
            cwd=str(cwd) if cwd else None,
            env=full_env,
            capture_output=True,
            text=True,
            timeout=timeout,
            check=False
        )
    except FileNotFoundError as e:
        raise error_class(
            f"Command not found: {cmd[0]}", original_error=e, provider=provider
        ) from e
    except subprocess.TimeoutExpired as e:
        raise error_class(
            f"Command timed out after {timeout}s: {' '.join(cmd)}",
            original_error=e,
            provider=provider
        ) from e

    if result.returncode != 0:
        # Combine stdout and stderr for full error context
        error_output = ""
        if result.stdout:
            error_output += result.stdout
        if result.stderr:
            error_output += "\n" + result.stderr if error_output else result.stderr
        if not error_output:
            error_output = "No output captured"
        raise error_class(
            f"{' '.join(cmd)} failed (exit {result.returncode}): {error_output.strip()}",
            provider=provider
        )

    return result


class GitRepositoryFetcher:
    """Checkout collaborator using a shallow ``git clone``."""

    def __init__(self, workspace: Workspace, timeout: int = CONSTANTS.DEFAULT_COMMAND_TIMEOUT_SECONDS):
        self.workspace = workspace
        self.timeout = timeout

    def fetch_repository(self, url: str) -> None:
        run_command(
            ["git", "clone", "--depth", "1", url, str(self.workspace.source_dir)],
            FetchError,
            timeout=self.timeout
        )
        logger.info(f"✓ Checked out {url}")


class SubprocessBuildRunner:
    """Build collaborator running each build command in the checkout."""

    def __init__(self, workspace: Workspace, timeout: int = CONSTANTS.DEFAULT_COMMAND_TIMEOUT_SECONDS):
        self.workspace = workspace
        self.timeout = timeout

    def run_build(self, build: BuildCommand) -> None:
        logger.info(f"Building {build.language} project with {build.tool} (version {build.tool_version})")
        for command in build.commands:
            run_command(command, BuildError, cwd=self.workspace.source_dir, timeout=self.timeout)
        logger.info(f"✓ {build.tool} build finished")


class CliCommandExecutor:
    """Provider collaborator running cloud CLIs with injected credentials."""

    def __init__(self, timeout: int = CONSTANTS.DEFAULT_COMMAND_TIMEOUT_SECONDS, cwd: Optional[Path] = None):
        self.timeout = timeout
        self.cwd = cwd

    def execute(self, provider_key: str, command: Sequence[str], env: Dict[str, str]) -> None:
        run_command(
            command,
            ProviderError,
            cwd=self.cwd,
            env=env,
            timeout=self.timeout,
            provider=provider_key
        )
