"""
Pipeline Factory - wires default collaborators into a run.

It serves as the entry point for both CLI and API to execute a pipeline
with the subprocess-backed collaborators.
"""

from typing import Dict, Optional

from cloud_deployer.collaborators import (
    CliCommandExecutor,
    GitRepositoryFetcher,
    SubprocessBuildRunner,
    Workspace,
)
from cloud_deployer.core.config import RunConfig
from cloud_deployer.core.context import ExecutionContext
from cloud_deployer.core.templates import TemplateStore
from cloud_deployer.pipeline import CancellationToken, PipelineResult, PipelineStateMachine
from cloud_deployer.settings import Settings


def create_context(
    config: RunConfig,
    credentials: Optional[Dict[str, dict]],
    settings: Settings,
    workspace: Optional[Workspace] = None
) -> ExecutionContext:
    """Create the ExecutionContext for one run."""
    executor = CliCommandExecutor(
        timeout=settings.command_timeout_seconds,
        cwd=workspace.path if workspace else None,
    )
    return ExecutionContext(
        executor=executor,
        credentials=credentials or {},
        run_label=config.label,
    )


def run_pipeline(
    config: RunConfig,
    store: TemplateStore,
    settings: Settings,
    credentials: Optional[Dict[str, dict]] = None,
    cancel_token: Optional[CancellationToken] = None
) -> PipelineResult:
    """
    Run the pipeline with the default collaborators.

    Each call gets its own workspace directory, collaborators and context,
    so concurrent calls share nothing but the store and the registry. The
    workspace is removed when the run ends, whatever its outcome.
    """
    workspace = Workspace.create(settings.workspace_dir)
    try:
        machine = PipelineStateMachine(
            fetcher=GitRepositoryFetcher(workspace, timeout=settings.command_timeout_seconds),
            builder=SubprocessBuildRunner(workspace, timeout=settings.command_timeout_seconds),
            store=store,
        )
        context = create_context(config, credentials, settings, workspace)
        return machine.run(config, context, cancel_token=cancel_token)
    finally:
        workspace.remove()
