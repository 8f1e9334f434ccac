"""
Pipeline state machine: Checkout -> Build -> Deploy.

Stages run strictly in order inside one run, and the first failure ends the
run. Configuration errors (language, provider, template) are all detected
in a preflight step before the checkout collaborator is called, so a bad
configuration never causes an external side effect.

Usage:
    machine = PipelineStateMachine(fetcher, builder, store)
    result = machine.run(config, context)
    if not result.succeeded:
        print(result.stage, result.error_kind, result.detail)
"""

import threading
from typing import Optional

from cloud_deployer.core.config import RunConfig
from cloud_deployer.core.context import ExecutionContext
from cloud_deployer.core.dispatcher import DeploymentDispatcher
from cloud_deployer.core.exceptions import DeploymentError, PipelineCancelledError
from cloud_deployer.core.manifest import render_manifest
from cloud_deployer.core.protocols import BuildRunner, RepositoryFetcher
from cloud_deployer.core.templates import TemplateStore
from cloud_deployer.logger import logger, print_stack_trace
from .build import resolve_build
from .run import PipelineResult, PipelineRun
from .stages import EXECUTION_STAGES, Stage


class CancellationToken:
    """
    Lets an external invoker abort a run between stages.

    A stage that is already running is never interrupted; the run fails
    with PipelineCancelledError at the next stage boundary.
    """

    def __init__(self):
        self._event = threading.Event()

    def cancel(self) -> None:
        self._event.set()

    @property
    def cancelled(self) -> bool:
        return self._event.is_set()


class PipelineStateMachine:
    """
    Sequences the three pipeline stages for one configuration.

    The machine holds only read-only collaborators, so one instance can
    execute many runs, including concurrently; each run gets its own
    PipelineRun.

    Attributes:
        fetcher: Checkout collaborator
        builder: Build collaborator
        store: Template store used to render the run's manifest
        dispatcher: Deployment dispatcher
    """

    def __init__(
        self,
        fetcher: RepositoryFetcher,
        builder: BuildRunner,
        store: TemplateStore,
        dispatcher: Optional[DeploymentDispatcher] = None
    ):
        self.fetcher = fetcher
        self.builder = builder
        self.store = store
        self.dispatcher = dispatcher or DeploymentDispatcher()

    def run(
        self,
        config: RunConfig,
        context: ExecutionContext,
        cancel_token: Optional[CancellationToken] = None,
        raise_on_failure: bool = False
    ) -> PipelineResult:
        """
        Execute one pipeline run.

        Args:
            config: Run configuration
            context: Execution context for the deployment strategy
            cancel_token: Optional token checked before each stage
            raise_on_failure: Re-raise the terminal error instead of
                only reporting it in the result

        Returns:
            PipelineResult with status Succeeded or Failed
        """
        run = PipelineRun(config=config)
        label = config.label
        owning_stage = Stage.PENDING

        try:
            # Preflight: every configuration check, before any side effect
            owning_stage = Stage.BUILD
            build = resolve_build(config)
            owning_stage = Stage.DEPLOY
            self.dispatcher.resolve(config.cloud_provider)
            owning_stage = Stage.PENDING
            run.manifest = render_manifest(config, self.store)
            logger.debug(f"[{label}] Rendered {config.cloud_provider} manifest")

            actions = {
                Stage.CHECKOUT: lambda: self.fetcher.fetch_repository(config.repo_url),
                Stage.BUILD: lambda: self.builder.run_build(build),
                Stage.DEPLOY: lambda: self.dispatcher.dispatch(config, context),
            }
            for stage in EXECUTION_STAGES:
                owning_stage = stage
                if cancel_token is not None and cancel_token.cancelled:
                    raise PipelineCancelledError(stage=stage.value)
                self._enter(run, stage)
                actions[stage]()

            self._enter(run, Stage.SUCCEEDED)

        except Exception as e:
            if isinstance(e, DeploymentError) and not e.stage:
                e.stage = owning_stage.value
            run.fail(owning_stage, e)
            print_stack_trace()
            logger.error(
                f"[{label}] Pipeline failed in {owning_stage.value} "
                f"({run.result().error_kind}): {e}"
            )
            if raise_on_failure:
                raise

        return run.result()

    @staticmethod
    def _enter(run: PipelineRun, stage: Stage) -> None:
        previous = run.stage
        run.transition_to(stage)
        logger.info(f"[{run.config.label}] {previous.value} -> {stage.value}")
