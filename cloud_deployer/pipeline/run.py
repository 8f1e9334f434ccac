"""
Transient state of one pipeline invocation.

A PipelineRun is created when a run starts, mutated only by the
PipelineStateMachine, and reduced to an immutable PipelineResult at the end.
Nothing is persisted.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from cloud_deployer.core.config import RunConfig
from cloud_deployer.core.exceptions import CollaboratorError, error_kind
from .stages import ALLOWED_TRANSITIONS, Stage


@dataclass(frozen=True)
class PipelineResult:
    """
    Terminal status reported to the invoker.

    Attributes:
        status: Stage.SUCCEEDED or Stage.FAILED
        stage: Stage that failed (None on success)
        error_kind: Reported error kind (e.g., "BuildError")
        detail: Error message
        manifest: Rendered manifest, when rendering got that far
        history: Stages visited, in order
        error: The terminal exception, if any
    """

    status: Stage
    stage: Optional[Stage] = None
    error_kind: Optional[str] = None
    detail: Optional[str] = None
    manifest: Optional[str] = None
    history: tuple = ()
    error: Optional[BaseException] = field(default=None, compare=False, repr=False)

    @property
    def succeeded(self) -> bool:
        return self.status == Stage.SUCCEEDED

    def to_dict(self) -> dict:
        return {
            "status": self.status.value,
            "stage": self.stage.value if self.stage else None,
            "error_kind": self.error_kind,
            "detail": self.detail,
            "manifest": self.manifest,
            "history": [stage.value for stage in self.history],
        }


def _detail(error: BaseException) -> str:
    # Collaborator output is reported verbatim; stage and provider have their own fields
    if isinstance(error, CollaboratorError):
        return error.detail
    return str(error)


@dataclass
class PipelineRun:
    """
    Mutable state for a single run.

    Attributes:
        config: The run configuration
        stage: Current stage
        failed_stage: Stage that failed, once the run is Failed
        error: Terminal error, once the run is Failed
        manifest: Rendered manifest, once rendered
        history: Stages visited, starting with Pending
    """

    config: RunConfig
    stage: Stage = Stage.PENDING
    failed_stage: Optional[Stage] = None
    error: Optional[BaseException] = None
    manifest: Optional[str] = None
    history: List[Stage] = field(default_factory=lambda: [Stage.PENDING])

    def transition_to(self, stage: Stage) -> None:
        """
        Move to ``stage``.

        Raises:
            ValueError: If the transition is not allowed from the current stage.
        """
        if stage not in ALLOWED_TRANSITIONS[self.stage]:
            raise ValueError(
                f"Invalid pipeline transition: {self.stage.value} -> {stage.value}"
            )
        self.stage = stage
        self.history.append(stage)

    def fail(self, stage: Stage, error: BaseException) -> None:
        """Record ``error`` as originating in ``stage`` and enter Failed."""
        self.failed_stage = stage
        self.error = error
        self.transition_to(Stage.FAILED)

    def result(self) -> PipelineResult:
        if self.stage == Stage.SUCCEEDED:
            return PipelineResult(
                status=Stage.SUCCEEDED,
                manifest=self.manifest,
                history=tuple(self.history),
            )
        if self.stage != Stage.FAILED:
            raise ValueError(f"Pipeline run has not finished (stage: {self.stage.value})")
        return PipelineResult(
            status=Stage.FAILED,
            stage=self.failed_stage,
            error_kind=error_kind(self.error),
            detail=_detail(self.error),
            manifest=self.manifest,
            history=tuple(self.history),
            error=self.error,
        )
