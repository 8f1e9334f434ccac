"""
Three-stage pipeline (Checkout -> Build -> Deploy).

Modules:
    stages: Stage enum and allowed transitions
    build: Language -> build command table
    run: PipelineRun state and PipelineResult
    state_machine: PipelineStateMachine and CancellationToken
"""

from .build import BuildCommand, resolve_build, supported_languages
from .run import PipelineResult, PipelineRun
from .stages import Stage
from .state_machine import CancellationToken, PipelineStateMachine

__all__ = [
    "BuildCommand",
    "resolve_build",
    "supported_languages",
    "PipelineResult",
    "PipelineRun",
    "Stage",
    "CancellationToken",
    "PipelineStateMachine",
]
