"""Pipeline stages and the transitions allowed between them."""

from enum import Enum


class Stage(str, Enum):
    PENDING = "Pending"
    CHECKOUT = "Checkout"
    BUILD = "Build"
    DEPLOY = "Deploy"
    SUCCEEDED = "Succeeded"
    FAILED = "Failed"


# Ordered stages that invoke a collaborator
EXECUTION_STAGES = (Stage.CHECKOUT, Stage.BUILD, Stage.DEPLOY)

TERMINAL_STAGES = frozenset({Stage.SUCCEEDED, Stage.FAILED})

# Pending -> Failed covers configuration errors found before Checkout
# and cancellation before the first stage
ALLOWED_TRANSITIONS = {
    Stage.PENDING: frozenset({Stage.CHECKOUT, Stage.FAILED}),
    Stage.CHECKOUT: frozenset({Stage.BUILD, Stage.FAILED}),
    Stage.BUILD: frozenset({Stage.DEPLOY, Stage.FAILED}),
    Stage.DEPLOY: frozenset({Stage.SUCCEEDED, Stage.FAILED}),
    Stage.SUCCEEDED: frozenset(),
    Stage.FAILED: frozenset(),
}


def is_terminal(stage: Stage) -> bool:
    return stage in TERMINAL_STAGES
