"""
Recovery Workflow Errors

Error codes returned (never raised) by RecoveryWorkflow operations:
- VALIDATION_ERROR: a field guard failed; nothing was sent to the service
- REMOTE_CALL_FAILURE: the service failed; the workflow kept its pre-call step
- INVALID_STATE_TRANSITION: the trigger is not accepted in the current step
"""

from src.domain.entities import FormField, WorkflowStep
from src.domain.result import Error

VALIDATION_ERROR = "VALIDATION_ERROR"
REMOTE_CALL_FAILURE = "REMOTE_CALL_FAILURE"
INVALID_STATE_TRANSITION = "INVALID_STATE_TRANSITION"


def validation_error(field: FormField) -> Error:
    return Error(VALIDATION_ERROR, f"Invalid value for field '{field.value}'")


def remote_call_failure(message: str) -> Error:
    return Error(REMOTE_CALL_FAILURE, message)


def invalid_state_transition(trigger: str, step: WorkflowStep) -> Error:
    return Error(INVALID_STATE_TRANSITION, f"'{trigger}' is not allowed in step '{step.value}'")
