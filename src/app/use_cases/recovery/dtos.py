"""
Recovery Workflow DTOs (Data Transfer Objects)

Read-only views of the workflow consumed by presentation layers.
"""

from typing import Dict

from pydantic import BaseModel

from src.domain.entities import FormField, WorkflowStep


class TimerState(BaseModel):
    """Snapshot of the OTP countdown"""

    remaining_seconds: int
    resend_disabled: bool
    active: bool


class WorkflowSnapshot(BaseModel):
    """Everything a presentation layer needs to render the current form"""

    workflow_id: str
    step: WorkflowStep
    email: str
    timer: TimerState
    field_errors: Dict[FormField, str]
