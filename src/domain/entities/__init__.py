"""
Credential Recovery Domain Entities

Enums and value objects shared by validators and the recovery workflow.
"""

from .enums import (
    WorkflowStep,
    ViolationKind,
    FormField,
    TRANSIENT_STEPS,
)
from .password_check import PasswordCheck

__all__ = [
    # Enums
    "WorkflowStep",
    "ViolationKind",
    "FormField",
    "TRANSIENT_STEPS",
    # Value objects
    "PasswordCheck",
]
