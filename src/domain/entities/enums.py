"""
Credential Recovery Domain Enums

All enumeration types used by validators and the recovery workflow.
"""

from enum import Enum


class WorkflowStep(str, Enum):
    """Current step of a recovery workflow"""

    entering_email = "entering_email"
    requesting_otp = "requesting_otp"
    awaiting_otp = "awaiting_otp"
    verifying_otp = "verifying_otp"
    otp_verified = "otp_verified"
    submitting = "submitting"
    done = "done"

    @property
    def is_transient(self) -> bool:
        """True while a remote call is in flight"""
        return self in TRANSIENT_STEPS


TRANSIENT_STEPS = frozenset(
    {WorkflowStep.requesting_otp, WorkflowStep.verifying_otp, WorkflowStep.submitting}
)


class ViolationKind(str, Enum):
    """Password strength rule that a candidate password breaks"""

    too_short = "too_short"
    missing_upper = "missing_upper"
    missing_lower = "missing_lower"
    missing_special = "missing_special"
    contains_space = "contains_space"


class FormField(str, Enum):
    """Input field of the recovery forms"""

    email = "email"
    otp = "otp"
    password = "password"
    confirm_password = "confirm_password"
