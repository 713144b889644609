"""
Recovery Use Cases

Forgot-password workflow: OTP request, verification and password reset.
"""

from .otp_timer import OtpTimer
from .recovery_workflow import RecoveryWorkflow
from .dtos import TimerState, WorkflowSnapshot

__all__ = [
    # Use Cases
    "RecoveryWorkflow",
    "OtpTimer",
    # DTOs - Responses
    "TimerState",
    "WorkflowSnapshot",
]
