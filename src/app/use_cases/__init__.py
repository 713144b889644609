"""
Use Cases

Organized into domain folders:
- recovery/: Forgot-password workflow
"""

from .recovery import (
    RecoveryWorkflow,
    OtpTimer,
    TimerState,
    WorkflowSnapshot,
)

__all__ = [
    "RecoveryWorkflow",
    "OtpTimer",
    "TimerState",
    "WorkflowSnapshot",
]
