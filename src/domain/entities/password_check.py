"""
PasswordCheck Value Object

Outcome of a password strength check.
"""

from typing import FrozenSet

from pydantic import BaseModel, ConfigDict

from .enums import ViolationKind


class PasswordCheck(BaseModel):
    """
    PasswordCheck - tagged result of is_strong_password.

    Business Rules:
    - ok is True only when violations is empty
    - Every broken rule is listed, not just the first one
    """

    model_config = ConfigDict(frozen=True)

    ok: bool
    violations: FrozenSet[ViolationKind] = frozenset()
