"""
Recovery Form Validators

Pure predicates used by the recovery workflow guards and by presentation
layers to build field-level error messages. Every function accepts any
string, including the empty string, and never raises.
"""

from email_validator import EmailNotValidError, validate_email

from src.domain.entities import PasswordCheck, ViolationKind

PASSWORD_MIN_LENGTH = 8
OTP_MIN_LENGTH = 6

PASSWORD_REQUIRED_MESSAGE = "Password is required."

# Ordered: password_error_message reports the first one that applies
VIOLATION_MESSAGES = {
    ViolationKind.too_short: f"Password must be at least {PASSWORD_MIN_LENGTH} characters long.",
    ViolationKind.missing_upper: "Password must contain at least one uppercase letter.",
    ViolationKind.missing_lower: "Password must contain at least one lowercase letter.",
    ViolationKind.missing_special: "Password must include at least one special character.",
    ViolationKind.contains_space: "Password cannot contain spaces.",
}


def is_valid_email(value: str) -> bool:
    """Syntax-only email check; no DNS lookups"""
    if not value:
        return False
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError:
        return False
    return True


def _is_special(char: str) -> bool:
    return not char.isalnum() and not char.isspace()


def is_strong_password(value: str) -> PasswordCheck:
    """
    Check a candidate password against all strength rules.

    Args:
        value: Candidate password

    Returns:
        PasswordCheck listing every violated rule
    """
    violations = set()

    if len(value) < PASSWORD_MIN_LENGTH:
        violations.add(ViolationKind.too_short)
    if not any(char.isupper() for char in value):
        violations.add(ViolationKind.missing_upper)
    if not any(char.islower() for char in value):
        violations.add(ViolationKind.missing_lower)
    if not any(_is_special(char) for char in value):
        violations.add(ViolationKind.missing_special)
    if any(char.isspace() for char in value):
        violations.add(ViolationKind.contains_space)

    return PasswordCheck(ok=not violations, violations=frozenset(violations))


def matches(first: str, second: str) -> bool:
    return first == second


def is_valid_otp(value: str, min_length: int = OTP_MIN_LENGTH) -> bool:
    return bool(value) and len(value) >= min_length


def password_error_message(value: str) -> str:
    """First user-facing message for a password value, or "" when it is strong"""
    if not value:
        return PASSWORD_REQUIRED_MESSAGE

    check = is_strong_password(value)
    for kind, message in VIOLATION_MESSAGES.items():
        if kind in check.violations:
            return message
    return ""
