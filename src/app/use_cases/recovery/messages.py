"""User-facing message catalogue for the recovery workflow."""

SEND_OTP_FAILED = "Error sending OTP. Please try again."
VERIFY_OTP_FAILED = "Invalid OTP. Please try again."
RESET_PASSWORD_FAILED = "Error resetting password. Please try again."

EMAIL_REQUIRED = "Email is required."
EMAIL_INVALID = "Please enter a valid email address."
OTP_REQUIRED = "OTP is required."
OTP_TOO_SHORT = "OTP must be at least {min_length} characters long."
CONFIRM_PASSWORD_REQUIRED = "Please confirm your password."
PASSWORDS_DO_NOT_MATCH = "Passwords do not match."
