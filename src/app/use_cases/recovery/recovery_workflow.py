"""
Recovery Workflow Use Case

Drives the forgot-password flow: request a one-time passcode for an email,
verify it inside the resend window, then submit a new password.
"""

import asyncio
import logging
from typing import Awaitable, Callable, Dict, Optional
from uuid import uuid4

from src.app.services.dtos import MessageResponse
from src.app.services.navigator import INavigator
from src.app.services.notifier import INotifier
from src.app.services.recovery_service import IRecoveryService
from src.domain.entities import FormField, WorkflowStep
from src.domain.result import Result, Return
from src.domain.validators import (
    OTP_MIN_LENGTH,
    is_strong_password,
    is_valid_email,
    is_valid_otp,
    matches,
    password_error_message,
)
from . import messages
from .dtos import WorkflowSnapshot
from .errors import invalid_state_transition, remote_call_failure, validation_error
from .otp_timer import OtpTimer

logger = logging.getLogger(__name__)

# Fields accepting input while their form is visible
VISIBLE_FIELDS = {
    WorkflowStep.entering_email: (FormField.email,),
    WorkflowStep.awaiting_otp: (FormField.otp,),
    WorkflowStep.otp_verified: (FormField.password, FormField.confirm_password),
}


class RecoveryWorkflow:
    """
    State machine for one user's credential recovery.

    Business Rules:
    - Exactly one WorkflowStep is current at any time
    - Only one remote call may be in flight; other triggers are rejected meanwhile
    - A successful OTP request (re)starts the countdown; resend stays disabled while it runs
    - Verification success stops the countdown, freezing remaining_seconds
    - Password reset is only possible once the OTP is verified
    - Guard failures and unlisted triggers are silent no-ops
    - Remote failures keep the pre-call step and show a generic message
    - close() always stops the countdown
    """

    def __init__(
        self,
        service: IRecoveryService,
        notifier: INotifier,
        navigator: INavigator,
        otp_duration_seconds: int = 60,
        otp_min_length: int = OTP_MIN_LENGTH,
        notify_duration_ms: int = 3000,
        tick_interval_seconds: float = 1.0,
    ):
        if otp_duration_seconds < 1:
            raise ValueError(f"otp_duration_seconds must be at least 1, got {otp_duration_seconds}")

        self.service = service
        self.notifier = notifier
        self.navigator = navigator
        self.otp_duration_seconds = otp_duration_seconds
        self.otp_min_length = otp_min_length
        self.notify_duration_ms = notify_duration_ms

        self.workflow_id = str(uuid4())
        self.timer = OtpTimer(interval_seconds=tick_interval_seconds, on_expired=self._on_otp_expired)
        self._step = WorkflowStep.entering_email
        self._fields: Dict[FormField, str] = {}
        self._field_errors: Dict[FormField, str] = {}
        self._closed = False

    async def __aenter__(self):
        return self

    async def __aexit__(self, *args):
        self.close()

    # ------------------------------------------------------------------
    # Observers
    # ------------------------------------------------------------------

    @property
    def current_step(self) -> WorkflowStep:
        return self._step

    @property
    def email(self) -> str:
        return self._fields.get(FormField.email, "")

    @property
    def remaining_seconds(self) -> int:
        return self.timer.remaining_seconds

    @property
    def resend_disabled(self) -> bool:
        return self.timer.active

    @property
    def field_errors(self) -> Dict[FormField, str]:
        return dict(self._field_errors)

    @property
    def closed(self) -> bool:
        return self._closed

    def snapshot(self) -> WorkflowSnapshot:
        return WorkflowSnapshot(
            workflow_id=self.workflow_id,
            step=self._step,
            email=self.email,
            timer=self.timer.state(),
            field_errors=self.field_errors,
        )

    # ------------------------------------------------------------------
    # Form input
    # ------------------------------------------------------------------

    def update_field(self, field: FormField, value: str) -> Result[str]:
        """
        Record input for a field of the visible form.

        Args:
            field: Field being edited
            value: Raw input

        Returns:
            Result with the field's error message ("" when valid), or
            INVALID_STATE_TRANSITION when the field's form is not visible
        """
        if self._closed or field not in VISIBLE_FIELDS.get(self._step, ()):
            return self._reject(f"update_field:{field.value}")

        self._fields[field] = value
        self._field_errors[field] = self._describe(field, value)

        # Confirmation has to be re-checked whenever the password changes
        if field == FormField.password and FormField.confirm_password in self._fields:
            self._field_errors[FormField.confirm_password] = self._describe(
                FormField.confirm_password, self._fields[FormField.confirm_password]
            )

        return Return.ok(self._field_errors[field])

    def _describe(self, field: FormField, value: str) -> str:
        if field == FormField.email:
            if not value:
                return messages.EMAIL_REQUIRED
            return "" if is_valid_email(value) else messages.EMAIL_INVALID

        if field == FormField.otp:
            if not value:
                return messages.OTP_REQUIRED
            if is_valid_otp(value, self.otp_min_length):
                return ""
            return messages.OTP_TOO_SHORT.format(min_length=self.otp_min_length)

        if field == FormField.password:
            return password_error_message(value)

        if not value:
            return messages.CONFIRM_PASSWORD_REQUIRED
        if not matches(self._fields.get(FormField.password, ""), value):
            return messages.PASSWORDS_DO_NOT_MATCH
        return ""

    def _clear_fields(self, *fields: FormField) -> None:
        for field in fields:
            self._fields.pop(field, None)
            self._field_errors.pop(field, None)

    # ------------------------------------------------------------------
    # Triggers
    # ------------------------------------------------------------------

    async def request_otp(self) -> Result[WorkflowStep]:
        """
        Request a one-time passcode for the entered email.

        Returns:
            Result with the new step, or Error

        Errors:
            - INVALID_STATE_TRANSITION: not in entering_email
            - VALIDATION_ERROR: email field is not a valid address
            - REMOTE_CALL_FAILURE: the service could not send the code
        """
        if not self._accepts(WorkflowStep.entering_email):
            return self._reject("request_otp")
        if not is_valid_email(self.email):
            return self._invalid("request_otp", FormField.email)

        return await self._send_code(fallback=WorkflowStep.entering_email)

    async def resend_otp(self) -> Result[WorkflowStep]:
        """Send a fresh passcode once the previous window has run out"""
        if not self._accepts(WorkflowStep.awaiting_otp) or self.resend_disabled:
            return self._reject("resend_otp")

        return await self._send_code(fallback=WorkflowStep.awaiting_otp)

    async def _send_code(self, fallback: WorkflowStep) -> Result[WorkflowStep]:
        outcome = await self._call_remote(
            "request_code",
            WorkflowStep.requesting_otp,
            fallback,
            messages.SEND_OTP_FAILED,
            lambda: self.service.request_code(self.email),
        )
        if outcome.is_err():
            return Return.err(outcome.error)

        self._clear_fields(FormField.otp)
        self._transition(WorkflowStep.awaiting_otp)
        self.timer.start(self.otp_duration_seconds)
        self._notify(outcome.value.message)
        return Return.ok(self._step)

    async def verify_otp(self, code: Optional[str] = None) -> Result[WorkflowStep]:
        """
        Verify the passcode sent to the email.

        Args:
            code: Passcode to check; defaults to the otp field input

        Returns:
            Result with the new step, or Error
        """
        if not self._accepts(WorkflowStep.awaiting_otp):
            return self._reject("verify_otp")
        if code is None:
            code = self._fields.get(FormField.otp, "")
        if not is_valid_otp(code, self.otp_min_length):
            return self._invalid("verify_otp", FormField.otp)

        outcome = await self._call_remote(
            "verify_code",
            WorkflowStep.verifying_otp,
            WorkflowStep.awaiting_otp,
            messages.VERIFY_OTP_FAILED,
            lambda: self.service.verify_code(self.email, code),
        )
        if outcome.is_err():
            return Return.err(outcome.error)

        self.timer.stop()
        self._clear_fields(FormField.otp)
        self._transition(WorkflowStep.otp_verified)
        self._notify(outcome.value.message)
        return Return.ok(self._step)

    async def submit_new_password(
        self, password: Optional[str] = None, confirm_password: Optional[str] = None
    ) -> Result[WorkflowStep]:
        """
        Submit the new password for the verified email.

        Args:
            password: New password; defaults to the password field input
            confirm_password: Confirmation; defaults to the confirm field input

        Returns:
            Result with WorkflowStep.done on success, or Error
        """
        if not self._accepts(WorkflowStep.otp_verified):
            return self._reject("submit_new_password")
        if password is None:
            password = self._fields.get(FormField.password, "")
        if confirm_password is None:
            confirm_password = self._fields.get(FormField.confirm_password, "")
        if not is_strong_password(password).ok:
            return self._invalid("submit_new_password", FormField.password)
        if not matches(password, confirm_password):
            return self._invalid("submit_new_password", FormField.confirm_password)

        outcome = await self._call_remote(
            "reset_password",
            WorkflowStep.submitting,
            WorkflowStep.otp_verified,
            messages.RESET_PASSWORD_FAILED,
            lambda: self.service.reset_password(self.email, password, confirm_password),
        )
        if outcome.is_err():
            return Return.err(outcome.error)

        self._clear_fields(FormField.password, FormField.confirm_password)
        self._transition(WorkflowStep.done)
        self._notify(outcome.value.message)
        self.navigator.exit_to_login()
        return Return.ok(self._step)

    def go_back(self) -> Result[WorkflowStep]:
        """
        Step back one form, or leave the workflow from the first one.

        otp_verified -> awaiting_otp -> entering_email -> done + exit_to_login()
        """
        if self._closed or self._step.is_transient or self._step == WorkflowStep.done:
            return self._reject("go_back")

        if self._step == WorkflowStep.otp_verified:
            self.timer.stop()
            self._clear_fields(FormField.password, FormField.confirm_password)
            self._transition(WorkflowStep.awaiting_otp)
        elif self._step == WorkflowStep.awaiting_otp:
            self.timer.stop()
            self._clear_fields(FormField.otp)
            self._transition(WorkflowStep.entering_email)
        else:
            self.timer.stop()
            self._transition(WorkflowStep.done)
            self.navigator.exit_to_login()

        return Return.ok(self._step)

    def close(self) -> None:
        """Tear down: stop the countdown and drop entered secrets"""
        self.timer.stop()
        self._clear_fields(
            FormField.otp, FormField.password, FormField.confirm_password
        )
        if not self._closed:
            self._closed = True
            logger.debug(f"Recovery workflow {self.workflow_id} closed in step {self._step.value}")

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _accepts(self, step: WorkflowStep) -> bool:
        return not self._closed and self._step == step

    def _transition(self, step: WorkflowStep) -> None:
        logger.info(f"Recovery workflow {self.workflow_id}: {self._step.value} -> {step.value}")
        self._step = step

    def _reject(self, trigger: str) -> Result:
        logger.debug(f"Recovery workflow {self.workflow_id}: ignored '{trigger}' in {self._step.value}")
        return Return.err(invalid_state_transition(trigger, self._step))

    def _invalid(self, trigger: str, field: FormField) -> Result:
        logger.debug(f"Recovery workflow {self.workflow_id}: '{trigger}' guard failed on {field.value}")
        return Return.err(validation_error(field))

    def _notify(self, message: str) -> None:
        self.notifier.show(message, self.notify_duration_ms)

    async def _call_remote(
        self,
        name: str,
        in_flight: WorkflowStep,
        fallback: WorkflowStep,
        failure_message: str,
        call: Callable[[], Awaitable[Result[MessageResponse]]],
    ) -> Result[MessageResponse]:
        """
        Run one remote call while parked in a transient step.

        On failure the step falls back to its pre-call value and the
        generic failure_message is shown; service details only reach the log.
        """
        self._transition(in_flight)
        try:
            result = await call()
        except asyncio.CancelledError:
            self._step = fallback
            raise
        except Exception:
            logger.exception(f"Recovery workflow {self.workflow_id}: {name} raised")
            result = Return.err(remote_call_failure(failure_message))

        if self._closed:
            self._step = fallback
            logger.debug(f"Recovery workflow {self.workflow_id}: {name} finished after close")
            return Return.err(invalid_state_transition(name, self._step))

        if result.is_err():
            logger.warning(f"Recovery workflow {self.workflow_id}: {name} failed ({result.error.code})")
            self._transition(fallback)
            self._notify(failure_message)
            return Return.err(remote_call_failure(failure_message))

        return result

    def _on_otp_expired(self) -> None:
        logger.info(f"Recovery workflow {self.workflow_id}: OTP window expired, resend enabled")
