"""
Unit tests for RecoveryWorkflow.verify_otp

Tests OTP verification transitions with a mocked recovery service.
"""
import asyncio

import pytest

from src.app.use_cases.recovery import RecoveryWorkflow, messages
from src.app.use_cases.recovery.errors import (
    INVALID_STATE_TRANSITION,
    REMOTE_CALL_FAILURE,
    VALIDATION_ERROR,
)
from src.domain.entities import FormField, WorkflowStep
from src.domain.result import Error, Return
from tests.utils.workflow_helpers import VALID_EMAIL, VALID_OTP, advance_to_awaiting_otp


@pytest.mark.asyncio
async def test_successful_verification(workflow, mock_service, mock_notifier):
    """Test verify_otp moves to otp_verified and stops the countdown"""
    # Arrange
    await advance_to_awaiting_otp(workflow)

    # Act
    result = await workflow.verify_otp(VALID_OTP)

    # Assert
    assert result.is_ok()
    assert workflow.current_step == WorkflowStep.otp_verified
    assert workflow.timer.active is False
    assert workflow.resend_disabled is False
    mock_service.verify_code.assert_awaited_once_with(VALID_EMAIL, VALID_OTP)
    mock_notifier.show.assert_called_with("OTP verified", 3000)


@pytest.mark.asyncio
async def test_remaining_seconds_frozen_after_verification(mock_service, mock_notifier, mock_navigator):
    """Test the countdown value stays where it was when verification succeeded"""
    # Arrange
    wf = RecoveryWorkflow(
        mock_service, mock_notifier, mock_navigator, otp_duration_seconds=60, tick_interval_seconds=0.01
    )
    await advance_to_awaiting_otp(wf)
    while wf.remaining_seconds > 57:
        await asyncio.sleep(0.01)

    # Act
    await wf.verify_otp(VALID_OTP)
    frozen = wf.remaining_seconds
    await asyncio.sleep(0.05)

    # Assert
    assert 0 < frozen <= 57
    assert wf.remaining_seconds == frozen
    wf.close()


@pytest.mark.asyncio
async def test_verify_uses_otp_field_when_no_code_given(workflow, mock_service):
    """Test verify_otp falls back to the otp field input"""
    # Arrange
    await advance_to_awaiting_otp(workflow)
    assert workflow.update_field(FormField.otp, "654321").value == ""

    # Act
    result = await workflow.verify_otp()

    # Assert
    assert result.is_ok()
    mock_service.verify_code.assert_awaited_once_with(VALID_EMAIL, "654321")
    assert FormField.otp not in workflow.field_errors


@pytest.mark.asyncio
@pytest.mark.parametrize("code", ["", "12345"])
async def test_short_code_never_reaches_service(workflow, mock_service, code):
    """Test codes shorter than 6 characters are rejected locally"""
    # Arrange
    await advance_to_awaiting_otp(workflow)

    # Act
    result = await workflow.verify_otp(code)

    # Assert
    assert result.is_err()
    assert result.error.code == VALIDATION_ERROR
    assert workflow.current_step == WorkflowStep.awaiting_otp
    assert workflow.timer.active is True
    mock_service.verify_code.assert_not_called()


@pytest.mark.asyncio
async def test_verification_failure_stays_awaiting(workflow, mock_service, mock_notifier):
    """Test a rejected code keeps awaiting_otp and the countdown running"""
    # Arrange
    await advance_to_awaiting_otp(workflow)
    mock_service.verify_code.return_value = Return.err(Error("OTP_MISMATCH", "code 999999 != 123456"))

    # Act
    result = await workflow.verify_otp("999999")

    # Assert
    assert result.is_err()
    assert result.error.code == REMOTE_CALL_FAILURE
    assert result.error.message == messages.VERIFY_OTP_FAILED
    assert workflow.current_step == WorkflowStep.awaiting_otp
    assert workflow.timer.active is True
    mock_notifier.show.assert_called_with(messages.VERIFY_OTP_FAILED, 3000)


@pytest.mark.asyncio
async def test_verify_not_allowed_before_request(workflow, mock_service):
    """Test verify_otp is ignored in entering_email"""
    result = await workflow.verify_otp(VALID_OTP)

    assert result.is_err()
    assert result.error.code == INVALID_STATE_TRANSITION
    assert workflow.current_step == WorkflowStep.entering_email
    mock_service.verify_code.assert_not_called()


@pytest.mark.asyncio
async def test_otp_field_error_messages(workflow):
    """Test the otp field reports required and minimum length errors"""
    await advance_to_awaiting_otp(workflow)

    assert workflow.update_field(FormField.otp, "").value == messages.OTP_REQUIRED
    assert workflow.update_field(FormField.otp, "123").value == messages.OTP_TOO_SHORT.format(
        min_length=6
    )
    assert workflow.field_errors[FormField.otp] == messages.OTP_TOO_SHORT.format(min_length=6)
