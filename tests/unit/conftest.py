import pytest
import pytest_asyncio
from unittest.mock import AsyncMock, MagicMock

from src.app.services.dtos import MessageResponse
from src.app.use_cases.recovery import RecoveryWorkflow
from src.domain.result import Return


@pytest.fixture
def mock_service():
    """Mock IRecoveryService where every call succeeds"""
    service = MagicMock()
    service.request_code = AsyncMock(return_value=Return.ok(MessageResponse(message="OTP sent")))
    service.verify_code = AsyncMock(return_value=Return.ok(MessageResponse(message="OTP verified")))
    service.reset_password = AsyncMock(
        return_value=Return.ok(MessageResponse(message="Password reset successfully"))
    )
    return service


@pytest.fixture
def mock_notifier():
    notifier = MagicMock()
    notifier.show = MagicMock()
    return notifier


@pytest.fixture
def mock_navigator():
    navigator = MagicMock()
    navigator.exit_to_login = MagicMock()
    return navigator


@pytest_asyncio.fixture
async def workflow(mock_service, mock_notifier, mock_navigator):
    """Workflow with a real-time (1s) tick so no tick lands during a test"""
    wf = RecoveryWorkflow(mock_service, mock_notifier, mock_navigator)
    yield wf
    wf.close()


@pytest_asyncio.fixture
async def fast_workflow(mock_service, mock_notifier, mock_navigator):
    """Workflow with a 3-tick window and 10ms ticks"""
    wf = RecoveryWorkflow(
        mock_service,
        mock_notifier,
        mock_navigator,
        otp_duration_seconds=3,
        tick_interval_seconds=0.01,
    )
    yield wf
    wf.close()
