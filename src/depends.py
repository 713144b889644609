import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

import httpx

from config import ApplicationConfig
from src.adapter.services.event_navigator import EventNavigator
from src.adapter.services.http_recovery_service import HttpRecoveryService
from src.adapter.services.logging_notifier import LoggingNotifier
from src.app.services.navigator import INavigator
from src.app.services.notifier import INotifier
from src.app.use_cases.recovery import RecoveryWorkflow


def configure_logging(level: str = ApplicationConfig.LOG_LEVEL) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def create_http_client(config=ApplicationConfig) -> httpx.AsyncClient:
    return httpx.AsyncClient(
        base_url=config.RECOVERY_API_BASE_URL,
        timeout=config.RECOVERY_API_TIMEOUT,
    )


def create_workflow(
    client: httpx.AsyncClient,
    notifier: Optional[INotifier] = None,
    navigator: Optional[INavigator] = None,
    config=ApplicationConfig,
) -> RecoveryWorkflow:
    """
    Assemble a recovery workflow backed by the HTTP recovery service.

    Args:
        client: HTTP client pointed at the recovery API
        notifier: Defaults to LoggingNotifier
        navigator: Defaults to EventNavigator
        config: Settings source, ApplicationConfig by default

    Returns:
        A fresh RecoveryWorkflow in step entering_email
    """
    service = HttpRecoveryService(
        client,
        send_otp_path=config.SEND_OTP_PATH,
        verify_otp_path=config.VERIFY_OTP_PATH,
        reset_password_path=config.RESET_PASSWORD_PATH,
    )
    return RecoveryWorkflow(
        service,
        notifier or LoggingNotifier(),
        navigator or EventNavigator(),
        otp_duration_seconds=config.OTP_DURATION_SECONDS,
        otp_min_length=config.OTP_MIN_LENGTH,
        notify_duration_ms=config.NOTIFY_DURATION_MS,
        tick_interval_seconds=config.OTP_TICK_INTERVAL_SECONDS,
    )


@asynccontextmanager
async def get_recovery_workflow(
    notifier: Optional[INotifier] = None,
    navigator: Optional[INavigator] = None,
) -> AsyncIterator[RecoveryWorkflow]:
    async with create_http_client() as client:
        async with create_workflow(client, notifier, navigator) as workflow:
            yield workflow
