import logging

from src.app.services.notifier import INotifier

logger = logging.getLogger(__name__)


class LoggingNotifier(INotifier):
    """Notifier implementation that writes messages to the application log"""

    def show(self, message: str, duration_ms: int) -> None:
        logger.info(f"[notice {duration_ms}ms] {message}")
