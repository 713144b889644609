"""
OTP Countdown Timer

Drives the resend window of the recovery workflow.
"""

import asyncio
import logging
from typing import Callable, Optional

from .dtos import TimerState

logger = logging.getLogger(__name__)


class OtpTimer:
    """
    Countdown that ticks once per interval and stops itself at zero.

    Business Rules:
    - At most one countdown task is live per timer
    - start() cancels the running countdown before starting a new one
    - stop() is idempotent; no tick is observed after it returns
    - Reaching zero stops the countdown and fires the expired signal once

    Must be started from inside a running event loop.
    """

    def __init__(
        self,
        interval_seconds: float = 1.0,
        on_tick: Optional[Callable[[int], None]] = None,
        on_expired: Optional[Callable[[], None]] = None,
    ):
        self.interval_seconds = interval_seconds
        self._on_tick = on_tick
        self._on_expired = on_expired
        self._remaining_seconds = 0
        self._task: Optional[asyncio.Task] = None
        self.expired = asyncio.Event()

    @property
    def remaining_seconds(self) -> int:
        return self._remaining_seconds

    @property
    def active(self) -> bool:
        return self._task is not None

    def state(self) -> TimerState:
        return TimerState(
            remaining_seconds=self._remaining_seconds,
            resend_disabled=self.active,
            active=self.active,
        )

    def start(self, duration_seconds: int) -> None:
        """
        Start a fresh countdown.

        Args:
            duration_seconds: Number of ticks before expiry (>= 1)

        Raises:
            ValueError: duration_seconds is below 1
        """
        if duration_seconds < 1:
            raise ValueError(f"duration_seconds must be at least 1, got {duration_seconds}")

        self.stop()
        self._remaining_seconds = duration_seconds
        self.expired.clear()
        self._task = asyncio.get_running_loop().create_task(self._run())
        logger.debug(f"OTP timer started for {duration_seconds}s")

    def stop(self) -> None:
        task, self._task = self._task, None
        if task is None:
            return
        # Cancelling throws into the pending sleep, so the loop never resumes
        if not task.done() and task is not asyncio.current_task():
            task.cancel()
        logger.debug(f"OTP timer stopped at {self._remaining_seconds}s")

    async def _run(self) -> None:
        me = asyncio.current_task()
        while self._remaining_seconds > 0:
            await asyncio.sleep(self.interval_seconds)
            if self._task is not me:
                return
            self._remaining_seconds -= 1
            if self._on_tick is not None:
                self._on_tick(self._remaining_seconds)

        # on_tick may have stopped or restarted the timer on the last tick
        if self._task is not me:
            return
        self._task = None
        self.expired.set()
        logger.debug("OTP timer expired")
        if self._on_expired is not None:
            self._on_expired()
