import asyncio
import logging

from src.app.services.navigator import INavigator

logger = logging.getLogger(__name__)


class EventNavigator(INavigator):
    """Navigator implementation that signals an asyncio.Event on exit"""

    def __init__(self):
        self.exited = asyncio.Event()

    def exit_to_login(self) -> None:
        logger.info("Navigating to login")
        self.exited.set()

    async def wait(self) -> None:
        """Block until the workflow has left to the login screen"""
        await self.exited.wait()
