from abc import ABC, abstractmethod

from src.domain.result import Result
from src.app.services.dtos import MessageResponse


class IRecoveryService(ABC):
    """Remote credential recovery service interface - application layer"""

    @abstractmethod
    async def request_code(self, email: str) -> Result[MessageResponse]:
        """Ask the service to send a one-time passcode to email"""
        pass

    @abstractmethod
    async def verify_code(self, email: str, code: str) -> Result[MessageResponse]:
        """Check a one-time passcode previously sent to email"""
        pass

    @abstractmethod
    async def reset_password(
        self, email: str, new_password: str, confirm_password: str
    ) -> Result[MessageResponse]:
        """Set a new password for a verified email"""
        pass
