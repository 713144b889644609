import logging
from typing import Any, Dict

import httpx

from src.app.services.dtos import MessageResponse
from src.app.services.recovery_service import IRecoveryService
from src.app.use_cases.recovery.errors import remote_call_failure
from src.domain.result import Result, Return

logger = logging.getLogger(__name__)

GENERIC_FAILURE_MESSAGE = "Recovery service request failed"


class HttpRecoveryService(IRecoveryService):
    """Recovery service implementation calling the auth backend over HTTP"""

    def __init__(
        self,
        client: httpx.AsyncClient,
        send_otp_path: str = "/forgot-password/send-otp",
        verify_otp_path: str = "/forgot-password/verify-otp",
        reset_password_path: str = "/forgot-password/reset-password",
    ):
        self.client = client
        self.send_otp_path = send_otp_path
        self.verify_otp_path = verify_otp_path
        self.reset_password_path = reset_password_path

    async def request_code(self, email: str) -> Result[MessageResponse]:
        return await self._post(self.send_otp_path, {"email": email})

    async def verify_code(self, email: str, code: str) -> Result[MessageResponse]:
        return await self._post(self.verify_otp_path, {"email": email, "otp": code})

    async def reset_password(
        self, email: str, new_password: str, confirm_password: str
    ) -> Result[MessageResponse]:
        payload = {
            "email": email,
            "newPassword": new_password,
            "confirmPassword": confirm_password,
        }
        return await self._post(self.reset_password_path, payload)

    async def _post(self, path: str, payload: Dict[str, Any]) -> Result[MessageResponse]:
        """
        POST payload as JSON and map the reply to a MessageResponse.

        Successful replies carry the user-facing text under "data".
        Anything else (HTTP error status, transport failure, unreadable
        body) becomes REMOTE_CALL_FAILURE; details are only logged.
        """
        try:
            response = await self.client.post(path, json=payload)
            response.raise_for_status()
            body = response.json()
        except httpx.HTTPStatusError as exc:
            logger.warning(f"Recovery service {path} returned {exc.response.status_code}")
            return Return.err(remote_call_failure(GENERIC_FAILURE_MESSAGE))
        except httpx.HTTPError as exc:
            logger.warning(f"Recovery service {path} unreachable: {exc.__class__.__name__}")
            return Return.err(remote_call_failure(GENERIC_FAILURE_MESSAGE))
        except ValueError:
            logger.warning(f"Recovery service {path} returned a non-JSON body")
            return Return.err(remote_call_failure(GENERIC_FAILURE_MESSAGE))

        message = body.get("data") if isinstance(body, dict) else None
        if not isinstance(message, str):
            logger.warning(f"Recovery service {path} returned an unexpected body shape")
            return Return.err(remote_call_failure(GENERIC_FAILURE_MESSAGE))

        return Return.ok(MessageResponse(message=message))
