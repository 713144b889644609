"""
Recovery Service DTOs

Contracts exchanged with the remote recovery service.
"""

from pydantic import BaseModel


class MessageResponse(BaseModel):
    """Successful outcome of a remote recovery call"""

    message: str
