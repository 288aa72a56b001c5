from datetime import datetime, timezone
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class TokenClient(str, Enum):
    """Who a generated token is bound to (the ``client`` parameter)."""

    REFERER = "referer"
    REQUEST_IP = "requestip"
    IP = "ip"


class GenerateTokenCredentials(BaseModel):
    """Credentials and options sent to a ``generateToken`` endpoint."""

    model_config = ConfigDict(use_enum_values=True)

    username: str
    password: str
    expiration: Optional[int] = Field(default=None, gt=0)
    referer: Optional[str] = None
    client: Optional[TokenClient] = None


class GenerateTokenResponse(BaseModel):
    """Token returned by ``generateToken``.

    ``expires`` is the expiration time in milliseconds since the epoch, as
    sent by the server.
    """

    model_config = ConfigDict(extra="allow")

    token: str
    expires: int
    ssl: Optional[bool] = None

    @property
    def expires_at(self) -> datetime:
        return datetime.fromtimestamp(self.expires / 1000, tz=timezone.utc)


class FetchTokenResponse(BaseModel):
    """Access token obtained through the OAuth2 ``client_credentials`` grant."""

    token: str
    expires: datetime
