from pydantic import BaseModel, ConfigDict, Field

from ._utils.constants import DEFAULT_TIMEOUT


class Config(BaseModel):
    """Transport settings applied to the httpx client of a request."""

    model_config = ConfigDict(frozen=True)

    timeout: float = Field(default=DEFAULT_TIMEOUT, gt=0)
    follow_redirects: bool = True
    verify_ssl: bool = True
