from enum import Enum
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field

from .._authentication import AuthenticationManager
from .._config import Config


class HTTPMethod(str, Enum):
    """HTTP methods used by the ArcGIS REST API."""

    GET = "GET"
    POST = "POST"


class ResponseFormat(str, Enum):
    """Valid values for the ``f`` parameter."""

    JSON = "json"
    GEOJSON = "geojson"
    TEXT = "text"
    HTML = "html"
    IMAGE = "image"
    ZIP = "zip"


JSON_FORMATS = frozenset({ResponseFormat.JSON, ResponseFormat.GEOJSON})
TEXT_FORMATS = frozenset({ResponseFormat.TEXT, ResponseFormat.HTML})
BINARY_FORMATS = frozenset({ResponseFormat.IMAGE, ResponseFormat.ZIP})


class RequestParams(BaseModel):
    """Parameters sent to an endpoint.

    ``f`` and ``token`` are the fields the dispatcher itself reads or writes;
    anything else the endpoint accepts (``q``, ``where``, ``geometry``, a file
    to upload, ...) is kept as-is in ``model_extra``.
    """

    model_config = ConfigDict(
        extra="allow",
        arbitrary_types_allowed=True,
        validate_assignment=True,
    )

    f: ResponseFormat = ResponseFormat.JSON
    token: Optional[str] = None

    @property
    def extra(self) -> Dict[str, Any]:
        return dict(self.model_extra or {})

    def to_dict(self) -> Dict[str, Any]:
        """Flatten into the ordered mapping handed to the encoders."""
        params: Dict[str, Any] = {"f": self.f.value}
        params.update(self.extra)
        if self.token:
            params["token"] = self.token
        return params


class RequestOptions(BaseModel):
    """Options for ``request`` / ``request_async``."""

    model_config = ConfigDict(
        arbitrary_types_allowed=True,
        validate_by_name=True,
        validate_by_alias=True,
    )

    http_method: HTTPMethod = Field(default=HTTPMethod.POST, alias="httpMethod")
    authentication: Optional[AuthenticationManager] = None
    config: Config = Field(default_factory=Config)
