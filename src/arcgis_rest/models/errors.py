from typing import Any, List, Optional, Union

from .._utils.constants import UNKNOWN_ERROR_CODE


class ArcGISRestError(Exception):
    """Base class for errors raised by this package."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)


class RequestError(ArcGISRestError):
    """Raised when an endpoint answers with an ``error`` object in its body.

    ArcGIS services report most failures with an HTTP 200 and a JSON body
    such as ``{"error": {"code": 498, "message": "Invalid token."}}``. The
    fields of that object are exposed as attributes and the whole decoded
    body is kept on ``response`` for diagnostics.
    """

    def __init__(
        self,
        message: Optional[str] = None,
        code: Optional[Union[int, str]] = None,
        response: Any = None,
        message_code: Optional[str] = None,
        details: Optional[List[str]] = None,
    ):
        self.code = code if code is not None else UNKNOWN_ERROR_CODE
        self.message_code = message_code
        self.details = details or []
        self.response = response
        super().__init__(message or UNKNOWN_ERROR_CODE)

    def __str__(self) -> str:
        return f"{self.code}: {self.message}"

    def __repr__(self) -> str:
        return (
            f"RequestError(code={self.code!r}, message={self.message!r}, "
            f"message_code={self.message_code!r})"
        )


class AuthenticationError(ArcGISRestError):
    """Raised when a token endpoint answers without a usable token."""

    def __init__(self, url: str, response: Any = None):
        self.url = url
        self.response = response
        super().__init__(f"No token returned by '{url}'")
