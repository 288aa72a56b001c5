from dataclasses import dataclass, field
from typing import Any, Optional

from ._encode_form_data import FormData


@dataclass
class RequestSpec:
    """Encapsulates one prepared HTTP request.

    Holds what the dispatcher hands to httpx once parameters are encoded:
    the method, the final URL (query string included for ``GET``), the
    multipart body for ``POST`` and the request headers.
    """

    method: str
    url: str
    body: Optional[FormData] = None
    headers: dict[str, Any] = field(default_factory=dict)

    def to_httpx_kwargs(self) -> dict[str, Any]:
        kwargs: dict[str, Any] = {"headers": self.headers}
        if self.body:
            kwargs["files"] = self.body.files
        return kwargs
