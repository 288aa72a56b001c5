"""Client for ArcGIS REST API endpoints.

Examples:
    ```python
    from arcgis_rest import request

    response = request(
        "https://www.arcgis.com/sharing/rest/search", {"q": "parks"}
    )
    ```
"""

from ._authentication import AuthenticationManager
from ._config import Config
from ._request import request, request_async
from ._utils import FormData, encode_form_data, encode_query_string
from ._utils._check_for_errors import check_for_errors
from .auth import (
    ApplicationSession,
    FetchTokenResponse,
    GenerateTokenCredentials,
    GenerateTokenResponse,
    TokenAuthentication,
    UserSession,
    fetch_token,
    fetch_token_async,
    generate_token,
    generate_token_async,
)
from .models import (
    ArcGISRestError,
    AuthenticationError,
    HTTPMethod,
    RequestError,
    RequestOptions,
    RequestParams,
    ResponseFormat,
)

__all__ = [
    "ApplicationSession",
    "ArcGISRestError",
    "AuthenticationError",
    "AuthenticationManager",
    "Config",
    "FetchTokenResponse",
    "FormData",
    "GenerateTokenCredentials",
    "GenerateTokenResponse",
    "HTTPMethod",
    "RequestError",
    "RequestOptions",
    "RequestParams",
    "ResponseFormat",
    "TokenAuthentication",
    "UserSession",
    "check_for_errors",
    "encode_form_data",
    "encode_query_string",
    "fetch_token",
    "fetch_token_async",
    "generate_token",
    "generate_token_async",
    "request",
    "request_async",
]
