from .errors import ArcGISRestError, AuthenticationError, RequestError
from .request import (
    BINARY_FORMATS,
    JSON_FORMATS,
    TEXT_FORMATS,
    HTTPMethod,
    RequestOptions,
    RequestParams,
    ResponseFormat,
)

__all__ = [
    "ArcGISRestError",
    "AuthenticationError",
    "RequestError",
    "HTTPMethod",
    "ResponseFormat",
    "RequestParams",
    "RequestOptions",
    "JSON_FORMATS",
    "TEXT_FORMATS",
    "BINARY_FORMATS",
]
