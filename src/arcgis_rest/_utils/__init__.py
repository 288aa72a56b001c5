from ._encode_form_data import FormData, encode_form_data, is_binary
from ._encode_query_string import encode_query_string
from ._request_spec import RequestSpec
from ._ssl_context import create_ssl_context, get_httpx_client_kwargs
from ._user_agent import user_agent_value

__all__ = [
    "FormData",
    "RequestSpec",
    "create_ssl_context",
    "encode_form_data",
    "encode_query_string",
    "get_httpx_client_kwargs",
    "is_binary",
    "user_agent_value",
]
