from .._authentication import AuthenticationManager
from ._generate_token import (
    fetch_token,
    fetch_token_async,
    generate_token,
    generate_token_async,
    oauth2_token_url,
)
from ._sessions import ApplicationSession, TokenAuthentication, UserSession
from .models import (
    FetchTokenResponse,
    GenerateTokenCredentials,
    GenerateTokenResponse,
    TokenClient,
)

__all__ = [
    "AuthenticationManager",
    "ApplicationSession",
    "FetchTokenResponse",
    "GenerateTokenCredentials",
    "GenerateTokenResponse",
    "TokenAuthentication",
    "TokenClient",
    "UserSession",
    "fetch_token",
    "fetch_token_async",
    "generate_token",
    "generate_token_async",
    "oauth2_token_url",
]
