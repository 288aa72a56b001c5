from datetime import datetime, timedelta, timezone
from typing import Any, Mapping, Union

from .._request import OptionsLike, _merge_options, request, request_async
from .._utils.constants import DEFAULT_PORTAL, OAUTH2_TOKEN_PATH
from ..models.errors import AuthenticationError
from ..models.request import HTTPMethod, RequestOptions
from .models import FetchTokenResponse, GenerateTokenCredentials, GenerateTokenResponse

CredentialsLike = Union[GenerateTokenCredentials, Mapping[str, Any]]


def _generate_token_params(credentials: CredentialsLike) -> dict[str, Any]:
    if not isinstance(credentials, GenerateTokenCredentials):
        credentials = GenerateTokenCredentials.model_validate(dict(credentials))
    return {**credentials.model_dump(exclude_none=True), "f": "json"}


def _parse_generate_token(url: str, response: Any) -> GenerateTokenResponse:
    if not isinstance(response, Mapping) or not response.get("token"):
        raise AuthenticationError(url, response)
    return GenerateTokenResponse.model_validate(response)


def _fetch_token_params(client_id: str, client_secret: str) -> dict[str, Any]:
    return {
        "client_id": client_id,
        "client_secret": client_secret,
        "grant_type": "client_credentials",
        "f": "json",
    }


def _parse_fetch_token(url: str, response: Any) -> FetchTokenResponse:
    if not isinstance(response, Mapping) or not response.get("access_token"):
        raise AuthenticationError(url, response)
    expires_in = int(response.get("expires_in", 0))
    return FetchTokenResponse(
        token=response["access_token"],
        expires=datetime.now(timezone.utc) + timedelta(seconds=expires_in),
    )


def oauth2_token_url(portal: str = DEFAULT_PORTAL) -> str:
    return f"{portal.rstrip('/')}/{OAUTH2_TOKEN_PATH}"


def generate_token(
    url: str,
    credentials: CredentialsLike,
    options: OptionsLike = None,
) -> GenerateTokenResponse:
    """Generate a token from a username and password.

    Args:
        url: The ``generateToken`` endpoint, e.g.
            ``https://www.arcgis.com/sharing/rest/generateToken``.
        credentials: ``username`` and ``password``, plus the optional
            ``expiration`` (minutes), ``referer`` and ``client``.
        options: Request options. Token requests are always sent as ``POST``.

    Returns:
        GenerateTokenResponse: The token and its expiration.

    Raises:
        RequestError: If the endpoint rejects the credentials.
        AuthenticationError: If the endpoint answers without a token.
    """
    response = request(url, _generate_token_params(credentials), _post(options))
    return _parse_generate_token(url, response)


async def generate_token_async(
    url: str,
    credentials: CredentialsLike,
    options: OptionsLike = None,
) -> GenerateTokenResponse:
    """Asynchronously generate a token from a username and password."""
    response = await request_async(
        url, _generate_token_params(credentials), _post(options)
    )
    return _parse_generate_token(url, response)


def fetch_token(
    url: str,
    client_id: str,
    client_secret: str,
    options: OptionsLike = None,
) -> FetchTokenResponse:
    """Request an app token with the OAuth2 ``client_credentials`` grant.

    Args:
        url: The ``oauth2/token`` endpoint of the portal.
        client_id: The registered application's client id.
        client_secret: The registered application's client secret.
        options: Request options. Token requests are always sent as ``POST``.

    Returns:
        FetchTokenResponse: The access token and when it expires.
    """
    response = request(
        url, _fetch_token_params(client_id, client_secret), _post(options)
    )
    return _parse_fetch_token(url, response)


async def fetch_token_async(
    url: str,
    client_id: str,
    client_secret: str,
    options: OptionsLike = None,
) -> FetchTokenResponse:
    """Asynchronously request an app token with ``client_credentials``."""
    response = await request_async(
        url, _fetch_token_params(client_id, client_secret), _post(options)
    )
    return _parse_fetch_token(url, response)


def _post(options: OptionsLike) -> RequestOptions:
    # Credentials never go in a query string, and a token request
    # cannot itself be authenticated.
    return _merge_options(options).model_copy(
        update={"http_method": HTTPMethod.POST, "authentication": None}
    )
