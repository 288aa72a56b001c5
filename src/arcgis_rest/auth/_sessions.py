import asyncio
import threading
from abc import ABC, abstractmethod
from datetime import datetime, timedelta, timezone
from logging import getLogger
from typing import Optional

from .._config import Config
from .._utils.constants import DEFAULT_PORTAL, GENERATE_TOKEN_PATH, TOKEN_REFRESH_MARGIN
from ..models.request import RequestOptions
from ._generate_token import (
    fetch_token,
    fetch_token_async,
    generate_token,
    generate_token_async,
    oauth2_token_url,
)
from .models import FetchTokenResponse, GenerateTokenCredentials, GenerateTokenResponse

logger = getLogger("arcgis_rest")


class TokenAuthentication:
    """Authenticates every request with the same, caller-supplied token."""

    def __init__(self, token: str) -> None:
        self.token = token

    def get_token(self, url: str) -> str:
        return self.token

    async def get_token_async(self, url: str) -> str:
        return self.token

    def __repr__(self) -> str:
        return "TokenAuthentication(token='***')"


class _Session(ABC):
    """Caches one token and renews it shortly before it expires."""

    def __init__(
        self,
        portal: str = DEFAULT_PORTAL,
        token: Optional[str] = None,
        token_expires: Optional[datetime] = None,
        config: Optional[Config] = None,
    ) -> None:
        self.portal = portal.rstrip("/")
        self.token = token
        # Naive datetimes are taken as UTC
        if token_expires is not None and token_expires.tzinfo is None:
            token_expires = token_expires.replace(tzinfo=timezone.utc)
        self.token_expires = token_expires
        self._options = RequestOptions(config=config or Config())
        self._lock = threading.Lock()
        self._async_lock = asyncio.Lock()

    def is_token_valid(self) -> bool:
        if not self.token or self.token_expires is None:
            return False
        margin = timedelta(seconds=TOKEN_REFRESH_MARGIN)
        return datetime.now(timezone.utc) + margin < self.token_expires

    def _store(self, token: str, expires: datetime) -> str:
        self.token = token
        self.token_expires = expires
        logger.debug(f"Token for {self.portal} renewed, expires {expires.isoformat()}")
        return token

    @abstractmethod
    def _renew(self) -> str:
        pass

    @abstractmethod
    async def _renew_async(self) -> str:
        pass

    def get_token(self, url: str) -> str:
        with self._lock:
            if self.is_token_valid():
                return self.token  # type: ignore[return-value]
            return self._renew()

    async def get_token_async(self, url: str) -> str:
        async with self._async_lock:
            if self.is_token_valid():
                return self.token  # type: ignore[return-value]
            return await self._renew_async()


class UserSession(_Session):
    """Authenticates requests as a named user.

    A token is generated from the username and password on first use and
    generated again once it is about to expire.

    Examples:
        ```python
        from arcgis_rest import UserSession, request

        session = UserSession(username="jsmith", password="123456")
        request(url, options={"authentication": session})
        ```
    """

    def __init__(
        self,
        username: str,
        password: str,
        portal: str = DEFAULT_PORTAL,
        expiration: Optional[int] = None,
        token: Optional[str] = None,
        token_expires: Optional[datetime] = None,
        config: Optional[Config] = None,
    ) -> None:
        super().__init__(
            portal=portal, token=token, token_expires=token_expires, config=config
        )
        self.username = username
        self._credentials = GenerateTokenCredentials(
            username=username, password=password, expiration=expiration
        )

    @property
    def token_url(self) -> str:
        return f"{self.portal}/{GENERATE_TOKEN_PATH}"

    def _store_generated(self, response: GenerateTokenResponse) -> str:
        return self._store(response.token, response.expires_at)

    def _renew(self) -> str:
        response = generate_token(self.token_url, self._credentials, self._options)
        return self._store_generated(response)

    async def _renew_async(self) -> str:
        response = await generate_token_async(
            self.token_url, self._credentials, self._options
        )
        return self._store_generated(response)

    def __repr__(self) -> str:
        return f"UserSession(username={self.username!r}, portal={self.portal!r})"


class ApplicationSession(_Session):
    """Authenticates requests as a registered application.

    Uses the OAuth2 ``client_credentials`` grant of the portal and renews
    the app token once it is about to expire.
    """

    def __init__(
        self,
        client_id: str,
        client_secret: str,
        portal: str = DEFAULT_PORTAL,
        token: Optional[str] = None,
        token_expires: Optional[datetime] = None,
        config: Optional[Config] = None,
    ) -> None:
        super().__init__(
            portal=portal, token=token, token_expires=token_expires, config=config
        )
        self.client_id = client_id
        self._client_secret = client_secret

    @property
    def token_url(self) -> str:
        return oauth2_token_url(self.portal)

    def _store_fetched(self, response: FetchTokenResponse) -> str:
        return self._store(response.token, response.expires)

    def _renew(self) -> str:
        response = fetch_token(
            self.token_url, self.client_id, self._client_secret, self._options
        )
        return self._store_fetched(response)

    async def _renew_async(self) -> str:
        response = await fetch_token_async(
            self.token_url, self.client_id, self._client_secret, self._options
        )
        return self._store_fetched(response)

    def __repr__(self) -> str:
        return (
            f"ApplicationSession(client_id={self.client_id!r}, portal={self.portal!r})"
        )
