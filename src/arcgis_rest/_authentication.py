from typing import Protocol, runtime_checkable


@runtime_checkable
class AuthenticationManager(Protocol):
    """Anything able to supply a token for a request URL.

    Implementations decide how the token is obtained (a fixed value, a
    username/password session, app credentials, ...). The dispatcher calls
    ``get_token_async`` from ``request_async`` and ``get_token`` from
    ``request`` and never keeps the returned value.
    """

    def get_token(self, url: str) -> str: ...

    async def get_token_async(self, url: str) -> str: ...
