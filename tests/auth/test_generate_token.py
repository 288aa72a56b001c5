from datetime import datetime, timedelta, timezone

import pytest
from pytest_httpx import HTTPXMock

from arcgis_rest import (
    AuthenticationError,
    GenerateTokenCredentials,
    RequestError,
    RequestOptions,
    TokenAuthentication,
    fetch_token,
    fetch_token_async,
    generate_token,
    generate_token_async,
)
from arcgis_rest.auth import oauth2_token_url
from tests.helpers import form_field


class TestGenerateToken:
    def test_generate_token_for_username_and_password(
        self, httpx_mock: HTTPXMock, token_url: str, tomorrow: datetime
    ):
        expires = int(tomorrow.timestamp() * 1000)
        httpx_mock.add_response(
            url=token_url,
            method="POST",
            json={"token": "token", "expires": expires, "ssl": True},
        )

        response = generate_token(token_url, {"username": "Casey", "password": "Jones"})

        sent_requests = httpx_mock.get_requests()
        assert len(sent_requests) == 1
        assert sent_requests[0].url == token_url

        body = sent_requests[0].read()
        assert form_field("f", "json") in body
        assert form_field("username", "Casey") in body
        assert form_field("password", "Jones") in body

        assert response.token == "token"
        assert response.expires == expires
        assert response.ssl is True
        assert abs(response.expires_at - tomorrow) < timedelta(seconds=1)

    def test_generate_token_with_options(
        self, httpx_mock: HTTPXMock, token_url: str, tomorrow: datetime
    ):
        httpx_mock.add_response(
            url=token_url,
            method="POST",
            json={"token": "token", "expires": int(tomorrow.timestamp() * 1000)},
        )

        generate_token(
            token_url,
            GenerateTokenCredentials(
                username="Casey",
                password="Jones",
                expiration=60,
                client="referer",
                referer="https://example.com",
            ),
        )

        body = httpx_mock.get_request().read()
        assert form_field("expiration", "60") in body
        assert form_field("client", "referer") in body
        assert form_field("referer", "https://example.com") in body

    def test_generate_token_is_always_posted_without_token(
        self, httpx_mock: HTTPXMock, token_url: str, tomorrow: datetime
    ):
        httpx_mock.add_response(
            url=token_url,
            method="POST",
            json={"token": "token", "expires": int(tomorrow.timestamp() * 1000)},
        )

        generate_token(
            token_url,
            {"username": "Casey", "password": "Jones"},
            RequestOptions(
                http_method="GET", authentication=TokenAuthentication("other")
            ),
        )

        sent_request = httpx_mock.get_request()
        assert sent_request.method == "POST"
        assert b'name="token"' not in sent_request.read()

    def test_generate_token_accepts_options_mapping(
        self, httpx_mock: HTTPXMock, token_url: str, tomorrow: datetime
    ):
        httpx_mock.add_response(
            url=token_url,
            method="POST",
            json={"token": "token", "expires": int(tomorrow.timestamp() * 1000)},
        )

        response = generate_token(
            token_url,
            {"username": "Casey", "password": "Jones"},
            {"http_method": "GET", "config": {"timeout": 5.0}},
        )

        assert httpx_mock.get_request().method == "POST"
        assert response.token == "token"

    def test_generate_token_invalid_credentials(
        self, httpx_mock: HTTPXMock, token_url: str
    ):
        httpx_mock.add_response(
            url=token_url,
            method="POST",
            json={
                "error": {
                    "code": 400,
                    "message": "Unable to generate token.",
                    "details": ["Invalid username or password."],
                }
            },
        )

        with pytest.raises(RequestError) as exc_info:
            generate_token(token_url, {"username": "Casey", "password": "wrong"})

        assert exc_info.value.details == ["Invalid username or password."]

    def test_generate_token_without_token_in_response(
        self, httpx_mock: HTTPXMock, token_url: str
    ):
        httpx_mock.add_response(url=token_url, method="POST", json={"expires": 0})

        with pytest.raises(AuthenticationError, match="No token returned"):
            generate_token(token_url, {"username": "Casey", "password": "Jones"})

    @pytest.mark.anyio
    async def test_generate_token_async(
        self, httpx_mock: HTTPXMock, token_url: str, tomorrow: datetime
    ):
        expires = int(tomorrow.timestamp() * 1000)
        httpx_mock.add_response(
            url=token_url, method="POST", json={"token": "token", "expires": expires}
        )

        response = await generate_token_async(
            token_url, {"username": "Casey", "password": "Jones"}
        )

        body = httpx_mock.get_request().read()
        assert form_field("username", "Casey") in body
        assert response.token == "token"
        assert response.expires == expires


class TestFetchToken:
    def test_fetch_token_with_client_credentials(
        self, httpx_mock: HTTPXMock, portal: str
    ):
        url = oauth2_token_url(portal)
        httpx_mock.add_response(
            url=url,
            method="POST",
            json={"access_token": "app-token", "expires_in": 7200},
        )

        response = fetch_token(url, "clientId", "clientSecret")

        body = httpx_mock.get_request().read()
        assert form_field("client_id", "clientId") in body
        assert form_field("client_secret", "clientSecret") in body
        assert form_field("grant_type", "client_credentials") in body

        assert response.token == "app-token"
        expected = datetime.now(timezone.utc) + timedelta(seconds=7200)
        assert abs(response.expires - expected) < timedelta(seconds=5)

    def test_oauth2_token_url(self):
        assert (
            oauth2_token_url("https://example.maps.arcgis.com/sharing/rest/")
            == "https://example.maps.arcgis.com/sharing/rest/oauth2/token"
        )

    @pytest.mark.anyio
    async def test_fetch_token_async(self, httpx_mock: HTTPXMock, portal: str):
        url = oauth2_token_url(portal)
        httpx_mock.add_response(
            url=url,
            method="POST",
            json={"access_token": "app-token", "expires_in": 7200},
        )

        response = await fetch_token_async(url, "clientId", "clientSecret")

        assert response.token == "app-token"

    @pytest.mark.anyio
    async def test_fetch_token_without_access_token(
        self, httpx_mock: HTTPXMock, portal: str
    ):
        url = oauth2_token_url(portal)
        httpx_mock.add_response(url=url, method="POST", json={})

        with pytest.raises(AuthenticationError):
            await fetch_token_async(url, "clientId", "clientSecret")
