from logging import getLogger
from typing import Any, Mapping, Union

from httpx import AsyncClient, Client, Response

from ._utils import (
    RequestSpec,
    encode_form_data,
    encode_query_string,
    get_httpx_client_kwargs,
    user_agent_value,
)
from ._utils._check_for_errors import check_for_errors
from ._utils.constants import HEADER_ACCEPT, HEADER_USER_AGENT
from .models.request import (
    BINARY_FORMATS,
    JSON_FORMATS,
    TEXT_FORMATS,
    HTTPMethod,
    RequestOptions,
    RequestParams,
    ResponseFormat,
)

logger = getLogger("arcgis_rest")

ParamsLike = Union[RequestParams, Mapping[str, Any], None]
OptionsLike = Union[RequestOptions, Mapping[str, Any], None]


def _merge_params(params: ParamsLike) -> RequestParams:
    # Always a fresh copy: the token gets written into it
    if params is None:
        return RequestParams()
    if isinstance(params, RequestParams):
        return params.model_copy(deep=False)
    return RequestParams.model_validate(dict(params))


def _merge_options(options: OptionsLike) -> RequestOptions:
    if options is None:
        return RequestOptions()
    if isinstance(options, RequestOptions):
        return options
    return RequestOptions.model_validate(dict(options))


def _validate_url(url: str) -> None:
    if not url:
        raise ValueError("A URL is required to make a request.")


def _prepare(
    url: str, params: RequestParams, options: RequestOptions, token: str
) -> RequestSpec:
    if token:
        params.token = token

    spec = RequestSpec(
        method=options.http_method.value,
        url=url,
        headers={
            HEADER_ACCEPT: "*/*",
            HEADER_USER_AGENT: user_agent_value(),
        },
    )

    encoded = params.to_dict()
    if options.http_method is HTTPMethod.GET:
        spec.url = f"{url}?{encode_query_string(encoded)}"
    elif options.http_method is HTTPMethod.POST:
        spec.body = encode_form_data(encoded)

    return spec


def _read_body(response: Response, response_format: ResponseFormat) -> Any:
    if response_format in JSON_FORMATS:
        return check_for_errors(response.json())
    if response_format in TEXT_FORMATS:
        return response.text
    if response_format in BINARY_FORMATS:
        return response.content
    raise ValueError(f"Unsupported response format: {response_format!r}")


def request(
    url: str,
    params: ParamsLike = None,
    options: OptionsLike = None,
) -> Any:
    """Make a request to an ArcGIS REST API endpoint.

    Defaults to a ``POST`` with ``f=json``. Parameters and options given by
    the caller override those defaults key by key. When
    ``options.authentication`` is set, its token is sent as the ``token``
    parameter.

    Args:
        url: The URL of the ArcGIS REST API endpoint.
        params: The parameters to pass to the endpoint.
        options: ``http_method`` (``"GET"`` or ``"POST"``), ``authentication``
            and transport ``config``.

    Returns:
        The decoded body: a ``dict`` for json/geojson, ``str`` for
        text/html and ``bytes`` for image/zip.

    Raises:
        RequestError: If a json/geojson body carries an ``error`` object.
        httpx.HTTPError: If the request could not be sent.

    Examples:
        ```python
        from arcgis_rest import request

        response = request("https://www.arcgis.com/sharing/rest")
        response["currentVersion"]  # 5.2
        ```
    """
    _validate_url(url)
    request_params = _merge_params(params)
    request_options = _merge_options(options)

    token = ""
    if request_options.authentication is not None:
        token = request_options.authentication.get_token(url)

    spec = _prepare(url, request_params, request_options, token)
    logger.debug(f"Request: {spec.method} {url}")

    with Client(**get_httpx_client_kwargs(request_options.config)) as client:
        response = client.request(spec.method, spec.url, **spec.to_httpx_kwargs())
        return _read_body(response, request_params.f)


async def request_async(
    url: str,
    params: ParamsLike = None,
    options: OptionsLike = None,
) -> Any:
    """Asynchronously make a request to an ArcGIS REST API endpoint.

    Same contract as ``request``; the token comes from
    ``authentication.get_token_async``.

    Examples:
        ```python
        from arcgis_rest import request_async

        response = await request_async(
            "https://www.arcgis.com/sharing/rest/search",
            {"q": "parks"},
            {"http_method": "GET"},
        )
        response["total"]  # 78379
        ```
    """
    _validate_url(url)
    request_params = _merge_params(params)
    request_options = _merge_options(options)

    token = ""
    if request_options.authentication is not None:
        token = await request_options.authentication.get_token_async(url)

    spec = _prepare(url, request_params, request_options, token)
    logger.debug(f"Request: {spec.method} {url}")

    async with AsyncClient(
        **get_httpx_client_kwargs(request_options.config)
    ) as client:
        response = await client.request(
            spec.method, spec.url, **spec.to_httpx_kwargs()
        )
        return _read_body(response, request_params.f)
