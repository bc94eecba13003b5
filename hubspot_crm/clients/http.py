"""
HTTP transport for the HubSpot API.

`HTTPClient` and `AsyncHTTPClient` wrap an httpx client together with the
portal's domain and bearer token. Services build requests with `begin()` and
execute them with `send()`, which returns the decoded body or raises one of the
errors in `hubspot_crm.exceptions`.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from functools import lru_cache
from typing import Any

import httpx
from pydantic import TypeAdapter, ValidationError
from pydantic_core import PydanticSerializationError, to_jsonable_python

from ..exceptions import (
    HttpError,
    HubspotServiceError,
    JsonError,
    MissingDomainError,
    MissingPortalIdError,
    MissingTokenError,
    ResponseDecodeError,
)
from ..models.errors import PlatformErrorResponse
from .pipeline import (
    AsyncMiddleware,
    AsyncPipeline,
    Middleware,
    Pipeline,
    SDKRequest,
    SDKResponse,
    compose,
    compose_async,
)

logger = logging.getLogger(__name__)

_CORRELATION_HEADER = "x-hubspot-correlation-id"


@dataclass(frozen=True, slots=True)
class ClientConfig:
    """Connection settings shared by every service of a client."""

    domain: str
    token: str = field(repr=False)
    portal_id: str
    timeout: float = 30.0
    log_requests: bool = False
    http_client: httpx.Client | None = None
    async_http_client: httpx.AsyncClient | None = None
    transport: httpx.BaseTransport | None = None
    async_transport: httpx.AsyncBaseTransport | None = None

    def __post_init__(self) -> None:
        if not self.domain:
            raise MissingDomainError()
        if not self.token:
            raise MissingTokenError()
        if not self.portal_id:
            raise MissingPortalIdError()

    def url_for(self, path: str) -> str:
        return f"https://{self.domain}/{path}"


# =============================================================================
# Encoding / decoding
# =============================================================================


def encode_body(value: Any) -> Any:
    """Convert a request body (models, dicts, lists) into JSON-compatible data."""
    try:
        return to_jsonable_python(value, by_alias=True)
    except PydanticSerializationError as e:
        raise JsonError(f"Unable to encode request body: {e}") from e


@lru_cache(maxsize=256)
def _type_adapter(response_type: Any) -> TypeAdapter[Any]:
    return TypeAdapter(response_type)


def decode_response(response: SDKResponse, response_type: Any = None) -> Any:
    """
    Decode a response into `response_type`, or raise the matching error.

    An empty success body decodes as JSON ``null``, so `response_type=None`
    accepts endpoints that return no content.
    """
    try:
        body = response.content.decode("utf-8")
    except UnicodeDecodeError as e:
        raise ResponseDecodeError(
            f"Response body is not valid UTF-8 (status {response.status_code})",
            status_code=response.status_code,
        ) from e

    if response.is_success:
        target = type(None) if response_type is None else response_type
        try:
            return _type_adapter(target).validate_json(body or "null")
        except ValidationError as e:
            raise JsonError(f"Unable to decode response body: {e}") from e

    try:
        error = PlatformErrorResponse.model_validate_json(body)
    except ValidationError:
        # Not HubSpot's structured error shape; surface the body verbatim.
        raise HubspotServiceError(body, status_code=response.status_code, body=body) from None
    raise HubspotServiceError(
        error.formatted(),
        status_code=response.status_code,
        body=body,
        category=error.category,
        context=error.context.model_dump(),
    )


def _to_sdk_response(response: httpx.Response) -> SDKResponse:
    sdk_response = SDKResponse(
        status_code=response.status_code,
        headers=list(response.headers.multi_items()),
        content=response.content,
    )
    correlation_id = response.headers.get(_CORRELATION_HEADER)
    if correlation_id:
        sdk_response.context["request_id"] = correlation_id
    return sdk_response


def _log_response(level: int, req: SDKRequest, response: SDKResponse) -> None:
    elapsed = response.context.get("elapsed_seconds", 0.0)
    if response.is_success:
        logger.log(
            level,
            "HubSpot response: %s %s -> %d (%.3fs)",
            req.method,
            req.url,
            response.status_code,
            elapsed,
        )
    else:
        logger.warning(
            "HubSpot error response: %s %s -> %d (%.3fs, correlation id %s)",
            req.method,
            req.url,
            response.status_code,
            elapsed,
            response.context.get("request_id", "-"),
        )


# =============================================================================
# Middleware
# =============================================================================


def _bearer_auth(token: str) -> Middleware:
    def middleware(req: SDKRequest, next: Pipeline) -> SDKResponse:
        req.headers.append(("Authorization", f"Bearer {token}"))
        return next(req)

    return middleware


def _request_logging(log_requests: bool) -> Middleware:
    level = logging.INFO if log_requests else logging.DEBUG

    def middleware(req: SDKRequest, next: Pipeline) -> SDKResponse:
        logger.log(level, "HubSpot request: %s %s", req.method, req.url)
        started = time.monotonic()
        response = next(req)
        response.context["elapsed_seconds"] = time.monotonic() - started
        _log_response(level, req, response)
        return response

    return middleware


def _async_bearer_auth(token: str) -> AsyncMiddleware:
    async def middleware(req: SDKRequest, next: AsyncPipeline) -> SDKResponse:
        req.headers.append(("Authorization", f"Bearer {token}"))
        return await next(req)

    return middleware


def _async_request_logging(log_requests: bool) -> AsyncMiddleware:
    level = logging.INFO if log_requests else logging.DEBUG

    async def middleware(req: SDKRequest, next: AsyncPipeline) -> SDKResponse:
        logger.log(level, "HubSpot request: %s %s", req.method, req.url)
        started = time.monotonic()
        response = await next(req)
        response.context["elapsed_seconds"] = time.monotonic() - started
        _log_response(level, req, response)
        return response

    return middleware


# =============================================================================
# Clients
# =============================================================================


class HTTPClient:
    """Synchronous HubSpot transport."""

    def __init__(self, config: ClientConfig):
        self._config = config
        self._owns_client = config.http_client is None
        self._client = config.http_client or httpx.Client(
            timeout=config.timeout,
            transport=config.transport,
        )
        self._pipeline = compose(
            [_bearer_auth(config.token), _request_logging(config.log_requests)],
            self._send,
        )

    @property
    def domain(self) -> str:
        return self._config.domain

    @property
    def portal_id(self) -> str:
        return self._config.portal_id

    def __enter__(self) -> HTTPClient:
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def close(self) -> None:
        """Close the underlying httpx client if this transport created it."""
        if self._owns_client:
            self._client.close()

    def begin(self, method: str, path: str, *, json: Any = None) -> SDKRequest:
        """
        Create a request for `https://{domain}/{path}`.

        Args:
            method: The HTTP request method
            path: The request path, including any query string
            json: Optional body; encoded to JSON-compatible data immediately
        """
        return SDKRequest(
            method=method.upper(),
            url=self._config.url_for(path),
            json=encode_body(json) if json is not None else None,
        )

    def send(self, request: SDKRequest, response_type: Any = None) -> Any:
        """Authenticate and perform `request`, decoding the body into `response_type`."""
        return decode_response(self._pipeline(request), response_type)

    def _send(self, req: SDKRequest) -> SDKResponse:
        try:
            response = self._client.request(
                req.method,
                req.url,
                headers=req.headers,
                json=req.json,
            )
        except httpx.HTTPError as e:
            raise HttpError(
                f"{req.method} {req.url} failed: {e!r}", method=req.method, url=req.url
            ) from e
        return _to_sdk_response(response)


class AsyncHTTPClient:
    """Asynchronous HubSpot transport."""

    def __init__(self, config: ClientConfig):
        self._config = config
        self._owns_client = config.async_http_client is None
        self._client = config.async_http_client or httpx.AsyncClient(
            timeout=config.timeout,
            transport=config.async_transport,
        )
        self._pipeline = compose_async(
            [_async_bearer_auth(config.token), _async_request_logging(config.log_requests)],
            self._send,
        )

    @property
    def domain(self) -> str:
        return self._config.domain

    @property
    def portal_id(self) -> str:
        return self._config.portal_id

    async def __aenter__(self) -> AsyncHTTPClient:
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.close()

    async def close(self) -> None:
        """Close the underlying httpx client if this transport created it."""
        if self._owns_client:
            await self._client.aclose()

    def begin(self, method: str, path: str, *, json: Any = None) -> SDKRequest:
        """Create a request for `https://{domain}/{path}`; see `HTTPClient.begin`."""
        return SDKRequest(
            method=method.upper(),
            url=self._config.url_for(path),
            json=encode_body(json) if json is not None else None,
        )

    async def send(self, request: SDKRequest, response_type: Any = None) -> Any:
        """Authenticate and perform `request`, decoding the body into `response_type`."""
        return decode_response(await self._pipeline(request), response_type)

    async def _send(self, req: SDKRequest) -> SDKResponse:
        try:
            response = await self._client.request(
                req.method,
                req.url,
                headers=req.headers,
                json=req.json,
            )
        except httpx.HTTPError as e:
            raise HttpError(
                f"{req.method} {req.url} failed: {e!r}", method=req.method, url=req.url
            ) from e
        return _to_sdk_response(response)
