"""
Internal request pipeline primitives.

Requests and responses are modelled independently of httpx so that credential
attachment and request logging can be layered as middleware in front of the
network call.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Sequence
from dataclasses import dataclass, field
from typing import Any, Protocol, TypeAlias, TypedDict, cast

Header: TypeAlias = tuple[str, str]


class ResponseContext(TypedDict, total=False):
    elapsed_seconds: float
    request_id: str


@dataclass(slots=True)
class SDKRequest:
    method: str
    url: str
    headers: list[Header] = field(default_factory=list)
    json: Any | None = None


@dataclass(slots=True)
class SDKResponse:
    status_code: int
    headers: list[Header]
    content: bytes
    context: ResponseContext = field(default_factory=lambda: cast(ResponseContext, {}))

    @property
    def is_success(self) -> bool:
        return 200 <= self.status_code < 300


Pipeline: TypeAlias = Callable[[SDKRequest], SDKResponse]
AsyncPipeline: TypeAlias = Callable[[SDKRequest], Awaitable[SDKResponse]]


class Middleware(Protocol):
    def __call__(self, req: SDKRequest, next: Pipeline) -> SDKResponse: ...


class AsyncMiddleware(Protocol):
    async def __call__(self, req: SDKRequest, next: AsyncPipeline) -> SDKResponse: ...


def compose(middlewares: Sequence[Middleware], terminal: Pipeline) -> Pipeline:
    pipeline = terminal
    for middleware in reversed(middlewares):
        next_pipeline = pipeline

        def _wrapped(
            req: SDKRequest, *, _mw: Middleware = middleware, _n: Pipeline = next_pipeline
        ) -> SDKResponse:
            return _mw(req, _n)

        pipeline = _wrapped
    return pipeline


def compose_async(middlewares: Sequence[AsyncMiddleware], terminal: AsyncPipeline) -> AsyncPipeline:
    pipeline = terminal
    for middleware in reversed(middlewares):
        next_pipeline = pipeline

        async def _wrapped(
            req: SDKRequest,
            *,
            _mw: AsyncMiddleware = middleware,
            _n: AsyncPipeline = next_pipeline,
        ) -> SDKResponse:
            return await _mw(req, _n)

        pipeline = _wrapped
    return pipeline
