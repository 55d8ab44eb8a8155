"""Application pipeline – capability contracts.

Three shapes meet at the pipeline boundary::

    class RequestHandler(Protocol):
        def handle(self, request): ...

    class Middleware(Protocol):
        def process(self, request, next: RequestHandler): ...

    FinalHandler = RequestHandler | Callable[[request], response]

Request and response are opaque: nothing here inspects their fields. No base
class is required; conformance is checked on shape, not lineage.
"""
from __future__ import annotations

from typing import Any, Awaitable, Callable, Protocol, Union, runtime_checkable


@runtime_checkable
class RequestHandler(Protocol):
    def handle(self, request: Any) -> Any: ...


@runtime_checkable
class Middleware(Protocol):
    def process(self, request: Any, next: RequestHandler) -> Any: ...  # noqa: A002


@runtime_checkable
class AsyncRequestHandler(Protocol):
    async def handle(self, request: Any) -> Any: ...


@runtime_checkable
class AsyncMiddleware(Protocol):
    async def process(self, request: Any, next: AsyncRequestHandler) -> Any: ...  # noqa: A002


FinalHandler = Union[RequestHandler, Callable[[Any], Any]]
AsyncFinalHandler = Union[AsyncRequestHandler, Callable[[Any], Awaitable[Any]]]


def _has_method(obj: Any, name: str) -> bool:
    # Classes expose their methods as plain functions; only instances qualify.
    if isinstance(obj, type):
        return False
    return callable(getattr(obj, name, None))


def conforms_to_middleware(obj: Any) -> bool:
    """Return ``True`` when *obj* exposes a callable ``process`` method."""
    return _has_method(obj, "process")


def conforms_to_handler(obj: Any) -> bool:
    """Return ``True`` when *obj* exposes a callable ``handle`` method."""
    return _has_method(obj, "handle")


def conforms_to_final_handler(obj: Any) -> bool:
    """A final handler is either a request handler or a plain callable."""
    return conforms_to_handler(obj) or callable(obj)


__all__ = [
    "AsyncFinalHandler",
    "AsyncMiddleware",
    "AsyncRequestHandler",
    "FinalHandler",
    "Middleware",
    "RequestHandler",
    "conforms_to_final_handler",
    "conforms_to_handler",
    "conforms_to_middleware",
]
