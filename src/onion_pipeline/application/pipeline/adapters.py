"""Application pipeline – adapters from plain callables to the contracts."""
from __future__ import annotations

from typing import Any, Callable

from onion_pipeline.application.pipeline.contracts import RequestHandler


class CallableMiddleware:
    """Wrap ``func(request, next)`` so it satisfies the middleware contract.

    Works for both sync and async functions; the pipeline awaits whatever
    ``process`` returns when running asynchronously.
    """

    __slots__ = ("_func", "name")

    def __init__(self, func: Callable[[Any, RequestHandler], Any]) -> None:
        if not callable(func):
            raise TypeError(f"CallableMiddleware expects a callable, got {type(func).__name__}")
        self._func = func
        self.name = getattr(func, "__name__", type(func).__name__)

    def process(self, request: Any, next: RequestHandler) -> Any:  # noqa: A002
        return self._func(request, next)

    def __repr__(self) -> str:
        return f"CallableMiddleware({self.name})"


class CallableHandler:
    """Wrap ``func(request)`` so it satisfies the request-handler contract."""

    __slots__ = ("_func",)

    def __init__(self, func: Callable[[Any], Any]) -> None:
        if not callable(func):
            raise TypeError(f"CallableHandler expects a callable, got {type(func).__name__}")
        self._func = func

    def handle(self, request: Any) -> Any:
        return self._func(request)


def middleware(func: Callable[[Any, RequestHandler], Any]) -> CallableMiddleware:
    """Decorator form of :class:`CallableMiddleware`.

    Usage::

        @middleware
        def add_server_header(request, next):
            return next.handle(request).with_header("Server", "onion")
    """
    return CallableMiddleware(func)


__all__ = ["CallableHandler", "CallableMiddleware", "middleware"]
