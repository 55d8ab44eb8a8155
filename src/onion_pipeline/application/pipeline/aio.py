"""Application pipeline – AsyncPipeline.

Same chain semantics as :mod:`onion_pipeline.application.pipeline.pipeline`
with awaited ``process`` / ``handle`` calls::

    class Timing:
        async def process(self, request, next):
            start = time.perf_counter()
            response = await next.handle(request)
            ...
            return response

    response = await AsyncPipeline(handler).add(Timing()).handle(request)

A middleware or final handler that returns a plain value instead of an
awaitable is accepted as-is.
"""
from __future__ import annotations

import inspect
from typing import Any, Iterable

from onion_pipeline.application.pipeline.contracts import (
    AsyncFinalHandler,
    AsyncMiddleware,
    conforms_to_handler,
    conforms_to_middleware,
)
from onion_pipeline.application.pipeline.pipeline import PipelineSetup, ensure_final_handler
from onion_pipeline.kernel.errors import InvalidMiddlewareError
from onion_pipeline.observability.logging import get_logger

_log = get_logger(__name__)


async def _resolve(value: Any) -> Any:
    if inspect.isawaitable(value):
        return await value
    return value


class _AsyncNext:
    """Awaitable continuation bound to one position of one compiled chain."""

    __slots__ = ("_chain", "_position", "called")

    def __init__(self, chain: AsyncCompiledPipeline, position: int) -> None:
        self._chain = chain
        self._position = position
        self.called = False

    async def handle(self, request: Any) -> Any:
        self.called = True
        return await self._chain._dispatch(request, self._position)


class AsyncCompiledPipeline:
    """Immutable async middleware chain around a final handler."""

    __slots__ = ("_final_handler", "_middleware")

    def __init__(self, final_handler: AsyncFinalHandler, middleware: Iterable[AsyncMiddleware] = ()) -> None:
        self._final_handler = ensure_final_handler(final_handler)
        self._middleware: tuple[AsyncMiddleware, ...] = tuple(middleware)

    @property
    def middleware(self) -> tuple[AsyncMiddleware, ...]:
        return self._middleware

    def __len__(self) -> int:
        return len(self._middleware)

    async def handle(self, request: Any) -> Any:
        _log.debug("pipeline.traversal.started", middleware_count=len(self._middleware))
        return await self._dispatch(request, 0)

    async def _dispatch(self, request: Any, position: int) -> Any:
        if position >= len(self._middleware):
            _log.debug("pipeline.final_handler.invoked")
            if conforms_to_handler(self._final_handler):
                return await _resolve(self._final_handler.handle(request))  # type: ignore[union-attr]
            return await _resolve(self._final_handler(request))  # type: ignore[operator]

        entry = self._middleware[position]
        if not conforms_to_middleware(entry):
            raise InvalidMiddlewareError(entry, position=position)

        next_ = _AsyncNext(self, position + 1)
        response = await _resolve(entry.process(request, next_))
        if not next_.called:
            _log.debug("pipeline.short_circuited", position=position, middleware=type(entry).__name__)
        return response


class AsyncPipeline(PipelineSetup):
    """Configurable async pipeline; awaitable ``handle``."""

    def compile(self) -> AsyncCompiledPipeline:
        return AsyncCompiledPipeline(self._final_handler, self._middleware)

    async def handle(self, request: Any) -> Any:
        return await self.compile().handle(request)


__all__ = ["AsyncCompiledPipeline", "AsyncPipeline"]
