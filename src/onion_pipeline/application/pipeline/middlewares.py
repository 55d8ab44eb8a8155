"""Application pipeline – built-in middleware implementations.

None of these inspect request or response fields; behaviour that depends on
them is supplied by the caller as a callable.
"""
from __future__ import annotations

import time
from typing import Any, Callable, Mapping

from onion_pipeline.application.pipeline.contracts import RequestHandler
from onion_pipeline.observability.logging import get_logger


class LoggingMiddleware:
    """Log request completion or failure with timing."""

    def __init__(self, logger: Any = None, *, name: Callable[[Any], str] | None = None) -> None:
        self._log = logger or get_logger(__name__)
        self._name = name or (lambda request: type(request).__name__)

    def process(self, request: Any, next: RequestHandler) -> Any:  # noqa: A002
        name = self._name(request)
        start = time.perf_counter()
        try:
            response = next.handle(request)
        except Exception:
            duration = (time.perf_counter() - start) * 1000
            self._log.error("pipeline.request.failed", request=name, duration_ms=round(duration, 2), exc_info=True)
            raise
        duration = (time.perf_counter() - start) * 1000
        self._log.info("pipeline.request.completed", request=name, duration_ms=round(duration, 2))
        return response


class TimingMiddleware:
    """Report ``(request, response, elapsed_ms)`` for the inner chain to *callback*."""

    def __init__(self, callback: Callable[[Any, Any, float], None]) -> None:
        self._callback = callback

    def process(self, request: Any, next: RequestHandler) -> Any:  # noqa: A002
        start = time.perf_counter()
        response = next.handle(request)
        self._callback(request, response, (time.perf_counter() - start) * 1000)
        return response


class ShortCircuitMiddleware:
    """Answer with ``response_factory(request)`` when *predicate* holds.

    The rest of the chain, final handler included, is skipped for that
    request.
    """

    def __init__(
        self,
        predicate: Callable[[Any], bool],
        response_factory: Callable[[Any], Any],
    ) -> None:
        self._predicate = predicate
        self._response_factory = response_factory

    def process(self, request: Any, next: RequestHandler) -> Any:  # noqa: A002
        if self._predicate(request):
            return self._response_factory(request)
        return next.handle(request)


class ExceptionMappingMiddleware:
    """Turn exceptions raised by the inner chain into responses.

    *mapping* goes from exception type to ``factory(request, exc)``. The most
    specific type in the exception's MRO wins; unmapped errors propagate.
    """

    def __init__(self, mapping: Mapping[type[BaseException], Callable[[Any, BaseException], Any]]) -> None:
        self._mapping = dict(mapping)

    def process(self, request: Any, next: RequestHandler) -> Any:  # noqa: A002
        try:
            return next.handle(request)
        except Exception as exc:
            factory = self._lookup(type(exc))
            if factory is None:
                raise
            return factory(request, exc)

    def _lookup(self, exc_type: type[BaseException]) -> Callable[[Any, BaseException], Any] | None:
        for klass in exc_type.__mro__:
            if klass in self._mapping:
                return self._mapping[klass]
        return None


__all__ = [
    "ExceptionMappingMiddleware",
    "LoggingMiddleware",
    "ShortCircuitMiddleware",
    "TimingMiddleware",
]
