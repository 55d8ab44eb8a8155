"""Application pipeline – Pipeline and CompiledPipeline.

A pipeline wraps a final handler in an ordered chain of middleware. Each
middleware receives ``next``, a handler bound to the following position of
the chain, and decides whether to call it::

    pipeline = Pipeline(final_handler).add(auth).add(timing)
    response = pipeline.handle(request)

The first middleware added sees the request first and the response last.
Traversal never mutates the configured chain: ``handle`` runs over an
immutable snapshot, so the same pipeline may serve overlapping requests and
may be called again after a traversal completes.
"""
from __future__ import annotations

from typing import Any, Iterable, Self

from onion_pipeline.application.pipeline.contracts import (
    FinalHandler,
    Middleware,
    conforms_to_final_handler,
    conforms_to_handler,
    conforms_to_middleware,
)
from onion_pipeline.config.settings import PipelineSettings
from onion_pipeline.kernel.errors import ConfigurationError, InvalidMiddlewareError
from onion_pipeline.observability.logging import get_logger

_log = get_logger(__name__)


def ensure_final_handler(handler: Any) -> Any:
    """Return *handler* unchanged, or raise :class:`ConfigurationError`."""
    if not conforms_to_final_handler(handler):
        raise ConfigurationError(handler=handler)
    return handler


def select_middleware(entries: Iterable[Any], *, strict: bool, offset: int = 0) -> list[Any]:
    """Return the entries of *entries* that are middleware.

    In strict mode the first non-conforming entry raises
    :class:`InvalidMiddlewareError` and nothing is returned. Otherwise it is
    dropped and a ``pipeline.middleware_skipped`` warning is logged.
    *offset* is the chain length the entries will be appended after.
    """
    accepted: list[Any] = []
    for index, entry in enumerate(entries):
        if conforms_to_middleware(entry):
            accepted.append(entry)
            continue
        if strict:
            raise InvalidMiddlewareError(entry, position=offset + index)
        _log.warning("pipeline.middleware_skipped", position=offset + index, entry_type=type(entry).__name__)
    return accepted


class _Next:
    """Continuation bound to one position of one compiled chain."""

    __slots__ = ("_chain", "_position", "called")

    def __init__(self, chain: CompiledPipeline, position: int) -> None:
        self._chain = chain
        self._position = position
        self.called = False

    def handle(self, request: Any) -> Any:
        self.called = True
        return self._chain._dispatch(request, self._position)

    def __repr__(self) -> str:
        return f"<next position={self._position} of {len(self._chain)}>"


class CompiledPipeline:
    """Immutable middleware chain around a final handler."""

    __slots__ = ("_final_handler", "_middleware")

    def __init__(self, final_handler: FinalHandler, middleware: Iterable[Middleware] = ()) -> None:
        self._final_handler = ensure_final_handler(final_handler)
        self._middleware: tuple[Middleware, ...] = tuple(middleware)

    @property
    def final_handler(self) -> FinalHandler:
        return self._final_handler

    @property
    def middleware(self) -> tuple[Middleware, ...]:
        return self._middleware

    def __len__(self) -> int:
        return len(self._middleware)

    def __repr__(self) -> str:
        names = ", ".join(type(m).__name__ for m in self._middleware)
        return f"{type(self).__name__}([{names}] -> {self._final_handler!r})"

    def handle(self, request: Any) -> Any:
        """Run *request* through the chain and return the resulting response.

        Raises
        ------
        InvalidMiddlewareError
            When the traversal reaches an entry that has no ``process``
            method. Middleware before it have already run.
        """
        _log.debug("pipeline.traversal.started", middleware_count=len(self._middleware))
        return self._dispatch(request, 0)

    def _dispatch(self, request: Any, position: int) -> Any:
        if position >= len(self._middleware):
            _log.debug("pipeline.final_handler.invoked")
            if conforms_to_handler(self._final_handler):
                return self._final_handler.handle(request)  # type: ignore[union-attr]
            return self._final_handler(request)  # type: ignore[operator]

        entry = self._middleware[position]
        if not conforms_to_middleware(entry):
            raise InvalidMiddlewareError(entry, position=position)

        next_ = _Next(self, position + 1)
        response = entry.process(request, next_)
        if not next_.called:
            _log.debug("pipeline.short_circuited", position=position, middleware=type(entry).__name__)
        return response


class PipelineSetup:
    """Mutable chain configuration shared by :class:`Pipeline` and builders."""

    def __init__(
        self,
        final_handler: FinalHandler,
        middleware: Iterable[Middleware] = (),
        *,
        settings: PipelineSettings | None = None,
    ) -> None:
        self._final_handler = ensure_final_handler(final_handler)
        self._middleware: list[Any] = []
        self._settings = settings or PipelineSettings()
        self.add_multiple(middleware)

    @property
    def middleware(self) -> tuple[Middleware, ...]:
        return tuple(self._middleware)

    @property
    def settings(self) -> PipelineSettings:
        return self._settings

    def __len__(self) -> int:
        return len(self._middleware)

    def add(self, middleware: Middleware) -> Self:
        """Append *middleware* to the tail of the chain (fluent API)."""
        self._middleware.append(middleware)
        return self

    def add_multiple(self, middleware_list: Iterable[Any]) -> Self:
        """Append every entry of *middleware_list* in order (fluent API).

        See :func:`select_middleware` for how non-middleware entries are
        treated under ``settings.strict``.
        """
        self._middleware.extend(
            select_middleware(middleware_list, strict=self._settings.strict, offset=len(self._middleware))
        )
        return self


class Pipeline(PipelineSetup):
    """Configurable pipeline that is itself a request handler."""

    def compile(self) -> CompiledPipeline:
        """Freeze the current configuration into a :class:`CompiledPipeline`."""
        return CompiledPipeline(self._final_handler, self._middleware)

    def handle(self, request: Any) -> Any:
        return self.compile().handle(request)

    def __repr__(self) -> str:
        return f"Pipeline(middleware={len(self._middleware)}, final_handler={self._final_handler!r})"


class PipelineBuilder(PipelineSetup):
    """Collect middleware during setup, then :meth:`build` an immutable chain."""

    def build(self) -> CompiledPipeline:
        return CompiledPipeline(self._final_handler, self._middleware)


__all__ = [
    "CompiledPipeline",
    "Pipeline",
    "PipelineBuilder",
    "PipelineSetup",
    "ensure_final_handler",
    "select_middleware",
]
