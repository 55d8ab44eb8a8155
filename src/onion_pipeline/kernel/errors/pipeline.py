"""Pipeline errors — malformed chains and final handlers."""

from __future__ import annotations

from typing import Any

from onion_pipeline.kernel.errors.base import BaseError


class PipelineError(BaseError):
    """Raised when a pipeline cannot be built or traversed."""

    default_code = "pipeline_error"


class ConfigurationError(PipelineError):
    """The final handler is neither a request handler nor a callable."""

    default_code = "configuration_error"

    def __init__(
        self,
        message: str = "Final handler must implement handle() or be callable",
        *,
        handler: Any = None,
        **kwargs: Any,
    ) -> None:
        detail = kwargs.pop("detail", None) or {}
        detail.setdefault("handler_type", type(handler).__name__)
        super().__init__(message, detail=detail, **kwargs)


class InvalidMiddlewareError(PipelineError):
    """A chain entry does not implement ``process(request, next)``.

    ``position`` is the zero-based index of the offending entry, or ``None``
    when the entry was rejected before being appended.
    """

    default_code = "invalid_middleware"

    def __init__(
        self,
        entry: Any,
        *,
        position: int | None = None,
        message: str | None = None,
        **kwargs: Any,
    ) -> None:
        entry_type = type(entry).__name__
        if message is None:
            where = f" at position {position}" if position is not None else ""
            message = f"Invalid item{where} in middleware pipeline; {entry_type} does not implement process()"
        detail = kwargs.pop("detail", None) or {}
        detail.update({"position": position, "entry_type": entry_type})
        super().__init__(message, detail=detail, **kwargs)
        self.entry = entry
        self.position = position


__all__ = ["ConfigurationError", "InvalidMiddlewareError", "PipelineError"]
