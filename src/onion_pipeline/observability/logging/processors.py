"""Observability – structlog processors and get_logger helper."""
from __future__ import annotations

import logging
from typing import Any

import structlog


class PipelineContextProcessor:
    """structlog processor that stamps static pipeline context on every event.

    Usage::

        structlog.configure(processors=[PipelineContextProcessor(service="api"), ...])
    """

    def __init__(self, **context: Any) -> None:
        self._context = context

    def __call__(
        self,
        logger: Any,           # noqa: ARG002
        method_name: str,      # noqa: ARG002
        event_dict: dict[str, Any],
    ) -> dict[str, Any]:
        for key, value in self._context.items():
            event_dict.setdefault(key, value)
        return event_dict


def get_logger(name: str | None = None, **initial_values: Any) -> Any:
    """Return a structlog logger bound to the stdlib logger *name*.

    Events go through :mod:`logging`, so level and handlers are whatever the
    host application set up. With nothing configured, the stdlib defaults
    apply: debug and info events are dropped and nothing reaches stdout.

    Parameters
    ----------
    name:
        Logger name (typically ``__name__`` of the calling module).
    **initial_values:
        Key-value pairs to bind on the returned logger.
    """
    logger = structlog.wrap_logger(logging.getLogger(name), wrapper_class=structlog.stdlib.BoundLogger)
    if initial_values:
        logger = logger.bind(**initial_values)
    return logger


__all__ = ["PipelineContextProcessor", "get_logger"]
