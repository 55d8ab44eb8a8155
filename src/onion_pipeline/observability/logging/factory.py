"""Observability – JsonLoggerFactory and configure_logging."""
from __future__ import annotations

import logging
from typing import Any

import structlog

from onion_pipeline.config.settings import PipelineSettings
from onion_pipeline.observability.logging.processors import PipelineContextProcessor


class JsonLoggerFactory:
    """Configure structlog on top of the stdlib root handler."""

    @staticmethod
    def configure(
        level: int = logging.INFO,
        *,
        json: bool = True,
        context: dict[str, Any] | None = None,
    ) -> None:
        shared_processors: list[Any] = [
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
        ]
        if context:
            shared_processors.insert(0, PipelineContextProcessor(**context))

        structlog.configure(
            processors=shared_processors + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=True,
        )
        renderer: Any = structlog.processors.JSONRenderer() if json else structlog.dev.ConsoleRenderer()
        formatter = structlog.stdlib.ProcessorFormatter(
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                renderer,
            ],
        )
        handler = logging.StreamHandler()
        handler.setFormatter(formatter)
        root = logging.getLogger()
        root.handlers.clear()
        root.addHandler(handler)
        root.setLevel(level)


def configure_logging(settings: PipelineSettings | None = None, **context: Any) -> None:
    """Apply ``PIPELINE_LOG_LEVEL`` / ``PIPELINE_LOG_JSON`` from *settings*."""
    settings = settings or PipelineSettings()
    JsonLoggerFactory.configure(
        settings.log_level_number,
        json=settings.log_json,
        context=context or None,
    )


__all__ = ["JsonLoggerFactory", "configure_logging"]
