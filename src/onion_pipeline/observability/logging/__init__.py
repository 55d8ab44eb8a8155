"""Observability – structured logging helpers."""
from onion_pipeline.observability.logging.factory import JsonLoggerFactory, configure_logging
from onion_pipeline.observability.logging.processors import PipelineContextProcessor, get_logger

__all__ = [
    "JsonLoggerFactory",
    "PipelineContextProcessor",
    "configure_logging",
    "get_logger",
]
