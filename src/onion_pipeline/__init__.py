"""
onion_pipeline – request-handling middleware chains.

Import path convention::

    from onion_pipeline import Pipeline
    from onion_pipeline.application.pipeline import AsyncPipeline, middleware
    from onion_pipeline.kernel.errors import InvalidMiddlewareError
    from onion_pipeline.config import PipelineSettings, EnvSettingsLoader
"""

from onion_pipeline.application.pipeline import (
    AsyncPipeline,
    CompiledPipeline,
    Middleware,
    Pipeline,
    PipelineBuilder,
    RequestHandler,
    middleware,
)
from onion_pipeline.kernel.errors import ConfigurationError, InvalidMiddlewareError, PipelineError

__version__ = "0.1.0"
__all__ = [
    "AsyncPipeline",
    "CompiledPipeline",
    "ConfigurationError",
    "InvalidMiddlewareError",
    "Middleware",
    "Pipeline",
    "PipelineBuilder",
    "PipelineError",
    "RequestHandler",
    "__version__",
    "middleware",
]
