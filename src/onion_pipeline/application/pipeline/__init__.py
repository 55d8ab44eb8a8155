"""Application pipeline – request-handling middleware chain."""
from onion_pipeline.application.pipeline.adapters import CallableHandler, CallableMiddleware, middleware
from onion_pipeline.application.pipeline.aio import AsyncCompiledPipeline, AsyncPipeline
from onion_pipeline.application.pipeline.contracts import (
    AsyncFinalHandler,
    AsyncMiddleware,
    AsyncRequestHandler,
    FinalHandler,
    Middleware,
    RequestHandler,
    conforms_to_final_handler,
    conforms_to_handler,
    conforms_to_middleware,
)
from onion_pipeline.application.pipeline.middlewares import (
    ExceptionMappingMiddleware,
    LoggingMiddleware,
    ShortCircuitMiddleware,
    TimingMiddleware,
)
from onion_pipeline.application.pipeline.pipeline import CompiledPipeline, Pipeline, PipelineBuilder

__all__ = [
    "AsyncCompiledPipeline",
    "AsyncFinalHandler",
    "AsyncMiddleware",
    "AsyncPipeline",
    "AsyncRequestHandler",
    "CallableHandler",
    "CallableMiddleware",
    "CompiledPipeline",
    "ExceptionMappingMiddleware",
    "FinalHandler",
    "LoggingMiddleware",
    "Middleware",
    "Pipeline",
    "PipelineBuilder",
    "RequestHandler",
    "ShortCircuitMiddleware",
    "TimingMiddleware",
    "conforms_to_final_handler",
    "conforms_to_handler",
    "conforms_to_middleware",
    "middleware",
]
