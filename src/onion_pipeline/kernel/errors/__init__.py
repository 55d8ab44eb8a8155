"""Kernel error hierarchy — public re-export surface.

Hierarchy::

    BaseError
    └── PipelineError            (pipeline.py)
        ├── ConfigurationError
        └── InvalidMiddlewareError
"""

from onion_pipeline.kernel.errors.base import BaseError
from onion_pipeline.kernel.errors.pipeline import (
    ConfigurationError,
    InvalidMiddlewareError,
    PipelineError,
)

__all__ = [
    "BaseError",
    "ConfigurationError",
    "InvalidMiddlewareError",
    "PipelineError",
]
