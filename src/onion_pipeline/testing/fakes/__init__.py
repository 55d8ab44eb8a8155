"""Testing fakes – in-memory doubles for pipeline collaborators."""
from onion_pipeline.testing.fakes.http import FakeRequest, FakeResponse
from onion_pipeline.testing.fakes.middleware import (
    AsyncRecordingMiddleware,
    PrefixBodyMiddleware,
    RecordingHandler,
    RecordingMiddleware,
    StaticResponseMiddleware,
)

__all__ = [
    "AsyncRecordingMiddleware",
    "FakeRequest",
    "FakeResponse",
    "PrefixBodyMiddleware",
    "RecordingHandler",
    "RecordingMiddleware",
    "StaticResponseMiddleware",
]
