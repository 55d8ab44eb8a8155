"""Config settings – Settings base class and PipelineSettings."""
from __future__ import annotations

import dataclasses
import logging

from onion_pipeline.config.validation.errors import InvalidSettingValueError

_LEVEL_NAMES = frozenset({"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"})


@dataclasses.dataclass
class Settings:
    """Base class for 12-factor settings."""

    _prefix: dataclasses.ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        """Override to add cross-field validation."""


@dataclasses.dataclass
class PipelineSettings(Settings):
    """Runtime knobs for pipelines, read from ``PIPELINE_*`` variables.

    ``strict`` selects the ``add_multiple`` policy: fail on the first entry
    that is not middleware (default) or skip it with a warning.
    """

    _prefix: dataclasses.ClassVar[str] = "PIPELINE"

    strict: bool = True
    log_level: str = "INFO"
    log_json: bool = True

    def _validate(self) -> None:
        self.log_level = self.log_level.upper()
        if self.log_level not in _LEVEL_NAMES:
            raise InvalidSettingValueError(
                "log_level", self.log_level, f"expected one of {sorted(_LEVEL_NAMES)}"
            )

    @property
    def log_level_number(self) -> int:
        return logging.getLevelName(self.log_level)


__all__ = ["PipelineSettings", "Settings"]
