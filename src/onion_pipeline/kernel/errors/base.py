"""Root of the onion-pipeline error hierarchy."""

from __future__ import annotations

from typing import Any, ClassVar


class BaseError(Exception):
    """Base for every error the package raises.

    Subclasses set ``default_code``, a stable slug callers can map to a
    response, and put whatever identifies the failure into ``detail`` so it
    survives :meth:`to_dict`. Pass ``cause`` to chain the triggering
    exception without a ``raise ... from`` at the call site.
    """

    default_code: ClassVar[str] = "onion_pipeline_error"

    def __init__(
        self,
        message: str,
        *,
        detail: dict[str, Any] | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.detail: dict[str, Any] = dict(detail or {})
        if cause is not None:
            self.__cause__ = cause

    @property
    def code(self) -> str:
        return self.default_code

    def __str__(self) -> str:
        return f"{self.code}: {self.message}"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.message!r}, detail={self.detail!r})"

    def to_dict(self) -> dict[str, Any]:
        """Plain-dict view for structured log fields and error responses."""
        payload: dict[str, Any] = {"code": self.code, "message": self.message, "detail": self.detail}
        if self.__cause__ is not None:
            payload["cause"] = f"{type(self.__cause__).__name__}: {self.__cause__}"
        return payload


__all__ = ["BaseError"]
