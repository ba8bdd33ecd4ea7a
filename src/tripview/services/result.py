"""ServiceResult: what every service operation hands back to the CLI.

INVARIANT: library errors become ``ok=False`` results carrying the error's
``code``; anything else propagates.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from tripview.errors import TripviewError


class ServiceError(BaseModel):
    """The ``code`` and message of a library error."""

    model_config = {"frozen": True}

    code: str
    message: str


class ServiceResult(BaseModel):
    """Outcome of one service operation.

    Attributes:
        ok: Whether the operation succeeded.
        op: Operation name, e.g. ``"format_date"``.
        data: Payload on success. Formatters put their output under ``"text"``,
            the sanitizer under ``"value"``.
        warnings: Input problems that did not stop the operation.
        error: Set when ``ok`` is False.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None

    @classmethod
    def success(
        cls, op: str, data: dict[str, Any], *, warnings: list[str] | None = None
    ) -> ServiceResult:
        return cls(ok=True, op=op, data=data, warnings=warnings or [])

    @classmethod
    def failure(
        cls, op: str, exc: TripviewError, *, warnings: list[str] | None = None
    ) -> ServiceResult:
        return cls(
            ok=False,
            op=op,
            warnings=warnings or [],
            error=ServiceError(code=exc.code, message=str(exc)),
        )
