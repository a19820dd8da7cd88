"""ServiceResult and ServiceError: what every service method returns.

INVARIANT: Service methods never raise for expected failures (missing
registry, unreadable note, ambiguous vault). They return a failed result
carrying an :class:`~quickadd.domain.errors.ErrorCode`, and the CLI maps
that to stderr output and exit status 1.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class ServiceError(BaseModel):
    """Why an operation failed: a stable code plus a human message."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Outcome of one service operation.

    Attributes:
        ok: Whether the operation succeeded.
        op: Operation name, used to pick a renderer (``"add_task"``).
        data: Operation-specific payload on success.
        warnings: Non-fatal problems, e.g. a malformed ``daily-notes.json``.
        error: Set when ``ok`` is False.
        meta: Telemetry spans when ``--verbose`` is on.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
    meta: dict[str, Any] | None = None

    @classmethod
    def failure(
        cls,
        op: str,
        code: str,
        message: str,
        *,
        detail: dict[str, Any] | None = None,
        warnings: list[str] | None = None,
    ) -> ServiceResult:
        return cls(
            ok=False,
            op=op,
            warnings=warnings or [],
            error=ServiceError(code=code, message=message, detail=detail or {}),
        )

    @property
    def error_code(self) -> str | None:
        return self.error.code if self.error else None
