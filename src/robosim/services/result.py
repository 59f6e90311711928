"""What a CLI-facing service hands back to :meth:`AppContext.emit`.

A rejected script line is not a ServiceError. Lines are reported inside
``data`` (and ``detail``) of the one result for the whole operation;
a ServiceError describes why that operation as a whole failed.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class ServiceError(BaseModel):
    """Why an operation failed: a stable ``code`` plus a readable message."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Outcome of ``check`` or of a fatal ``run`` error.

    ``data`` holds the line counts of a check, ``warnings`` go to stderr
    even on success, and ``meta`` records how the input was read (for
    example whether the parser was lenient).
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
        data: dict[str, Any] | None = None,
        meta: dict[str, Any] | None = None,
    ) -> ServiceResult:
        """A failed result whose error carries *code*, *message* and *detail*."""
        return cls(
            ok=False,
            op=op,
            data=data or {},
            error=ServiceError(code=code, message=message, detail=detail or {}),
            meta=meta,
        )
