from __future__ import annotations

import typing

import pydantic

__all__ = ("ReplayResult",)


@pydantic.dataclasses.dataclass(frozen=True, kw_only=True, config=pydantic.ConfigDict(strict=True))
class ReplayResult:
    error_message: str | None
    execution_millis: int
    updates_read: int
    changes_emitted: int
    unchanged: int
    rejected: int
    status: typing.Literal["failed", "succeeded"]

    @staticmethod
    def failed(
        *,
        error_message: str,
        execution_millis: int,
        updates_read: int,
        changes_emitted: int,
        unchanged: int,
        rejected: int,
    ) -> ReplayResult:
        return ReplayResult(
            error_message=error_message,
            execution_millis=execution_millis,
            updates_read=updates_read,
            changes_emitted=changes_emitted,
            unchanged=unchanged,
            rejected=rejected,
            status="failed",
        )

    @staticmethod
    def succeeded(
        *,
        execution_millis: int,
        updates_read: int,
        changes_emitted: int,
        unchanged: int,
        rejected: int,
    ) -> ReplayResult:
        return ReplayResult(
            error_message=None,
            execution_millis=execution_millis,
            updates_read=updates_read,
            changes_emitted=changes_emitted,
            unchanged=unchanged,
            rejected=rejected,
            status="succeeded",
        )
