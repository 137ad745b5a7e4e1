from __future__ import annotations

import dataclasses
import inspect
import typing

__all__ = (
    "DuplicateVersion",
    "Error",
    "FormatError",
    "RowMergeError",
    "SchemaMismatch",
    "StaleVersion",
)


@dataclasses.dataclass(frozen=True, kw_only=True)
class Error:
    """An error returned as a value from adapters and services."""

    file: str
    fn: str
    fn_args: dict[str, typing.Any]
    error_message: str

    @staticmethod
    def new(error_message: str, /, **fn_args: typing.Any) -> Error:
        caller = inspect.stack()[1]
        return Error(
            file=caller.filename,
            fn=caller.function,
            fn_args=fn_args,
            error_message=error_message,
        )

    def __str__(self) -> str:
        if self.fn_args:
            args = ", ".join(f"{k}={v!r}" for k, v in self.fn_args.items())
            return f"{self.error_message} [{self.fn}({args})]"
        return f"{self.error_message} [{self.fn}]"


class RowMergeError(Exception):
    """Base class for errors raised while merging a row snapshot"""


class SchemaMismatch(RowMergeError):
    def __init__(
        self,
        *,
        expected: int,
        actual: int,
        missing: typing.Iterable[str] = (),
        unexpected: typing.Iterable[str] = (),
    ):
        self.expected = expected
        self.actual = actual
        self.missing = tuple(sorted(missing))
        self.unexpected = tuple(sorted(unexpected))

        msg = f"Row does not match schema: require {expected} columns but got {actual}."
        if self.missing:
            msg += f" Missing: {', '.join(self.missing)}."
        if self.unexpected:
            msg += f" Unexpected: {', '.join(self.unexpected)}."

        super().__init__(msg)


class StaleVersion(RowMergeError):
    def __init__(self, *, version: int, current: int):
        self.version = version
        self.current = current

        super().__init__(f"Merging version {version} but already higher at {current}.")


class DuplicateVersion(RowMergeError):
    def __init__(self, *, version: int):
        self.version = version

        super().__init__(f"Merging version {version} but already at {version}.")


class FormatError(RowMergeError):
    def __init__(self, *, column_name: str, value: typing.Any):
        self.column_name = column_name
        self.value = value

        super().__init__(f"Unable to format the value, {value!r}, for column {column_name}.")
