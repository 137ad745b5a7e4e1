from __future__ import annotations

import math
import threading
import typing

from loguru import logger

from rowmerge.data.column import Column
from rowmerge.data.error import DuplicateVersion, FormatError, SchemaMismatch, StaleVersion
from rowmerge.data.formatter import Formatter
from rowmerge.data.row_change import RowChange
from rowmerge.data.schema import Schema

__all__ = ("RowMerger",)


class RowMerger:
    """Tracks the last accepted snapshot of a single row and reports which columns changed.

    Each call to ``merge`` receives the full row along with a version. Versions must
    strictly increase: an older version raises ``StaleVersion`` and a repeated one
    raises ``DuplicateVersion``. The returned ``RowChange`` holds the formatted value
    of every column whose raw value differs from the cached one, or ``None`` for a
    column that went from a value to null. ``merge`` returns ``None`` when nothing
    changed.

    Merges on the same instance are serialized. A merge that raises leaves the
    cached values and the version exactly as they were.
    """

    def __init__(
        self,
        *,
        schema: Schema,
        formatter: Formatter,
        row_index: int,
        strict_columns: bool = False,
    ):
        self._schema = schema
        self._formatter = formatter
        self._row_index = row_index
        self._strict_columns = strict_columns

        self._cache: dict[str, typing.Any] = {}
        self._version = -1
        self._lock = threading.Lock()

    @property
    def row_index(self) -> int:
        return self._row_index

    @property
    def version(self) -> int:
        return self._version

    def cached(self, column_name: str, /) -> typing.Any:
        with self._lock:
            return self._cache.get(column_name)

    def snapshot(self) -> dict[str, typing.Any]:
        with self._lock:
            return dict(self._cache)

    def merge(self, row: typing.Mapping[str, typing.Any], /, version: int) -> RowChange | None:
        if isinstance(version, bool) or not isinstance(version, int):
            raise TypeError(f"version must be an int, but got {type(version).__name__}.")

        columns = self._schema.columns()
        self._check_shape(row=row, columns=columns)

        with self._lock:
            if self._version > version:
                raise StaleVersion(version=version, current=self._version)

            if self._version == version:
                raise DuplicateVersion(version=version)

            changes: dict[str, str | None] = {}
            updates: dict[str, typing.Any] = {}
            for col in columns:
                current = row.get(col.name)
                previous = self._cache.get(col.name)

                if current is not None:
                    if not _same_value(current, previous):
                        changes[col.name] = self._format(column_name=col.name, value=current)
                        updates[col.name] = current
                elif previous is not None:
                    changes[col.name] = None
                    updates[col.name] = None

            change = RowChange(changes=changes, row_index=self._row_index, version=version) if changes else None

            # nothing is committed until every changed column has been formatted
            for name, value in updates.items():
                if value is None:
                    self._cache.pop(name, None)
                else:
                    self._cache[name] = value

            self._version = version

        if change is None:
            logger.debug(f"Row {self._row_index} accepted version {version} with no changes.")
            return None

        logger.debug(f"Row {self._row_index} accepted version {version}, changed: {', '.join(changes)}.")

        return change

    def _check_shape(self, *, row: typing.Mapping[str, typing.Any], columns: tuple[Column, ...]) -> None:
        if not self._strict_columns:
            if len(row) != len(columns):
                raise SchemaMismatch(expected=len(columns), actual=len(row))
            return

        col_names = {col.name for col in columns}
        row_names = set(row.keys())
        if len(row) != len(columns) or col_names != row_names:
            raise SchemaMismatch(
                expected=len(columns),
                actual=len(row),
                missing=col_names - row_names,
                unexpected=row_names - col_names,
            )

    def _format(self, *, column_name: str, value: typing.Any) -> str:
        try:
            formatted = self._formatter.format(column_name, value)
        except Exception as e:
            raise FormatError(column_name=column_name, value=value) from e

        if not isinstance(formatted, str):
            raise FormatError(column_name=column_name, value=value) from TypeError(
                f"The formatter returned {type(formatted).__name__}, but a str is required."
            )

        return formatted

    def __repr__(self) -> str:
        return f"RowMerger(row_index={self._row_index}, version={self._version})"


def _same_value(current: typing.Any, previous: typing.Any, /) -> bool:
    # 1, 1.0 and True compare equal in Python but are different values here
    if type(current) is not type(previous):
        return False

    if isinstance(current, float):
        # nan matches nan, 0.0 and -0.0 differ
        if math.isnan(current) or math.isnan(previous):
            return math.isnan(current) and math.isnan(previous)
        return current == previous and math.copysign(1, current) == math.copysign(1, previous)

    return current == previous
