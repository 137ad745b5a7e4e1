from __future__ import annotations

import threading
import typing

from rowmerge.data.formatter import Formatter
from rowmerge.data.row_change import RowChange
from rowmerge.data.row_merger import RowMerger
from rowmerge.data.schema import Schema

__all__ = ("TableMerger",)


class TableMerger:
    """Keeps one RowMerger per row index, created on first use.

    The lock only guards the registry. Merges on different rows run independently.
    """

    def __init__(self, *, schema: Schema, formatter: Formatter, strict_columns: bool = False):
        self._schema = schema
        self._formatter = formatter
        self._strict_columns = strict_columns

        self._rows: dict[int, RowMerger] = {}
        self._lock = threading.Lock()

    def merge(self, *, row_index: int, row: typing.Mapping[str, typing.Any], version: int) -> RowChange | None:
        return self._get_or_create(row_index).merge(row, version=version)

    def row(self, /, row_index: int) -> RowMerger | None:
        with self._lock:
            return self._rows.get(row_index)

    def row_indexes(self) -> tuple[int, ...]:
        with self._lock:
            return tuple(sorted(self._rows))

    def discard(self, /, row_index: int) -> bool:
        with self._lock:
            return self._rows.pop(row_index, None) is not None

    def _get_or_create(self, row_index: int, /) -> RowMerger:
        with self._lock:
            merger = self._rows.get(row_index)
            if merger is None:
                merger = RowMerger(
                    schema=self._schema,
                    formatter=self._formatter,
                    row_index=row_index,
                    strict_columns=self._strict_columns,
                )
                self._rows[row_index] = merger
            return merger

    def __contains__(self, row_index: object) -> bool:
        with self._lock:
            return row_index in self._rows

    def __len__(self) -> int:
        with self._lock:
            return len(self._rows)
