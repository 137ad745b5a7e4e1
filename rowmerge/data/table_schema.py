from __future__ import annotations

import pydantic

from rowmerge.data.column import Column
from rowmerge.data.schema import Schema

__all__ = ("TableSchema",)


@pydantic.dataclasses.dataclass(frozen=True, kw_only=True, config=pydantic.ConfigDict(strict=True))
class TableSchema(Schema):
    table_name: str | None = None
    column_defs: tuple[Column, ...]

    @pydantic.field_validator("column_defs")
    @classmethod
    def _check_column_defs(cls, column_defs: tuple[Column, ...]) -> tuple[Column, ...]:
        if not column_defs:
            raise ValueError("A table schema requires at least one column.")

        seen: set[str] = set()
        duplicates: set[str] = set()
        for col in column_defs:
            if col.name in seen:
                duplicates.add(col.name)
            seen.add(col.name)

        if duplicates:
            raise ValueError(f"Duplicate column names: {', '.join(sorted(duplicates))}.")

        return column_defs

    @staticmethod
    def from_names(*names: str, table_name: str | None = None) -> TableSchema:
        return TableSchema(table_name=table_name, column_defs=tuple(Column(name=name) for name in names))

    def columns(self) -> tuple[Column, ...]:
        return self.column_defs

    def column(self, /, name: str) -> Column | None:
        return next((col for col in self.column_defs if col.name == name), None)
