from __future__ import annotations

import abc

from rowmerge.data.column import Column

__all__ = ("Schema",)


class Schema(abc.ABC):
    @abc.abstractmethod
    def columns(self) -> tuple[Column, ...]:
        """Columns in schema order. Must not change for the lifetime of a merger."""
        raise NotImplementedError

    def column_names(self) -> tuple[str, ...]:
        return tuple(col.name for col in self.columns())
