from __future__ import annotations

import abc
import typing

__all__ = ("Formatter",)


class Formatter(abc.ABC):
    @abc.abstractmethod
    def format(self, column_name: str, value: typing.Any, /) -> str:
        """Render a non-null raw value for display."""
        raise NotImplementedError
