import typing

from rowmerge import data

__all__ = ("StrFormatter",)


class StrFormatter(data.Formatter):
    def format(self, column_name: str, value: typing.Any, /) -> str:
        return str(value)
