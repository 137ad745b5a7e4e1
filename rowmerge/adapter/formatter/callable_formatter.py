import typing

from rowmerge import data

__all__ = ("CallableFormatter",)


class CallableFormatter(data.Formatter):
    def __init__(self, fn: typing.Callable[[str, typing.Any], str], /):
        self._fn = fn

    def format(self, column_name: str, value: typing.Any, /) -> str:
        return self._fn(column_name, value)
