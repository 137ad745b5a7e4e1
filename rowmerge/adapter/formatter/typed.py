import datetime
import decimal
import typing

from rowmerge import data

__all__ = ("TypedFormatter",)


class TypedFormatter(data.Formatter):
    """Formats values according to the data type declared for their column.

    Values that do not fit the declared type raise, so a bad value never renders
    as something plausible.
    """

    def __init__(self, *, schema: data.Schema):
        self._columns: typing.Final[dict[str, data.Column]] = {col.name: col for col in schema.columns()}

    def format(self, column_name: str, value: typing.Any, /) -> str:
        col = self._columns.get(column_name)
        if col is None:
            raise KeyError(f"The column, {column_name}, is not part of the schema.")

        match col.data_type:
            case data.DataType.Bool:
                if not isinstance(value, bool):
                    raise TypeError(f"Expected a bool, but got {type(value).__name__}.")
                return "true" if value else "false"
            case data.DataType.Int | data.DataType.BigInt:
                if isinstance(value, bool) or not isinstance(value, int):
                    raise TypeError(f"Expected an int, but got {type(value).__name__}.")
                return str(value)
            case data.DataType.Float:
                if isinstance(value, bool) or not isinstance(value, (int, float)):
                    raise TypeError(f"Expected a float, but got {type(value).__name__}.")
                return repr(float(value))
            case data.DataType.Decimal:
                return _format_decimal(value, scale=col.scale)
            case data.DataType.Date:
                return _format_date(value)
            case data.DataType.Timestamp:
                return _format_timestamp(value)
            case _:
                return str(value)


def _format_decimal(value: typing.Any, /, *, scale: int | None) -> str:
    if isinstance(value, bool):
        raise TypeError("Expected a decimal, but got bool.")

    d = decimal.Decimal(str(value))
    if not d.is_finite():
        raise ValueError(f"Expected a finite decimal, but got {value!r}.")

    if scale is None:
        return str(d)

    return f"{d:.{scale}f}"


def _format_date(value: typing.Any, /) -> str:
    if isinstance(value, datetime.datetime):
        return value.date().isoformat()

    if isinstance(value, datetime.date):
        return value.isoformat()

    if isinstance(value, str):
        return datetime.date.fromisoformat(value).isoformat()

    raise TypeError(f"Expected a date, but got {type(value).__name__}.")


def _format_timestamp(value: typing.Any, /) -> str:
    if isinstance(value, datetime.datetime):
        return value.isoformat()

    if isinstance(value, str):
        return datetime.datetime.fromisoformat(value).isoformat()

    raise TypeError(f"Expected a timestamp, but got {type(value).__name__}.")
