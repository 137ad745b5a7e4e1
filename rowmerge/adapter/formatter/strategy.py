from rowmerge import data
from rowmerge.adapter.formatter.str_formatter import StrFormatter
from rowmerge.adapter.formatter.typed import TypedFormatter

__all__ = ("create",)


def create(*, kind: str, schema: data.Schema) -> data.Formatter | data.Error:
    try:
        if kind == "str":
            return StrFormatter()

        if kind == "typed":
            return TypedFormatter(schema=schema)

        return data.Error.new(f"The formatter specified, {kind!r}, was not recognized.", kind=kind)
    except Exception as e:
        return data.Error.new(str(e), kind=kind)
