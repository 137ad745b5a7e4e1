import json
import pathlib
import typing

import pydantic

from rowmerge import data

__all__ = ("load",)


def load(*, schema_file: pathlib.Path) -> data.TableSchema | data.Error:
    try:
        if not schema_file.exists():
            return data.Error.new(
                f"The schema file specified, {schema_file.resolve()!s}, does not exist.",
                schema_file=schema_file,
            )

        with schema_file.open("r") as fh:
            d = json.load(fh)

        if not isinstance(d, dict) or "columns" not in d:
            return data.Error.new("schema file is missing an entry for 'columns'.", schema_file=schema_file)

        if not isinstance(d["columns"], list):
            return data.Error.new("'columns' must be a list.", schema_file=schema_file)

        columns: list[data.Column] = []
        for col_dict in d["columns"]:
            col = _parse_column_dict(col_dict)
            if isinstance(col, data.Error):
                return col

            columns.append(col)

        return data.TableSchema(table_name=d.get("table-name"), column_defs=tuple(columns))
    except json.JSONDecodeError as e:
        return data.Error.new(f"The schema file is not valid json: {e!s}", schema_file=schema_file)
    except pydantic.ValidationError as e:
        return data.Error.new(f"The schema file is invalid: {e!s}", schema_file=schema_file)
    except Exception as e:
        return data.Error.new(
            f"An error occurred while loading the schema file: {e!s}",
            schema_file=schema_file,
        )


def _parse_column_dict(col_dict: typing.Any, /) -> data.Column | data.Error:
    if not isinstance(col_dict, dict):
        return data.Error.new(f"column entries must be json objects, but got {col_dict!r}.")

    if "name" not in col_dict.keys():
        return data.Error.new("column entry in schema file is missing an entry for 'name'.")

    name = col_dict["name"]
    if not isinstance(name, str) or not name:
        return data.Error.new(f"column name must be a non-empty string, but got {name!r}.")

    try:
        data_type = data.DataType(col_dict.get("data-type", "text"))
    except ValueError:
        return data.Error.new(
            f"could not convert data-type entry, {col_dict.get('data-type')!r}, to a DataType.",
            column_name=name,
        )

    scale = col_dict.get("scale")
    if scale is not None and (isinstance(scale, bool) or not isinstance(scale, int) or scale < 0):
        return data.Error.new(f"scale must be a non-negative integer, but got {scale!r}.", column_name=name)

    return data.Column(name=name, data_type=data_type, scale=scale)
