import json
import pathlib

import pydantic

from rowmerge import data

__all__ = ("load",)


def load(*, updates_file: pathlib.Path) -> list[data.RowUpdate] | data.Error:
    try:
        if not updates_file.exists():
            return data.Error.new(
                f"The updates file specified, {updates_file.resolve()!s}, does not exist.",
                updates_file=updates_file,
            )

        updates: list[data.RowUpdate] = []
        with updates_file.open("r") as fh:
            for line_no, line in enumerate(fh, start=1):
                if not line.strip():
                    continue

                try:
                    d = json.loads(line)
                except json.JSONDecodeError as e:
                    return data.Error.new(f"line {line_no} is not valid json: {e!s}", updates_file=updates_file)

                if not isinstance(d, dict):
                    return data.Error.new(f"line {line_no} is not a json object.", updates_file=updates_file)

                for key in ("row", "version", "values"):
                    if key not in d.keys():
                        return data.Error.new(
                            f"line {line_no} is missing an entry for {key!r}.",
                            updates_file=updates_file,
                        )

                try:
                    updates.append(data.RowUpdate(row_index=d["row"], version=d["version"], values=d["values"]))
                except pydantic.ValidationError as e:
                    return data.Error.new(f"line {line_no} is invalid: {e!s}", updates_file=updates_file)

        return updates
    except Exception as e:
        return data.Error.new(
            f"An error occurred while loading the updates file: {e!s}",
            updates_file=updates_file,
        )
