import functools
import json
import pathlib
import typing

import pydantic

from rowmerge import data

__all__ = ("load",)


_DEFAULT_CONFIG: typing.Final[data.Config] = data.Config()


@functools.lru_cache(maxsize=1)
def load(*, config_file: pathlib.Path) -> data.Config | data.Error:
    try:
        if not config_file.exists():
            return data.Error.new(
                f"The config file specified, {config_file.resolve()!s}, does not exist.",
                config_file=config_file,
            )

        with config_file.open("r") as fh:
            d = json.load(fh)

        if not isinstance(d, dict):
            return data.Error.new("The config file must contain a json object.", config_file=config_file)

        log_level = d.get("log-level", _DEFAULT_CONFIG.log_level)
        if not isinstance(log_level, str):
            return data.Error.new(f"'log-level' must be a string, but got {log_level!r}.")

        formatter = d.get("formatter", _DEFAULT_CONFIG.formatter)
        if formatter not in ("str", "typed"):
            return data.Error.new(f"'formatter' must be either 'str' or 'typed', but got {formatter!r}.")

        strict_columns = d.get("strict-columns", _DEFAULT_CONFIG.strict_columns)
        if not isinstance(strict_columns, bool):
            return data.Error.new(f"'strict-columns' must be true or false, but got {strict_columns!r}.")

        skip_rejected = d.get("skip-rejected", _DEFAULT_CONFIG.skip_rejected)
        if not isinstance(skip_rejected, bool):
            return data.Error.new(f"'skip-rejected' must be true or false, but got {skip_rejected!r}.")

        return data.Config(
            log_level=log_level.upper(),
            formatter=formatter,
            strict_columns=strict_columns,
            skip_rejected=skip_rejected,
        )
    except json.JSONDecodeError as e:
        return data.Error.new(f"The config file is not valid json: {e!s}", config_file=config_file)
    except pydantic.ValidationError as e:
        return data.Error.new(f"The config file contains an invalid value: {e!s}", config_file=config_file)
    except Exception as e:
        return data.Error.new(
            f"An error occurred while loading the config file: {e!s}",
            config_file=config_file,
        )
