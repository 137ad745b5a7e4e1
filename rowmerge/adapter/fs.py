import functools
import os
import pathlib

from rowmerge import data

__all__ = (
    "get_config_path",
    "get_log_folder",
    "get_root_dir",
)


HOME_ENV_VAR = "ROWMERGE_HOME"


@functools.lru_cache
def get_root_dir() -> pathlib.Path | data.Error:
    home = os.environ.get(HOME_ENV_VAR)
    if home:
        path = pathlib.Path(home)
        if not path.is_dir():
            return data.Error.new(f"{HOME_ENV_VAR} points to {home!r}, which is not a directory.", home=home)
        return path

    try:
        return next(p for p in pathlib.Path(__file__).parents if (p / "rowmerge").is_dir())
    except StopIteration:
        return data.Error.new(f"rowmerge not found in path, {__file__}.")


def get_config_path() -> pathlib.Path | data.Error:
    root = get_root_dir()
    if isinstance(root, data.Error):
        return root

    return root / "assets" / "config.json"


def get_log_folder() -> pathlib.Path | data.Error:
    root = get_root_dir()
    if isinstance(root, data.Error):
        return root

    folder = root / "logs"
    try:
        folder.mkdir(exist_ok=True)
    except OSError as e:
        return data.Error.new(f"Unable to create the log folder: {e!s}", folder=folder)

    return folder
