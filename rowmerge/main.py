import argparse
import pathlib
import sys
import typing

import pydantic
from loguru import logger

from rowmerge import adapter, data, service

__all__ = ("main",)


_ROW_CHANGE_ADAPTER: typing.Final = pydantic.TypeAdapter(data.RowChange)


@pydantic.dataclasses.dataclass(frozen=True, kw_only=True)
class ReplayArgs:
    schema_file: pathlib.Path
    updates_file: pathlib.Path
    config_file: pathlib.Path | None
    formatter: typing.Literal["str", "typed"] | None
    strict_columns: bool
    fail_on_rejected: bool


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="rowmerge")
    subparser = parser.add_subparsers(dest="command")

    replay_parser = subparser.add_parser("replay")
    replay_parser.add_argument("--schema", type=str, required=True)
    replay_parser.add_argument("--updates", type=str, required=True)
    replay_parser.add_argument("--config", type=str)
    replay_parser.add_argument("--formatter", type=str, choices=("str", "typed"))
    replay_parser.add_argument("--strict-columns", action="store_true")
    replay_parser.add_argument("--fail-on-rejected", action="store_true")

    return parser


def parse_args(args: argparse.Namespace, /) -> ReplayArgs | data.Error:
    try:
        match args.command:
            case "replay":
                if not args.schema:
                    return data.Error.new("--schema is required.")

                if not args.updates:
                    return data.Error.new("--updates is required.")

                return ReplayArgs(
                    schema_file=pathlib.Path(args.schema),
                    updates_file=pathlib.Path(args.updates),
                    config_file=pathlib.Path(args.config) if args.config else None,
                    formatter=args.formatter,
                    strict_columns=args.strict_columns,
                    fail_on_rejected=args.fail_on_rejected,
                )
            case None:
                return data.Error.new("A command is required.")
            case _:
                return data.Error.new(f"{args.command} is invalid.")
    except Exception as e:
        return data.Error.new(f"An error occurred while parsing command line args: {e!s}")


def load_config(*, config_file: pathlib.Path | None) -> data.Config | data.Error:
    if config_file is not None:
        return adapter.config.load(config_file=config_file)

    default_config_file = adapter.fs.get_config_path()
    if isinstance(default_config_file, data.Error):
        return default_config_file

    if not default_config_file.exists():
        logger.info(f"No config file found at {default_config_file!s}, using defaults.")
        return data.Config()

    return adapter.config.load(config_file=default_config_file)


def run_replay(*, args: ReplayArgs, config: data.Config) -> data.ReplayResult | data.Error:
    schema = adapter.schema.load(schema_file=args.schema_file)
    if isinstance(schema, data.Error):
        return schema

    formatter = adapter.formatter.create(kind=args.formatter or config.formatter, schema=schema)
    if isinstance(formatter, data.Error):
        return formatter

    updates = adapter.updates.load(updates_file=args.updates_file)
    if isinstance(updates, data.Error):
        return updates

    def _emit(change: data.RowChange) -> None:
        sys.stdout.write(_ROW_CHANGE_ADAPTER.dump_json(change).decode() + "\n")

    return service.replay(
        schema=schema,
        formatter=formatter,
        updates=updates,
        on_change=_emit,
        strict_columns=args.strict_columns or config.strict_columns,
        skip_rejected=config.skip_rejected and not args.fail_on_rejected,
    )


def main(argv: list[str] | None = None) -> int:
    try:
        logger.remove()
        stderr_handler_id = logger.add(sys.stderr, level="INFO")

        log_folder = adapter.fs.get_log_folder()
        if isinstance(log_folder, data.Error):
            logger.error(f"An error occurred while looking up log folder: {log_folder!s}")
            return 1

        logger.add(log_folder / "error.log", rotation="5 MB", retention="7 days", level="ERROR")

        args = parse_args(build_parser().parse_args(argv))
        if isinstance(args, data.Error):
            logger.error(f"An error occurred while parsing command line args: {args!s}")
            return 1

        config = load_config(config_file=args.config_file)
        if isinstance(config, data.Error):
            logger.error(f"An error occurred while loading config file: {config!s}")
            return 1

        logger.remove(stderr_handler_id)
        logger.add(sys.stderr, level=config.log_level)

        result = run_replay(args=args, config=config)
        match result:
            case data.Error(error_message=error_message):
                logger.error(error_message)
                return 1
            case data.ReplayResult(status="failed", error_message=error_message):
                logger.error(f"Replay failed: {error_message}")
                return 1
            case _:
                return 0
    except Exception as e:
        logger.exception(e)
        return 1


if __name__ == "__main__":
    sys.exit(main())
