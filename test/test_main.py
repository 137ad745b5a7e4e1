import json
import pathlib
import typing

import pytest
from loguru import logger

from rowmerge import adapter, data, main


@pytest.fixture(scope="function", autouse=True)
def _isolate_fixture(
    tmp_path: pathlib.Path, monkeypatch: pytest.MonkeyPatch
) -> typing.Generator[None, None, None]:
    monkeypatch.setenv(adapter.fs.HOME_ENV_VAR, str(tmp_path))
    adapter.fs.get_root_dir.cache_clear()
    yield
    adapter.fs.get_root_dir.cache_clear()
    logger.remove()


@pytest.fixture(scope="function")
def replay_files_fixture(tmp_path: pathlib.Path) -> dict[str, pathlib.Path]:
    schema_file = tmp_path / "schema.json"
    schema_file.write_text(json.dumps({
        "columns": [
            {"name": "id", "data-type": "int"},
            {"name": "price", "data-type": "decimal", "scale": 2},
        ],
    }))

    updates_file = tmp_path / "updates.jsonl"
    updates_file.write_text(
        '{"row": 0, "version": 1, "values": {"id": 1, "price": 10}}\n'
        '{"row": 0, "version": 2, "values": {"id": 1, "price": 12.5}}\n'
        '{"row": 0, "version": 1, "values": {"id": 1, "price": 11}}\n'
        '{"row": 0, "version": 3, "values": {"id": 1, "price": null}}\n'
    )

    config_file = tmp_path / "config.json"
    config_file.write_text(json.dumps({"log-level": "WARNING"}))

    return {"schema": schema_file, "updates": updates_file, "config": config_file}


def test_parse_args():
    ns = main.build_parser().parse_args(["replay", "--schema", "s.json", "--updates", "u.jsonl", "--strict-columns"])

    args = main.parse_args(ns)

    assert args == main.ReplayArgs(
        schema_file=pathlib.Path("s.json"),
        updates_file=pathlib.Path("u.jsonl"),
        config_file=None,
        formatter=None,
        strict_columns=True,
        fail_on_rejected=False,
    )


def test_parse_args_without_command():
    assert isinstance(main.parse_args(main.build_parser().parse_args([])), data.Error)


def test_replay_prints_changes(replay_files_fixture, capsys):
    exit_code = main.main([
        "replay",
        "--schema", str(replay_files_fixture["schema"]),
        "--updates", str(replay_files_fixture["updates"]),
        "--config", str(replay_files_fixture["config"]),
    ])

    lines = capsys.readouterr().out.splitlines()

    assert exit_code == 0
    assert [json.loads(line) for line in lines] == [
        {"changes": {"id": "1", "price": "10.00"}, "row_index": 0, "version": 1},
        {"changes": {"price": "12.50"}, "row_index": 0, "version": 2},
        {"changes": {"price": None}, "row_index": 0, "version": 3},
    ]


def test_replay_fails_on_rejected(replay_files_fixture, capsys):
    exit_code = main.main([
        "replay",
        "--schema", str(replay_files_fixture["schema"]),
        "--updates", str(replay_files_fixture["updates"]),
        "--config", str(replay_files_fixture["config"]),
        "--fail-on-rejected",
    ])

    assert exit_code == 1
    assert len(capsys.readouterr().out.splitlines()) == 2


def test_replay_with_missing_schema_file(replay_files_fixture, tmp_path: pathlib.Path):
    exit_code = main.main([
        "replay",
        "--schema", str(tmp_path / "missing.json"),
        "--updates", str(replay_files_fixture["updates"]),
        "--config", str(replay_files_fixture["config"]),
    ])

    assert exit_code == 1


def test_replay_uses_defaults_without_config_file(replay_files_fixture, capsys):
    exit_code = main.main([
        "replay",
        "--schema", str(replay_files_fixture["schema"]),
        "--updates", str(replay_files_fixture["updates"]),
    ])

    assert exit_code == 0
    assert len(capsys.readouterr().out.splitlines()) == 3
