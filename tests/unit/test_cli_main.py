from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest

from schema_rules import __version__
from schema_rules.__main__ import build_parser, main

FIXTURE_SCHEMA = Path(__file__).resolve().parents[1] / "fixtures" / "schema" / "blog.yaml"


def test_cli_build_parser_contains_required_commands() -> None:
    parser = build_parser()
    subparsers_action = next(
        action for action in parser._actions if getattr(action, "dest", "") == "command"
    )
    commands = set(subparsers_action.choices.keys())

    assert commands == {"generate", "inspect"}


def test_cli_generate_writes_output_file(tmp_path: Path) -> None:
    out_dir = tmp_path / "rules"

    code = main(
        [
            "generate",
            "--schema",
            str(FIXTURE_SCHEMA),
            "--table",
            "posts",
            "--out",
            str(out_dir),
            "--format",
            "python",
        ]
    )

    assert code == 0
    content = (out_dir / "posts_rules.py").read_text(encoding="utf-8")
    assert "'title': ['required', 'string', 'max:255']," in content


def test_cli_generate_prints_to_stdout(capsys: pytest.CaptureFixture[str]) -> None:
    code = main(
        [
            "generate",
            "--schema",
            str(FIXTURE_SCHEMA),
            "--table",
            "posts",
            "--ignore",
            "meta",
            "location",
        ]
    )

    assert code == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload["table"] == "posts"
    assert "meta" not in payload["store"]
    assert "location" not in payload["update"]
    assert payload["update"]["image"][0] == "nullable"


def test_cli_generate_with_config_reports_override_warnings(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    config_path = tmp_path / "generator.yaml"
    config_path.write_text(
        "generator:\n  custom_rules:\n    posts:\n      title: required|string\n      status: 5\n",
        encoding="utf-8",
    )

    code = main(
        [
            "generate",
            "--schema",
            str(FIXTURE_SCHEMA),
            "--table",
            "posts",
            "--out",
            str(tmp_path / "out"),
            "--format",
            "json",
            "--config",
            str(config_path),
            "--name",
            "PostRequest",
        ]
    )

    assert code == 0
    output = capsys.readouterr().out
    assert "[WARN] override skipped: posts.status" in output

    payload = json.loads((tmp_path / "out" / "PostRequest.json").read_text(encoding="utf-8"))
    assert payload["store"]["title"] == ["required", "string"]


def test_cli_inspect_lists_matching_strategies(capsys: pytest.CaptureFixture[str]) -> None:
    code = main(["inspect", "--schema", str(FIXTURE_SCHEMA), "--table", "posts"])

    assert code == 0
    lines = {line.split("\t")[0]: line for line in capsys.readouterr().out.splitlines()}
    assert lines["is_active"].endswith("unique,boolean,integer")
    assert lines["image"].endswith("unique,file")


def test_cli_returns_input_error_for_missing_schema(tmp_path: Path) -> None:
    code = main(["generate", "--schema", str(tmp_path / "missing.db"), "--table", "posts"])
    assert code == 1


def test_cli_returns_input_error_for_unknown_table() -> None:
    code = main(["generate", "--schema", str(FIXTURE_SCHEMA), "--table", "comments"])
    assert code == 1


def test_cli_returns_input_error_for_missing_config(tmp_path: Path) -> None:
    code = main(
        [
            "generate",
            "--schema",
            str(FIXTURE_SCHEMA),
            "--table",
            "posts",
            "--config",
            str(tmp_path / "missing.yaml"),
        ]
    )
    assert code == 1


def test_cli_without_command_exits_with_parser_error() -> None:
    with pytest.raises(SystemExit) as exc:
        main([])

    assert exc.value.code == 2


def test_cli_applies_logging_options(monkeypatch: pytest.MonkeyPatch) -> None:
    calls: list[tuple[object, object]] = []
    monkeypatch.setattr(
        "schema_rules.__main__.setup_logging",
        lambda config_path=None, level=logging.INFO: calls.append((config_path, level)),
    )
    log_config = Path(__file__).resolve().parents[2] / "configs" / "logging" / "default.yaml"

    code = main(
        [
            "--log-config",
            str(log_config),
            "-v",
            "inspect",
            "--schema",
            str(FIXTURE_SCHEMA),
            "--table",
            "posts",
        ]
    )

    assert code == 0
    assert calls == [(log_config, logging.DEBUG)]


def test_cli_version_flag(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as exc:
        main(["--version"])

    assert exc.value.code == 0
    assert capsys.readouterr().out.strip() == f"schema-rules {__version__}"
