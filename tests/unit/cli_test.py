"""Tests for the typer CLI: help flags, the routes listing and serve wiring."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import patch

import pytest
from typer.testing import CliRunner

from json_server.cli.app import app

runner = CliRunner()


@pytest.mark.parametrize(
    "args",
    [
        [],
        ["serve"],
        ["routes"],
    ],
    ids=["root", "serve", "routes"],
)
def test_short_help_flag(args: list[str]) -> None:
    result = runner.invoke(app, [*args, "-h"])
    assert result.exit_code == 0
    assert "Usage" in result.output


def test_routes_lists_loaded_files(data_dir: Path) -> None:
    (data_dir / "broken.json").write_text("{", encoding="utf-8")

    result = runner.invoke(app, ["routes", "-d", str(data_dir)])

    assert result.exit_code == 0
    assert "/api/articles" in result.output
    assert "/api/profile" in result.output
    assert "(2 rows)" in result.output
    assert "broken.json" in result.output


def test_routes_missing_directory(tmp_path: Path) -> None:
    result = runner.invoke(app, ["routes", "--data-dir", str(tmp_path / "missing")])

    assert result.exit_code == 1
    assert "does not exist" in result.output


def test_serve_runs_uvicorn_with_config(data_dir: Path) -> None:
    with (
        patch("json_server.cli.serve.configure_logging") as configure_logging,
        patch("uvicorn.run") as uvicorn_run,
    ):
        result = runner.invoke(app, ["serve", "-d", str(data_dir), "-p", "4010", "--host", "0.0.0.0"])

    assert result.exit_code == 0, result.output
    configure_logging.assert_called_once_with("info")
    uvicorn_run.assert_called_once()
    served_app = uvicorn_run.call_args[0][0]
    assert uvicorn_run.call_args.kwargs == {"host": "0.0.0.0", "port": 4010, "log_level": "info"}
    assert served_app.state.config.data_dir == data_dir
    assert served_app.state.holder.current.list() == ("articles", "profile")
    assert "/api/articles" in result.output


def test_serve_reads_environment(data_dir: Path) -> None:
    env = {"JSON_SERVER_DATA_DIR": str(data_dir), "JSON_SERVER_PORT": "5050", "JSON_SERVER_WATCH": "true"}
    with patch("json_server.cli.serve.configure_logging"), patch("uvicorn.run") as uvicorn_run:
        result = runner.invoke(app, ["serve"], env=env)

    assert result.exit_code == 0, result.output
    assert uvicorn_run.call_args.kwargs["port"] == 5050
    assert uvicorn_run.call_args[0][0].state.config.watch is True


def test_serve_missing_directory_exits(tmp_path: Path) -> None:
    with patch("json_server.cli.serve.configure_logging"), patch("uvicorn.run") as uvicorn_run:
        result = runner.invoke(app, ["serve", "-d", str(tmp_path / "missing")])

    assert result.exit_code == 1
    assert "does not exist" in result.output
    uvicorn_run.assert_not_called()


def test_serve_empty_directory_still_serves(empty_data_dir: Path) -> None:
    with patch("json_server.cli.serve.configure_logging"), patch("uvicorn.run") as uvicorn_run:
        result = runner.invoke(app, ["serve", "-d", str(empty_data_dir)])

    assert result.exit_code == 0, result.output
    uvicorn_run.assert_called_once()
    assert "No JSON files found" in result.output


def test_serve_rejects_unknown_log_level(data_dir: Path) -> None:
    with patch("uvicorn.run") as uvicorn_run:
        result = runner.invoke(app, ["serve", "-d", str(data_dir), "--log-level", "loud"])

    assert result.exit_code == 2
    uvicorn_run.assert_not_called()


def test_serve_rejects_invalid_port(data_dir: Path) -> None:
    result = runner.invoke(app, ["serve", "-d", str(data_dir), "-p", "70000"])

    assert result.exit_code == 2
