"""Tests for the byterate command-line entrypoint."""

from __future__ import annotations

from pathlib import Path

import pytest

from byterate import __version__
from byterate.interfaces.cli.cli import (
    EXIT_CONFIG_ERROR,
    EXIT_OK,
    EXIT_PARSE_ERROR,
    start,
)


class TestUsageAndVersion:
    def test_no_arguments_prints_usage(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert start([]) == EXIT_OK
        out = capsys.readouterr().out
        assert out.startswith("Usage: byterate <number> <unit> / <period>")

    def test_help(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            start(["--help"])
        assert exc_info.value.code == 0
        assert "<number> <unit> / <period>" in capsys.readouterr().out

    @pytest.mark.parametrize("flag", ["-v", "--version"])
    def test_version(self, flag: str, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            start([flag])
        assert exc_info.value.code == 0
        assert capsys.readouterr().out.strip() == f"byterate {__version__}"


class TestConversion:
    def test_success_prints_seven_lines(
        self, capsys: pytest.CaptureFixture[str]
    ) -> None:
        assert start(["1", "B", "/", "s"]) == EXIT_OK
        captured = capsys.readouterr()
        lines = captured.out.splitlines()
        assert len(lines) == 7
        assert lines[:4] == [
            "  1.000  B / sec",
            " 60.000  B / min",
            "  3.600 KB / hour",
            " 86.400 KB / day",
        ]
        assert captured.err == ""

    def test_arguments_are_joined_with_spaces(
        self, capsys: pytest.CaptureFixture[str]
    ) -> None:
        assert start(["1.25", "MB/s"]) == EXIT_OK
        assert capsys.readouterr().out.splitlines()[0] == "  1.250 MB / sec"

    def test_single_argument(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert start(["1.25 MB / s"]) == EXIT_OK
        assert capsys.readouterr().out.splitlines()[0] == "  1.250 MB / sec"

    def test_options_may_follow_expression(
        self, capsys: pytest.CaptureFixture[str]
    ) -> None:
        assert start(["1", "KB/s", "--log-format", "json"]) == EXIT_OK
        assert capsys.readouterr().out.splitlines()[0] == "  1.000 KB / sec"


class TestFailures:
    def test_parse_error(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert start(["4", "XB/s"]) == EXIT_PARSE_ERROR
        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err.strip() == (
            "byterate: not a recognized unit (B KB MB GB TB PB EB ZB YB)"
        )

    def test_negative_number(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert start(["-33", "MB/s"]) == EXIT_PARSE_ERROR
        assert capsys.readouterr().err.strip() == "byterate: not a valid number"

    def test_missing_separator(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert start(["1", "MB"]) == EXIT_PARSE_ERROR
        assert capsys.readouterr().err.strip() == (
            "byterate: expected '/', found end of input"
        )

    def test_strict_units_flag(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert start(["1/s"]) == EXIT_OK
        capsys.readouterr()
        assert start(["--strict-units", "1/s"]) == EXIT_PARSE_ERROR
        assert "not a recognized unit" in capsys.readouterr().err

    def test_missing_config_file(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        code = start(["--config", str(tmp_path / "missing.yaml"), "1", "B/s"])
        assert code == EXIT_CONFIG_ERROR
        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err.startswith("byterate: config file not found")

    def test_directory_as_config(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        assert start(["--config", str(tmp_path), "1", "B/s"]) == EXIT_CONFIG_ERROR
        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err.startswith("byterate: config file not found")
        assert len(captured.err.splitlines()) == 1

    def test_directory_as_dotenv(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        assert start(["--dotenv", str(tmp_path), "1", "B/s"]) == EXIT_CONFIG_ERROR
        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err.startswith("byterate: config file not found")

    def test_unreadable_config(
        self,
        tmp_path: Path,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        path = tmp_path / "config.yaml"
        path.write_text("display:\n  precision: 1\n", encoding="utf-8")

        def _denied(self: Path, *args: object, **kwargs: object) -> str:
            raise PermissionError(13, "Permission denied", str(self))

        monkeypatch.setattr(Path, "read_text", _denied)
        assert start(["--config", str(path), "1", "B/s"]) == EXIT_CONFIG_ERROR
        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err.startswith("byterate: cannot read config")

    def test_invalid_config_value(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        path = tmp_path / "config.yaml"
        path.write_text("display:\n  precision: -1\n", encoding="utf-8")
        assert start(["--config", str(path), "1", "B/s"]) == EXIT_CONFIG_ERROR
        assert capsys.readouterr().err.startswith("byterate: invalid configuration")

    def test_invalid_yaml(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        path = tmp_path / "config.yaml"
        path.write_text("display: [unclosed\n", encoding="utf-8")
        assert start(["--config", str(path), "1", "B/s"]) == EXIT_CONFIG_ERROR
        assert capsys.readouterr().err.startswith("byterate: invalid configuration")


class TestDisplayConfig:
    def test_precision_from_yaml(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        path = tmp_path / "config.yaml"
        path.write_text("display:\n  precision: 1\n", encoding="utf-8")
        assert start(["--config", str(path), "1", "B/s"]) == EXIT_OK
        assert capsys.readouterr().out.splitlines()[0] == "    1.0  B / sec"

    def test_precision_from_env(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        monkeypatch.setenv("BYTERATE_DISPLAY_PRECISION", "0")
        assert start(["2", "KB/s"]) == EXIT_OK
        assert capsys.readouterr().out.splitlines()[0] == "      2 KB / sec"
