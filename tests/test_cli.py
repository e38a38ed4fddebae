"""Tests for CLI entry point."""

from __future__ import annotations

import subprocess
import sys

from unittest.mock import patch

import pytest

from invite_gallery.app import CLI


def test_parser_run_defaults() -> None:
    """Parser parses 'run' with defaults."""
    parser = CLI._build_parser()
    args = parser.parse_args(["run"])
    assert args.command == "run"
    assert args.host == "0.0.0.0"
    assert args.port == 8000
    assert args.reload is False


def test_cli_no_command_exits(capsys: pytest.CaptureFixture[str]) -> None:
    """CLI with no command prints help and exits 1."""
    with pytest.raises(SystemExit) as exc_info:
        CLI.main([])
    assert exc_info.value.code == 1


def test_cli_entry_point_installed() -> None:
    """invite_gallery.app is runnable as a module."""
    result = subprocess.run(
        [sys.executable, "-m", "invite_gallery.app"],
        capture_output=True, text=True, timeout=10,
    )
    # Should print help (no command given) and exit 1
    assert result.returncode == 1


def test_run_starts_gallery_factory() -> None:
    """'run' hands the gallery app factory and the parsed options to uvicorn."""
    with patch("uvicorn.run") as mock_run:
        CLI.main(["run", "--port", "9100", "--host", "127.0.0.1", "--reload"])
    mock_run.assert_called_once_with(
        "invite_gallery.app:create_app",
        factory=True,
        host="127.0.0.1",
        port=9100,
        reload=True,
    )


def test_run_reports_server_error(capsys: pytest.CaptureFixture[str]) -> None:
    """A server startup failure is printed and exits 1."""
    with (
        patch("uvicorn.run", side_effect=OSError("address in use")),
        pytest.raises(SystemExit) as exc_info,
    ):
        CLI.main(["run"])
    assert exc_info.value.code == 1
    assert "Error: address in use" in capsys.readouterr().err
