"""
Tests for the command-line entry point.
"""

import logging
from collections.abc import Iterator
from pathlib import Path

import pytest

from nginx_discovery import parse
from nginx_discovery.__main__ import format_tree, main


@pytest.fixture(autouse=True)
def reset_handlers() -> Iterator[None]:
    yield
    logging.getLogger("nginx_discovery").handlers.clear()


def test_format_tree() -> None:
    """Test tree rendering of nested blocks."""
    config = parse("user nginx;\nhttp { log_format main '$remote_addr'; server { listen 80; } }")

    assert format_tree(config) == [
        "├─ user nginx;",
        "└─ http {",
        "  ├─ log_format main '$remote_addr';",
        "  └─ server {",
        "    └─ listen 80;",
        "    }",
        "  }",
    ]


def test_tree_output(config_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """Test --tree output."""
    assert main([str(config_file), "--tree", "--no-color"]) == 0

    out = capsys.readouterr().out
    assert "├─ user nginx;" in out
    assert "└─ http {" in out
    assert "proxy_set_header Host $host;" in out
    assert "Configuration summary" not in out


def test_summary_output(config_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """Test --summary counts."""
    assert main([str(config_file), "--summary"]) == 0

    out = capsys.readouterr().out.splitlines()
    assert "  Top-level directives: 4" in out
    assert "  Total directives: 16" in out
    assert "  Block directives: 5" in out


def test_default_prints_tree_and_summary(
    config_file: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    """Test default output mode."""
    assert main([str(config_file)]) == 0

    out = capsys.readouterr().out
    assert "└─ http {" in out
    assert "Configuration summary:" in out


def test_tokens_output(config_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """Test --tokens output."""
    assert main([str(config_file), "--tokens"]) == 0

    out = capsys.readouterr().out.splitlines()
    assert out[0] == "1:1\tWORD\t'user'"
    assert out[-1].endswith("\tEOF\t''")


def test_parse_error_reports_location(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """Test that parse errors print a located report and exit 1."""
    path = tmp_path / "broken.conf"
    path.write_text("server {\n    listen 80\n}\n", encoding="utf-8")

    assert main([str(path), "-q"]) == 1

    err = capsys.readouterr().err
    assert "Syntax error at line 3, column 1: expected value" in err
    assert "\n}\n^\n" in err
    assert "Found: '}'" in err


def test_missing_file(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """Test missing configuration file."""
    assert main([str(tmp_path / "nope.conf")]) == 1
    assert "Configuration file not found" in capsys.readouterr().err
