"""
Tests for error types and diagnostic rendering.
"""

import pytest

from nginx_discovery import parse
from nginx_discovery.errors import (
    ConfigIOError,
    CustomError,
    ErrorBuilder,
    InvalidArgumentError,
    InvalidDirectiveError,
    NginxDiscoveryError,
    NginxSyntaxError,
    ParseError,
    UnexpectedEofError,
    extract_snippet,
    get_line,
)


def test_parse_error() -> None:
    """Test parse error message and location."""
    error = ParseError("unexpected token", 10, 5)

    assert "line 10" in str(error)
    assert "column 5" in str(error)
    assert error.short() == "line 10:5: unexpected token"


def test_parse_error_with_context() -> None:
    """Test parse error report with snippet and help."""
    error = ParseError(
        "unexpected semicolon",
        2,
        10,
        snippet="server { listen 80;; }",
        help="Remove the extra semicolon",
    )

    assert error.detailed() == "\n".join([
        "Parse error at line 2, column 10: unexpected semicolon",
        "",
        "server { listen 80;; }",
        "         ^",
        "",
        "Help: Remove the extra semicolon",
    ])


def test_parse_error_without_snippet_is_single_line() -> None:
    """Test report without snippet."""
    error = ParseError("bad", 1, 1)

    assert error.detailed() == "Parse error at line 1, column 1: bad"


def test_syntax_error() -> None:
    """Test syntax error report."""
    error = NginxSyntaxError("invalid token", 5, 12, expected="';' or '{'", found="'@'")
    detailed = error.detailed()

    assert detailed.startswith("Syntax error at line 5, column 12: invalid token")
    assert "Expected: ';' or '{'" in detailed
    assert "Found: '@'" in detailed
    assert error.short() == "line 5:12: invalid token"


def test_unexpected_eof() -> None:
    """Test unexpected end of input."""
    error = UnexpectedEofError("closing brace '}'", 100)

    assert "Unexpected end of input" in str(error)
    assert error.detailed() == "Unexpected end of file at line 100\nExpected: closing brace '}'"


def test_invalid_directive() -> None:
    """Test invalid directive report."""
    error = InvalidDirectiveError("liste", reason="Unknown directive", suggestion="listen")
    detailed = error.detailed()

    assert "Invalid directive: liste" in detailed
    assert "Reason: Unknown directive" in detailed
    assert "Try using 'listen' instead" in detailed
    assert error.message == "liste"


def test_invalid_argument() -> None:
    """Test invalid argument report."""
    error = InvalidArgumentError("listen", "port out of range", expected="1-65535")

    assert str(error) == "Invalid argument for directive 'listen': port out of range"
    assert "Expected: 1-65535" in error.detailed()


def test_custom_error() -> None:
    """Test custom error without location."""
    error = CustomError("something went wrong")

    assert error.message == "something went wrong"
    assert str(error) == "something went wrong"
    assert error.short() == "something went wrong"


def test_io_error() -> None:
    """Test IO error message."""
    assert str(ConfigIOError("disk on fire", "/etc/nginx/nginx.conf")) == "IO error: disk on fire"


@pytest.mark.parametrize(
    "error",
    [
        ParseError("x", 1, 1),
        NginxSyntaxError("x", 1, 1),
        UnexpectedEofError("x", 1),
        InvalidDirectiveError("x"),
        InvalidArgumentError("x", "y"),
        ConfigIOError("x"),
        CustomError("x"),
    ],
)
def test_all_errors_share_base_class(error: NginxDiscoveryError) -> None:
    """Test the error hierarchy."""
    assert isinstance(error, NginxDiscoveryError)
    assert isinstance(error, Exception)


def test_with_source_points_at_error_line() -> None:
    """Test pointer placement with surrounding context."""
    source = "user nginx;\nserver {\n    listen 80\n}\n"

    with pytest.raises(NginxSyntaxError) as exc_info:
        parse(source)

    error = exc_info.value.with_source(source, context_lines=1)

    assert error.snippet == "    listen 80\n}"
    assert error.detailed() == "\n".join([
        "Syntax error at line 4, column 1: expected value",
        "",
        "    listen 80",
        "}",
        "^",
        "Expected: word, string, number, or variable",
        "Found: '}'",
    ])


def test_with_source_pointer_inside_context() -> None:
    """Test pointer inserted below the error line."""
    source = "a 1;\nb 2 @;\nc 3;"

    with pytest.raises(NginxSyntaxError) as exc_info:
        parse(source)

    lines = exc_info.value.with_source(source, context_lines=1).detailed().split("\n")

    assert lines[2:6] == ["a 1;", "b 2 @;", "    ^", "c 3;"]


def test_with_source_on_eof_error() -> None:
    """Test snippet on end-of-input errors."""
    source = 'root "/var/www'

    with pytest.raises(UnexpectedEofError) as exc_info:
        parse(source)

    assert exc_info.value.with_source(source).detailed() == "\n".join([
        "Unexpected end of file at line 1",
        "",
        'root "/var/www',
        "Expected: closing quote",
    ])


def test_with_source_clamps_past_last_line() -> None:
    """Test errors reported past the last line."""
    source = "server {\n    listen 80;\n"

    with pytest.raises(NginxSyntaxError) as exc_info:
        parse(source)

    error = exc_info.value.with_source(source)

    assert error.line == 3
    assert error.snippet == "    listen 80;"


def test_with_source_without_line_is_noop() -> None:
    """Test attaching source to an error without location."""
    error = CustomError("x")

    assert error.with_source("user nginx;") is error
    assert error.snippet is None


def test_error_builder_basic() -> None:
    """Test building a parse error."""
    error = ErrorBuilder().message("unexpected token").location(5, 10).build()

    assert isinstance(error, ParseError)
    assert "line 5" in str(error)
    assert "column 10" in str(error)
    assert error.snippet is None


def test_error_builder_with_context() -> None:
    """Test building a parse error with snippet and help."""
    error = (
        ErrorBuilder()
        .message("missing semicolon")
        .location(10, 20)
        .snippet("server { listen 80 }")
        .help("Add a semicolon after '80'")
        .build()
    )
    detailed = error.detailed()

    assert "missing semicolon" in detailed
    assert "server { listen 80 }" in detailed
    assert "Help: Add a semicolon" in detailed


def test_extract_snippet() -> None:
    """Test snippet extraction with context lines."""
    source = "line 1\nline 2\nline 3\nline 4\nline 5"

    assert extract_snippet(source, 3, 1) == "line 2\nline 3\nline 4"
    assert extract_snippet(source, 1, 1) == "line 1\nline 2"
    assert extract_snippet(source, 5, 1) == "line 4\nline 5"
    assert extract_snippet(source, 3) == "line 3"
    assert extract_snippet(source, 2, 10) == source


def test_get_line() -> None:
    """Test single line lookup."""
    source = "line 1\nline 2\nline 3"

    assert get_line(source, 1) == "line 1"
    assert get_line(source, 3) == "line 3"
    assert get_line(source, 4) is None
