"""
Error types with source diagnostics.

Every error raised while lexing or parsing carries the 1-indexed line
(and usually column) where it happened. Located errors can also carry a
snippet of the offending source; the lexer and parser never compute one
themselves, callers attach it with with_source().

detailed() renders a multi-line report:

    Syntax error at line 3, column 12: unexpected token

        listen 80
                 ^
    Expected: ';'
    Found: '}'
"""


class NginxDiscoveryError(Exception):
    """Base class for all errors raised by nginx_discovery."""

    def __init__(self, message: str, line: int | None = None, col: int | None = None):
        self.message = message
        self.line = line
        self.col = col
        self.snippet: str | None = None
        self.snippet_start_line: int | None = None
        super().__init__(self._headline())

    def _headline(self) -> str:
        return self.message

    def with_source(self, source: str, context_lines: int = 0) -> "NginxDiscoveryError":
        """
        Attach a snippet of source around the error line.

        Returns self so it can be used in a raise or return statement.
        Errors without a line number are returned unchanged.
        """
        if self.line is None:
            return self
        lines = source.splitlines()
        if not lines:
            return self
        # Clamp to the buffer so EOF errors past a trailing newline still get a line
        line = min(max(self.line, 1), len(lines))
        self.snippet = extract_snippet(source, line, context_lines)
        self.snippet_start_line = max(line - context_lines, 1)
        return self

    def short(self) -> str:
        """One-line description."""
        if self.line is not None and self.col is not None:
            return f"line {self.line}:{self.col}: {self.message}"
        return str(self)

    def detailed(self) -> str:
        """Multi-line description with snippet and hints when available."""
        output = [str(self)]
        output.extend(self._snippet_lines())
        output.extend(self._detail_lines())
        return "\n".join(output)

    def _snippet_lines(self) -> list[str]:
        if not self.snippet:
            return []

        lines = self.snippet.split("\n")
        result = [""]
        if self.col is None:
            return result + lines

        pointer = " " * max(self.col - 1, 0) + "^"
        if self.snippet_start_line is not None and self.line is not None:
            index = self.line - self.snippet_start_line
            if 0 <= index < len(lines):
                return result + lines[: index + 1] + [pointer] + lines[index + 1 :]
        return result + lines + [pointer]

    def _detail_lines(self) -> list[str]:
        return []


class ParseError(NginxDiscoveryError):
    """Parse error with an optional source snippet and help text."""

    def __init__(
        self,
        message: str,
        line: int,
        col: int,
        snippet: str | None = None,
        help: str | None = None,
    ):
        super().__init__(message, line, col)
        self.snippet = snippet
        self.help = help

    def _headline(self) -> str:
        return f"Parse error at line {self.line}, column {self.col}: {self.message}"

    def _detail_lines(self) -> list[str]:
        if self.help:
            return ["", f"Help: {self.help}"]
        return []


class NginxSyntaxError(NginxDiscoveryError):
    """
    Syntax error with what was expected and what was found.

    Raised by the lexer for malformed tokens and by the parser for
    grammar violations.
    """

    def __init__(
        self,
        message: str,
        line: int,
        col: int,
        expected: str | None = None,
        found: str | None = None,
    ):
        self.expected = expected
        self.found = found
        super().__init__(message, line, col)

    def _headline(self) -> str:
        return f"Syntax error at line {self.line}, column {self.col}: {self.message}"

    def _detail_lines(self) -> list[str]:
        lines = []
        if self.expected is not None:
            lines.append(f"Expected: {self.expected}")
        if self.found is not None:
            lines.append(f"Found: {self.found}")
        return lines


class UnexpectedEofError(NginxDiscoveryError):
    """Input ended while something was still expected."""

    def __init__(self, expected: str, line: int):
        self.expected = expected
        super().__init__(f"expected {expected}", line)

    def _headline(self) -> str:
        return f"Unexpected end of input at line {self.line}: expected {self.expected}"

    def detailed(self) -> str:
        output = [f"Unexpected end of file at line {self.line}"]
        output.extend(self._snippet_lines())
        output.append(f"Expected: {self.expected}")
        return "\n".join(output)


class InvalidDirectiveError(NginxDiscoveryError):
    """Unknown or misused directive, reported by higher layers."""

    def __init__(self, name: str, reason: str | None = None, suggestion: str | None = None):
        self.name = name
        self.reason = reason
        self.suggestion = suggestion
        super().__init__(name)

    def _headline(self) -> str:
        return f"Invalid directive: {self.name}"

    def _detail_lines(self) -> list[str]:
        lines = []
        if self.reason:
            lines.append(f"Reason: {self.reason}")
        if self.suggestion:
            lines.append(f"Suggestion: Try using '{self.suggestion}' instead")
        return lines


class InvalidArgumentError(NginxDiscoveryError):
    """Bad argument for a directive, reported by higher layers."""

    def __init__(self, directive: str, message: str, expected: str | None = None):
        self.directive = directive
        self.expected = expected
        super().__init__(message)

    def _headline(self) -> str:
        return f"Invalid argument for directive '{self.directive}': {self.message}"

    def _detail_lines(self) -> list[str]:
        if self.expected:
            return [f"Expected: {self.expected}"]
        return []


class ConfigIOError(NginxDiscoveryError):
    """Configuration file could not be read."""

    def __init__(self, message: str, path: str | None = None):
        self.path = path
        super().__init__(message)

    def _headline(self) -> str:
        return f"IO error: {self.message}"


class CustomError(NginxDiscoveryError):
    """Free-form error for callers that need one."""


class ErrorBuilder:
    """
    Fluent builder for ParseError.

    Usage:
        error = (
            ErrorBuilder()
            .message("missing semicolon")
            .location(3, 20)
            .snippet("server { listen 80 }")
            .help("Add a semicolon after '80'")
            .build()
        )
    """

    def __init__(self):
        self._message = ""
        self._line = 0
        self._col = 0
        self._snippet: str | None = None
        self._help: str | None = None

    def message(self, message: str) -> "ErrorBuilder":
        self._message = message
        return self

    def location(self, line: int, col: int) -> "ErrorBuilder":
        self._line = line
        self._col = col
        return self

    def snippet(self, snippet: str) -> "ErrorBuilder":
        self._snippet = snippet
        return self

    def help(self, help: str) -> "ErrorBuilder":
        self._help = help
        return self

    def build(self) -> ParseError:
        return ParseError(
            self._message,
            self._line,
            self._col,
            snippet=self._snippet,
            help=self._help,
        )


def extract_snippet(source: str, line: int, context_lines: int = 0) -> str:
    """
    Extract source lines around a line number.

    Args:
        source: Full source text
        line: Line number (1-indexed)
        context_lines: Number of lines to include before and after

    Returns:
        The selected lines joined with newlines (empty if out of range)
    """
    lines = source.splitlines()
    index = max(line - 1, 0)
    start = max(index - context_lines, 0)
    end = min(index + context_lines + 1, len(lines))
    return "\n".join(lines[start:end])


def get_line(source: str, line: int) -> str | None:
    """Get a single source line (1-indexed), or None if out of range."""
    lines = source.splitlines()
    index = max(line - 1, 0)
    if index < len(lines):
        return lines[index]
    return None
