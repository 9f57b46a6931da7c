"""
Lexer (tokenizer) for NGINX configuration syntax.

Supports:
- Words (directive names, paths, regex location modifiers, key=value options)
- Quoted strings (single or double quotes, escapes kept verbatim)
- Numbers (digits and dots, no validation)
- Variables ($name and ${name})
- Braces, semicolons and # line comments
"""

from collections.abc import Callable, Iterator

from ..ast.span import Span
from ..errors import NginxSyntaxError, UnexpectedEofError
from ..logging import get_logger
from .tokens import Token, TokenKind


logger = get_logger("lexer")

WORD_START_CHARS = frozenset("_/.*^~\\")
WORD_CHARS = frozenset("_-/.:=*^~\\$")


def is_word_start(char: str) -> bool:
    """Check if a character can start a word."""
    return (char.isascii() and char.isalpha()) or char in WORD_START_CHARS


def is_word_char(char: str) -> bool:
    """Check if a character can continue a word."""
    return (char.isascii() and char.isalnum()) or char in WORD_CHARS


class Lexer:
    """
    Tokenizer for NGINX configuration text.

    Tracks the character position, the UTF-8 byte offset and the
    1-indexed line/column of the next character.

    Example:
        http {
            log_format main '$remote_addr';
            access_log /var/log/nginx/access.log main buffer=32k;
        }
    """

    def __init__(self, source: str):
        self.source = source
        self.pos = 0
        self.offset = 0
        self.line = 1
        self.column = 1

    def _current(self) -> str:
        """Get current character or empty string if at end."""
        if self.pos >= len(self.source):
            return ""
        return self.source[self.pos]

    def _at_end(self) -> bool:
        return self.pos >= len(self.source)

    def _advance(self) -> str:
        """Advance position and return the consumed character."""
        if self.pos >= len(self.source):
            return ""

        char = self.source[self.pos]
        self.pos += 1
        self.offset += len(char.encode("utf-8"))

        if char == "\n":
            self.line += 1
            self.column = 1
        else:
            self.column += 1

        return char

    def _skip_whitespace(self) -> None:
        char = self._current()
        while char and char.isspace():
            self._advance()
            char = self._current()

    def _read_while(self, predicate: Callable[[str], bool]) -> str:
        start = self.pos
        while not self._at_end() and predicate(self._current()):
            self._advance()
        return self.source[start:self.pos]

    def _read_comment(self) -> tuple[TokenKind, str]:
        self._advance()  # skip #
        text = self._read_while(lambda c: c != "\n")
        return TokenKind.COMMENT, text.strip()

    def _read_string(self, quote: str) -> tuple[TokenKind, str]:
        """Read a quoted string; the raw text between the quotes is kept."""
        self._advance()  # skip opening quote
        start = self.pos
        escaped = False

        while not self._at_end():
            char = self._current()

            if escaped:
                escaped = False
                self._advance()
                continue

            if char == "\\":
                escaped = True
                self._advance()
                continue

            if char == quote:
                value = self.source[start:self.pos]
                self._advance()  # skip closing quote
                return TokenKind.STRING, value

            if char == "\n":
                raise NginxSyntaxError(
                    "unterminated string literal",
                    self.line,
                    self.column,
                    expected="closing quote",
                    found="newline",
                )

            self._advance()

        raise UnexpectedEofError("closing quote", self.line)

    def _read_variable(self) -> tuple[TokenKind, str]:
        self._advance()  # skip $

        if self._current() == "{":
            self._advance()  # skip {
            name = self._read_while(lambda c: c != "}")
            if self._at_end():
                raise UnexpectedEofError("'}'", self.line)
            self._advance()  # skip }
        else:
            name = self._read_while(is_word_char)

        if not name:
            raise NginxSyntaxError(
                "expected variable name after '$'",
                self.line,
                self.column,
                expected="variable name",
            )
        return TokenKind.VARIABLE, name

    def _read_number(self) -> tuple[TokenKind, str]:
        # Permissive: no sign, exponent or single-dot check
        number = self._read_while(lambda c: (c.isascii() and c.isdigit()) or c == ".")
        return TokenKind.NUMBER, number

    def _read_word(self) -> tuple[TokenKind, str]:
        return TokenKind.WORD, self._read_while(is_word_char)

    def next_token(self) -> Token:
        """
        Get the next token from the source.

        Raises:
            NginxSyntaxError: On an unexpected character, a newline inside a
                quoted string or an empty variable name
            UnexpectedEofError: On an unterminated string or ${...} variable
        """
        self._skip_whitespace()

        if self._at_end():
            return Token(TokenKind.EOF, "", Span.at(self.offset, self.line, self.column))

        start_offset = self.offset
        start_line = self.line
        start_col = self.column
        char = self._current()
        quote = ""

        if char == "#":
            kind, value = self._read_comment()
        elif char in "{};":
            self._advance()
            kind, value = _SINGLE_CHAR_TOKENS[char], ""
        elif char == "=":
            # Kept as a word so option syntax like buffer=32k stays plain text
            self._advance()
            kind, value = TokenKind.WORD, "="
        elif char in "\"'":
            quote = char
            kind, value = self._read_string(char)
        elif char == "$":
            kind, value = self._read_variable()
        elif char.isascii() and char.isdigit():
            kind, value = self._read_number()
        elif is_word_start(char):
            kind, value = self._read_word()
        else:
            raise NginxSyntaxError(
                f"unexpected character '{char}'",
                self.line,
                self.column,
                expected="valid token",
                found=f"'{char}'",
            )

        span = Span(start_offset, self.offset, start_line, start_col)
        return Token(kind, value, span, quote)

    def tokenize(self) -> list[Token]:
        """
        Tokenize the whole source, EOF token included.

        Raises on the first malformed token; no partial list is returned.
        """
        tokens = []
        while True:
            token = self.next_token()
            tokens.append(token)
            if token.kind is TokenKind.EOF:
                logger.debug(f"Tokenized {len(tokens)} tokens over {self.line} lines")
                return tokens

    def __iter__(self) -> Iterator[Token]:
        """Lazily yield tokens up to and including EOF."""
        while True:
            token = self.next_token()
            yield token
            if token.kind is TokenKind.EOF:
                break


_SINGLE_CHAR_TOKENS = {
    "{": TokenKind.LBRACE,
    "}": TokenKind.RBRACE,
    ";": TokenKind.SEMICOLON,
}


def tokenize(source: str) -> list[Token]:
    """Convenience function to tokenize a source string."""
    return Lexer(source).tokenize()
