"""
Token types produced by the lexer.
"""

from dataclasses import dataclass
from enum import Enum, auto

from ..ast.span import Span


class TokenKind(Enum):
    """Token kinds for NGINX configuration syntax."""

    # Payload carrying
    WORD = auto()          # server, listen, /var/www, buffer=32k
    STRING = auto()        # "quoted" or 'quoted'
    NUMBER = auto()        # 80, 1.5
    VARIABLE = auto()      # $host, ${host}
    COMMENT = auto()       # # comment text

    # Delimiters
    LBRACE = auto()        # {
    RBRACE = auto()        # }
    SEMICOLON = auto()     # ;

    EOF = auto()

    def describe(self, value: str = "") -> str:
        """Human-readable description used in diagnostics."""
        if self is TokenKind.WORD:
            return f"word '{value}'"
        if self is TokenKind.STRING:
            return f'string "{value}"'
        if self is TokenKind.NUMBER:
            return f"number '{value}'"
        if self is TokenKind.VARIABLE:
            return f"variable '${value}'"
        if self is TokenKind.COMMENT:
            return f"comment '# {value}'"
        return _DELIMITER_NAMES[self]


_DELIMITER_NAMES = {
    TokenKind.LBRACE: "'{'",
    TokenKind.RBRACE: "'}'",
    TokenKind.SEMICOLON: "';'",
    TokenKind.EOF: "end of file",
}


@dataclass(frozen=True)
class Token:
    """
    A single token from the lexer.

    value holds the payload for WORD, STRING, NUMBER, VARIABLE and COMMENT
    tokens and is empty otherwise. For STRING tokens quote is the delimiter
    the string was written with.
    """

    kind: TokenKind
    value: str
    span: Span
    quote: str = ""

    def __repr__(self) -> str:
        return f"Token({self.kind.name}, {self.value!r}, {self.span.line}:{self.span.col})"

    def describe(self) -> str:
        return self.kind.describe(self.value)

    @property
    def is_word(self) -> bool:
        return self.kind is TokenKind.WORD

    @property
    def is_string(self) -> bool:
        return self.kind is TokenKind.STRING

    @property
    def is_number(self) -> bool:
        return self.kind is TokenKind.NUMBER

    @property
    def is_variable(self) -> bool:
        return self.kind is TokenKind.VARIABLE

    @property
    def text(self) -> str | None:
        """Payload of value-like tokens, None for delimiters and comments."""
        if self.kind in (TokenKind.WORD, TokenKind.STRING, TokenKind.NUMBER, TokenKind.VARIABLE):
            return self.value
        return None
