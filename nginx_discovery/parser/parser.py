"""
Recursive descent parser for NGINX configuration syntax.

Lexes the whole source up front, then walks the token list with an index
cursor and builds a tree of directives. Nesting depth of blocks equals the
recursion depth of _parse_directive().
"""

from pathlib import Path

from ..ast import Config, Directive, Span, Value
from ..errors import ConfigIOError, NginxSyntaxError
from ..logging import get_logger
from .lexer import Lexer
from .tokens import Token, TokenKind


logger = get_logger("parser")


class Parser:
    """
    Parser for NGINX configuration.

    Grammar:
        config      := directive*
        directive   := WORD value* (';' | '{' directive* '}')
        value       := WORD | STRING | NUMBER | VARIABLE

    Comments may appear anywhere between tokens and are dropped.
    """

    def __init__(self, source: str):
        self.tokens: list[Token] = Lexer(source).tokenize()
        self.pos = 0

    def _current(self) -> Token:
        """Get current token; the trailing EOF token is returned past the end."""
        if self.pos < len(self.tokens):
            return self.tokens[self.pos]
        return self.tokens[-1]

    def _advance(self) -> Token:
        """Advance to next token and return the previous one."""
        token = self._current()
        if token.kind is not TokenKind.EOF:
            self.pos += 1
        return token

    def _check(self, kind: TokenKind) -> bool:
        """Check if current token is of given kind, ignoring its payload."""
        return self._current().kind is kind

    def _at_end(self) -> bool:
        return self._check(TokenKind.EOF)

    def _skip_comment(self) -> bool:
        if self._check(TokenKind.COMMENT):
            self._advance()
            return True
        return False

    def _expect(self, kind: TokenKind) -> Token:
        """Expect current token to be of given kind, advance and return it."""
        token = self._current()
        if token.kind is not kind:
            raise NginxSyntaxError(
                "unexpected token",
                token.span.line,
                token.span.col,
                expected=kind.describe(),
                found=token.describe(),
            )
        return self._advance()

    def _expect_word(self) -> Token:
        token = self._current()
        if token.kind is not TokenKind.WORD:
            raise NginxSyntaxError(
                "expected directive name",
                token.span.line,
                token.span.col,
                expected="word",
                found=token.describe(),
            )
        return self._advance()

    def parse(self) -> Config:
        """Parse the entire configuration."""
        config = Config()

        while not self._at_end():
            if self._skip_comment():
                continue
            config.add_directive(self._parse_directive())

        return config

    def _parse_directive(self) -> Directive:
        """Parse a single directive, simple or block."""
        name_token = self._expect_word()
        args: list[Value] = []

        while not (
            self._check(TokenKind.SEMICOLON)
            or self._check(TokenKind.LBRACE)
            or self._at_end()
        ):
            if self._skip_comment():
                continue
            args.append(self._parse_value())

        if self._check(TokenKind.LBRACE):
            self._advance()
            children = self._parse_block_contents()
            end_token = self._expect(TokenKind.RBRACE)
            return Directive(
                name=name_token.value,
                args=args,
                children=children,
                span=self._directive_span(name_token, end_token),
            )

        end_token = self._expect(TokenKind.SEMICOLON)
        return Directive(
            name=name_token.value,
            args=args,
            span=self._directive_span(name_token, end_token),
        )

    def _parse_block_contents(self) -> list[Directive]:
        """Parse directives up to the closing brace (not consumed)."""
        children = []

        while not self._check(TokenKind.RBRACE) and not self._at_end():
            if self._skip_comment():
                continue
            children.append(self._parse_directive())

        return children

    def _parse_value(self) -> Value:
        """Convert the current token into a directive argument."""
        token = self._current()

        if token.kind is TokenKind.STRING:
            if token.quote == '"':
                value = Value.double_quoted(token.value)
            else:
                value = Value.single_quoted(token.value)
        elif token.kind in (TokenKind.WORD, TokenKind.NUMBER):
            value = Value.literal(token.value)
        elif token.kind is TokenKind.VARIABLE:
            value = Value.variable(token.value)
        else:
            raise NginxSyntaxError(
                "expected value",
                token.span.line,
                token.span.col,
                expected="word, string, number, or variable",
                found=token.describe(),
            )

        self._advance()
        return value

    @staticmethod
    def _directive_span(start: Token, end: Token) -> Span:
        """Span from the directive name to its terminating ';' or '}'."""
        return Span(
            start=start.span.start,
            end=end.span.end,
            line=start.span.line,
            col=start.span.col,
        )


def parse(source: str) -> Config:
    """
    Parse NGINX configuration text.

    Args:
        source: Configuration source text

    Returns:
        Parsed Config

    Raises:
        NginxSyntaxError: On malformed tokens or grammar violations
        UnexpectedEofError: If the input ends inside a string or variable
    """
    config = Parser(source).parse()
    logger.debug(
        f"Parsed {len(config)} top-level directives "
        f"({config.count_directives()} total)"
    )
    return config


def read_source(path: str | Path) -> str:
    """
    Read a configuration file as UTF-8 text.

    Raises:
        ConfigIOError: If the file cannot be read or decoded
    """
    path = Path(path)
    logger.debug(f"Reading configuration from {path}")

    try:
        return path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigIOError(f"Failed to read {path}: {e.strerror or e}", str(path)) from e
    except UnicodeDecodeError as e:
        raise ConfigIOError(f"Failed to decode {path} as UTF-8: {e.reason}", str(path)) from e


def parse_file(path: str | Path) -> Config:
    """
    Parse an NGINX configuration file.

    Include directives are kept as plain directives, not resolved.

    Args:
        path: Path to the configuration file

    Returns:
        Parsed Config

    Raises:
        ConfigIOError: If the file cannot be read as UTF-8 text
    """
    return parse(read_source(path))
