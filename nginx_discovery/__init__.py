"""
Discover and introspect NGINX configurations.

Turns configuration text into a tree of directives with source locations:

    from nginx_discovery import parse

    config = parse("http { access_log /var/log/nginx/access.log; }")
    for log in config.find_directives_recursive("access_log"):
        print(log.first_arg(), log.span)
"""

from .ast import Config, Directive, DirectiveKind, Span, Value, ValueKind
from .const import APP_VERSION
from .errors import (
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
from .parser import Lexer, Parser, Token, TokenKind, parse, parse_file, tokenize

__version__ = APP_VERSION

__all__ = [
    "__version__",
    "Config",
    "Directive",
    "DirectiveKind",
    "Span",
    "Value",
    "ValueKind",
    "Lexer",
    "Parser",
    "Token",
    "TokenKind",
    "parse",
    "parse_file",
    "tokenize",
    "NginxDiscoveryError",
    "ParseError",
    "NginxSyntaxError",
    "UnexpectedEofError",
    "InvalidDirectiveError",
    "InvalidArgumentError",
    "ConfigIOError",
    "CustomError",
    "ErrorBuilder",
    "extract_snippet",
    "get_line",
]
