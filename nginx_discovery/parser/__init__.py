"""
Lexer and parser for NGINX configuration syntax.
"""

from .lexer import Lexer, tokenize
from .parser import Parser, parse, parse_file, read_source
from .tokens import Token, TokenKind

__all__ = [
    "Lexer",
    "Parser",
    "Token",
    "TokenKind",
    "parse",
    "parse_file",
    "read_source",
    "tokenize",
]
