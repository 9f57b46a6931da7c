"""
Abstract syntax tree for NGINX configurations.
"""

from .config import Config
from .directive import Directive, DirectiveKind
from .span import Span
from .value import Value, ValueKind

__all__ = [
    "Config",
    "Directive",
    "DirectiveKind",
    "Span",
    "Value",
    "ValueKind",
]
