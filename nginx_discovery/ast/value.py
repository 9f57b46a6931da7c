"""
Value types for directive arguments.
"""

from dataclasses import dataclass
from enum import Enum


class ValueKind(Enum):
    """How an argument was written in the source."""

    LITERAL = "literal"              # nginx
    SINGLE_QUOTED = "single_quoted"  # 'hello world'
    DOUBLE_QUOTED = "double_quoted"  # "hello world"
    VARIABLE = "variable"            # $remote_addr


@dataclass(frozen=True)
class Value:
    """
    A single directive argument.

    The text never includes the surrounding quotes or the leading '$';
    use to_config_string() to get the surface form back.

    Examples:
        nginx            -> Value(LITERAL, "nginx")
        'hello world'    -> Value(SINGLE_QUOTED, "hello world")
        $remote_addr     -> Value(VARIABLE, "remote_addr")
    """

    kind: ValueKind
    text: str

    @classmethod
    def literal(cls, text: str) -> "Value":
        return cls(ValueKind.LITERAL, text)

    @classmethod
    def single_quoted(cls, text: str) -> "Value":
        return cls(ValueKind.SINGLE_QUOTED, text)

    @classmethod
    def double_quoted(cls, text: str) -> "Value":
        return cls(ValueKind.DOUBLE_QUOTED, text)

    @classmethod
    def variable(cls, name: str) -> "Value":
        return cls(ValueKind.VARIABLE, name)

    @classmethod
    def coerce(cls, value: "Value | str") -> "Value":
        """Return value unchanged, or wrap a plain string as a literal."""
        if isinstance(value, Value):
            return value
        return cls.literal(str(value))

    def as_str(self) -> str:
        """Get the inner text regardless of kind."""
        return self.text

    @property
    def is_variable(self) -> bool:
        return self.kind is ValueKind.VARIABLE

    @property
    def is_quoted(self) -> bool:
        return self.kind in (ValueKind.SINGLE_QUOTED, ValueKind.DOUBLE_QUOTED)

    def to_config_string(self) -> str:
        """Render the value as it would appear in a config file."""
        if self.kind is ValueKind.SINGLE_QUOTED:
            return f"'{self.text}'"
        if self.kind is ValueKind.DOUBLE_QUOTED:
            return f'"{self.text}"'
        if self.kind is ValueKind.VARIABLE:
            return f"${self.text}"
        return self.text

    def __str__(self) -> str:
        return self.text

    def __repr__(self) -> str:
        return f"Value({self.kind.name}, {self.text!r})"
