"""
Directive nodes of the configuration tree.
"""

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass, field
from enum import Enum

from .span import Span
from .value import Value


class DirectiveKind(Enum):
    """Shape of a directive."""

    SIMPLE = "simple"  # name args;
    BLOCK = "block"    # name args { ... }


@dataclass
class Directive:
    """
    A directive in the configuration.

    A directive whose children is None is a simple directive; a list
    (possibly empty) makes it a block. Each block owns its children.

    Examples:
        user nginx;           -> Directive("user", [Literal nginx])
        events { }            -> Directive("events", [], children=[])
        location / { ... }    -> Directive("location", [Literal /], children=[...])

    The span is location metadata and does not take part in equality.
    """

    name: str
    args: list[Value] = field(default_factory=list)
    children: list["Directive"] | None = None
    span: Span = field(default_factory=Span, compare=False)

    def __repr__(self) -> str:
        if self.children is None:
            return f"Directive({self.name}, {self.args})"
        return f"Directive({self.name}, {self.args}, children={len(self.children)})"

    @classmethod
    def simple(
        cls,
        name: str,
        args: Iterable[Value | str] = (),
        span: Span | None = None,
    ) -> "Directive":
        """Create a simple directive; plain string args become literals."""
        return cls(
            name=name,
            args=[Value.coerce(a) for a in args],
            span=span if span is not None else Span(),
        )

    @classmethod
    def block(
        cls,
        name: str,
        args: Iterable[Value | str] = (),
        children: Iterable["Directive"] = (),
        span: Span | None = None,
    ) -> "Directive":
        """Create a block directive; plain string args become literals."""
        return cls(
            name=name,
            args=[Value.coerce(a) for a in args],
            children=list(children),
            span=span if span is not None else Span(),
        )

    @property
    def kind(self) -> DirectiveKind:
        return DirectiveKind.SIMPLE if self.children is None else DirectiveKind.BLOCK

    @property
    def is_block(self) -> bool:
        return self.children is not None

    @property
    def is_simple(self) -> bool:
        return self.children is None

    def first_arg(self) -> str | None:
        """Get the first argument's text, or None."""
        return self.args[0].as_str() if self.args else None

    def args_as_strings(self) -> list[str]:
        return [a.as_str() for a in self.args]

    def find_children(self, name: str) -> list["Directive"]:
        """Get direct children with the given name, in source order."""
        if self.children is None:
            return []
        return [c for c in self.children if c.name == name]

    def walk(self) -> Iterator["Directive"]:
        """Yield this directive and every nested directive, pre-order."""
        yield self
        for child in self.children or ():
            yield from child.walk()

    def find_recursive(self, name: str) -> list["Directive"]:
        """
        Find all directives with the given name at any depth.

        The search includes this directive itself.
        """
        return [d for d in self.walk() if d.name == name]

    def retain(self, predicate: Callable[["Directive"], bool]) -> None:
        """Drop direct children for which predicate returns False."""
        if self.children is not None:
            self.children[:] = [c for c in self.children if predicate(c)]
