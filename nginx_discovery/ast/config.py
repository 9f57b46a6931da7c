"""
Root node of a parsed configuration.
"""

from collections.abc import Callable, Iterator
from dataclasses import dataclass, field

from .directive import Directive


@dataclass
class Config:
    """
    Root document holding the top-level directives in source order.
    """

    directives: list[Directive] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.directives)

    def __iter__(self) -> Iterator[Directive]:
        return iter(self.directives)

    @property
    def is_empty(self) -> bool:
        return not self.directives

    def add_directive(self, directive: Directive) -> None:
        self.directives.append(directive)

    def find_directives(self, name: str) -> list[Directive]:
        """Get top-level directives with the given name."""
        return [d for d in self.directives if d.name == name]

    def walk(self) -> Iterator[Directive]:
        """Yield every directive in the tree, pre-order."""
        for directive in self.directives:
            yield from directive.walk()

    def find_directives_recursive(self, name: str) -> list[Directive]:
        """
        Find all directives with the given name anywhere in the tree.

        Results are in pre-order: a block comes before its children.
        """
        return [d for d in self.walk() if d.name == name]

    def count_directives(self) -> int:
        """Count all directives, nested ones included."""
        return sum(1 for _ in self.walk())

    def retain(self, predicate: Callable[[Directive], bool]) -> None:
        """Drop top-level directives for which predicate returns False."""
        self.directives[:] = [d for d in self.directives if predicate(d)]
