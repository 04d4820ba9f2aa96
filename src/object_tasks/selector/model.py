"""Selector model: Category, Fragment and Combination nodes."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Iterable, Union


class Category(StrEnum):
    """Kinds of simple selector, declared in their required order."""

    ELEMENT = "element"
    ID = "id"
    CLASS = "class"
    ATTRIBUTE = "attribute"
    PSEUDO_CLASS = "pseudo-class"
    PSEUDO_ELEMENT = "pseudo-element"

    @property
    def rank(self) -> int:
        """Position in the required order, starting at 1 for ELEMENT."""
        return _RANKS[self]

    @property
    def unique(self) -> bool:
        """True if the category may occur at most once per selector."""
        return self in _UNIQUE

    def render(self, value: str) -> str:
        """Render *value* with this category's marker."""
        return _FORMATS[self].format(value=value)


_RANKS: dict[Category, int] = {category: i for i, category in enumerate(Category, start=1)}

_UNIQUE = frozenset({Category.ELEMENT, Category.ID, Category.PSEUDO_ELEMENT})

_FORMATS: dict[Category, str] = {
    Category.ELEMENT: "{value}",
    Category.ID: "#{value}",
    Category.CLASS: ".{value}",
    Category.ATTRIBUTE: "[{value}]",
    Category.PSEUDO_CLASS: ":{value}",
    Category.PSEUDO_ELEMENT: "::{value}",
}


@dataclass(frozen=True)
class Fragment:
    """A single simple selector, e.g. ``#main`` or ``[href]``."""

    category: Category
    value: str

    def render(self) -> str:
        return self.category.render(self.value)


@dataclass(frozen=True)
class Combination:
    """Two rendered selectors joined by a combinator (``' '``, ``>``, ``+``, ``~``).

    The combinator is always padded with one space on each side, so the
    descendant combinator renders as three spaces.
    """

    left: str
    combinator: str
    right: str

    def render(self) -> str:
        return f"{self.left} {self.combinator} {self.right}"


Part = Union[Fragment, Combination]


def render_parts(parts: Iterable[Part]) -> str:
    """Concatenate the rendered form of *parts* with no separators."""
    return "".join(part.render() for part in parts)
