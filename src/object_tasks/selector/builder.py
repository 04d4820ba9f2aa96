"""Facade for building CSS selectors.

Each function starts a fresh :class:`SelectorExpression`::

    from object_tasks.selector import builder

    builder.element("a").attr('href$=".png"').pseudo_class("focus").stringify()
    # => 'a[href$=".png"]:focus'
"""

from __future__ import annotations

from object_tasks.selector.expression import SelectorExpression

__all__ = [
    "element",
    "id",
    "class_",
    "attr",
    "pseudo_class",
    "pseudo_element",
    "combine",
]


def element(value: str) -> SelectorExpression:
    return SelectorExpression().element(value)


def id(value: str) -> SelectorExpression:  # noqa: A001
    return SelectorExpression().id(value)


def class_(value: str) -> SelectorExpression:
    return SelectorExpression().class_(value)


def attr(value: str) -> SelectorExpression:
    return SelectorExpression().attr(value)


def pseudo_class(value: str) -> SelectorExpression:
    return SelectorExpression().pseudo_class(value)


def pseudo_element(value: str) -> SelectorExpression:
    return SelectorExpression().pseudo_element(value)


def combine(
    left: SelectorExpression, combinator: str, right: SelectorExpression
) -> SelectorExpression:
    """Join two selectors with *combinator*, e.g. ``combine(a, "+", b)``."""
    return SelectorExpression().combine(left, combinator, right)
