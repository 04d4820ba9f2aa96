"""Error hierarchy for the CSS selector builder."""

from __future__ import annotations

from object_tasks.selector.model import Category


class SelectorError(Exception):
    """Base error for all selector construction errors."""

    default_message = "Invalid selector"

    def __init__(
        self,
        message: str | None = None,
        *,
        category: Category | None = None,
        previous: int | None = None,
    ) -> None:
        super().__init__(message or self.default_message)
        self.category = category
        self.previous = previous


class OrderViolation(SelectorError):
    """A part arrived after a part of a later category."""

    default_message = (
        "Selector parts should be arranged in the following order: "
        "element, id, class, attribute, pseudo-class, pseudo-element"
    )


class DuplicateViolation(SelectorError):
    """An element, id or pseudo-element was added a second time."""

    default_message = (
        "Element, id and pseudo-element should not occur more then one time "
        "inside the selector"
    )


class DuplicateOrderViolation(DuplicateViolation, OrderViolation):
    """A repeated unique part that is also out of order."""
