"""SelectorExpression: a chainable builder for CSS complex selectors."""

from __future__ import annotations

import logging

from object_tasks.selector.errors import (
    DuplicateOrderViolation,
    DuplicateViolation,
    OrderViolation,
    SelectorError,
)
from object_tasks.selector.model import Category, Combination, Fragment, Part, render_parts

logger = logging.getLogger(__name__)


class SelectorExpression:
    """Accumulates selector parts and renders them with :meth:`stringify`.

    Parts must be added in the order element, id, class, attribute,
    pseudo-class, pseudo-element. Element, id and pseudo-element may occur at
    most once; the others may repeat. Every adder returns the same instance::

        SelectorExpression().id("main").class_("container").stringify()
        # => '#main.container'

    Invalid input is rejected, never reordered. An instance that raised
    should be discarded.
    """

    def __init__(self) -> None:
        self._parts: list[Part] = []
        self._last_rank = 0
        self._used: set[Category] = set()

    # --- simple selectors -----------------------------------------------------

    def element(self, value: str) -> SelectorExpression:
        return self._append(Category.ELEMENT, value)

    def id(self, value: str) -> SelectorExpression:
        return self._append(Category.ID, value)

    def class_(self, value: str) -> SelectorExpression:
        return self._append(Category.CLASS, value)

    def attr(self, value: str) -> SelectorExpression:
        return self._append(Category.ATTRIBUTE, value)

    def pseudo_class(self, value: str) -> SelectorExpression:
        return self._append(Category.PSEUDO_CLASS, value)

    def pseudo_element(self, value: str) -> SelectorExpression:
        return self._append(Category.PSEUDO_ELEMENT, value)

    # --- composition ----------------------------------------------------------

    def combine(
        self,
        left: SelectorExpression,
        combinator: str,
        right: SelectorExpression,
    ) -> SelectorExpression:
        """Append ``"<left> <combinator> <right>"`` to this selector.

        *left* and *right* are captured as they are now; changing them
        afterwards does not affect this selector.
        """
        combination = Combination(
            left=left.stringify(), combinator=combinator, right=right.stringify()
        )
        logger.debug("Combining selectors with %r", combinator)
        self._parts.append(combination)
        return self

    # --- rendering ------------------------------------------------------------

    def stringify(self) -> str:
        return render_parts(self._parts)

    @property
    def parts(self) -> tuple[Part, ...]:
        """Snapshot of the parts added so far."""
        return tuple(self._parts)

    @property
    def last_rank(self) -> int:
        """Rank of the most recent simple selector, 0 if none was added."""
        return self._last_rank

    @property
    def has_element(self) -> bool:
        return Category.ELEMENT in self._used

    @property
    def has_id(self) -> bool:
        return Category.ID in self._used

    @property
    def has_pseudo_element(self) -> bool:
        return Category.PSEUDO_ELEMENT in self._used

    def __str__(self) -> str:
        return self.stringify()

    def __repr__(self) -> str:
        return f"SelectorExpression({self.stringify()!r})"

    # --- internals ------------------------------------------------------------

    def _append(self, category: Category, value: str) -> SelectorExpression:
        self._check(category)
        if category.unique:
            self._used.add(category)
        self._parts.append(Fragment(category=category, value=value))
        self._last_rank = category.rank
        logger.debug("Appended %s %r", category, value)
        return self

    def _check(self, category: Category) -> None:
        """Raise if *category* cannot follow the parts added so far."""
        out_of_order = category.rank < self._last_rank
        duplicate = category.unique and category in self._used
        if not (out_of_order or duplicate):
            return

        if out_of_order and duplicate:
            error_cls: type[SelectorError] = DuplicateOrderViolation
        elif duplicate:
            error_cls = DuplicateViolation
        else:
            error_cls = OrderViolation
        logger.debug(
            "Rejected %s after rank %d: %s", category, self._last_rank, error_cls.__name__
        )
        raise error_cls(category=category, previous=self._last_rank)
