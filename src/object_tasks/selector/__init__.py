from object_tasks.selector import builder
from object_tasks.selector.errors import (
    DuplicateOrderViolation,
    DuplicateViolation,
    OrderViolation,
    SelectorError,
)
from object_tasks.selector.expression import SelectorExpression
from object_tasks.selector.model import Category, Combination, Fragment

__all__ = [
    "builder",
    "SelectorExpression",
    "Category",
    "Fragment",
    "Combination",
    "SelectorError",
    "OrderViolation",
    "DuplicateViolation",
    "DuplicateOrderViolation",
]
