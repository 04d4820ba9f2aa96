"""Plain geometric data objects."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Rectangle:
    """A rectangle with *width* and *height*.

    Only the two dimensions are data; ``area`` is derived, so
    ``get_json(Rectangle(10, 20))`` gives ``'{"width":10,"height":20}'``.
    """

    width: float
    height: float

    @property
    def area(self) -> float:
        return self.width * self.height
