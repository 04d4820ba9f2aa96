from __future__ import annotations

import pytest

from object_tasks.selector.model import Category, Combination, Fragment, render_parts


class TestCategory:
    def test_ranks_follow_declaration_order(self) -> None:
        assert [c.rank for c in Category] == [1, 2, 3, 4, 5, 6]

    def test_unique_categories(self) -> None:
        assert {c for c in Category if c.unique} == {
            Category.ELEMENT,
            Category.ID,
            Category.PSEUDO_ELEMENT,
        }

    def test_is_str(self) -> None:
        assert Category.PSEUDO_CLASS == "pseudo-class"

    @pytest.mark.parametrize(
        "category, expected",
        [
            (Category.ELEMENT, "v"),
            (Category.ID, "#v"),
            (Category.CLASS, ".v"),
            (Category.ATTRIBUTE, "[v]"),
            (Category.PSEUDO_CLASS, ":v"),
            (Category.PSEUDO_ELEMENT, "::v"),
        ],
    )
    def test_render(self, category: Category, expected: str) -> None:
        assert category.render("v") == expected


class TestNodes:
    def test_fragment_is_frozen(self) -> None:
        frag = Fragment(category=Category.ID, value="x")
        with pytest.raises(AttributeError):
            frag.value = "y"  # type: ignore[misc]

    def test_combination_render(self) -> None:
        combo = Combination(left="a.b", combinator=">", right="c")
        assert combo.render() == "a.b > c"

    def test_render_parts_empty(self) -> None:
        assert render_parts(()) == ""
