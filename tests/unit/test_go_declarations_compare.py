"""Unit tests for the declaration ordering rules."""

from __future__ import annotations

import pytest

from wexample_filestate_go.exceptions import UnsupportedGoDeclarationError
from wexample_filestate_go.utils.go_declarations_compare_utils import (
    compare_go_declarations,
    compare_method_to_declaration,
    sort_go_declarations,
)
from wexample_filestate_go.utils.go_declarations_utils import (
    GoDeclaration,
    GoDeclarationCategory,
)

IMPORT = GoDeclarationCategory.IMPORT
CONST = GoDeclarationCategory.CONST
VAR = GoDeclarationCategory.VAR
TYPE = GoDeclarationCategory.TYPE
FUNC = GoDeclarationCategory.FUNC
METHOD = GoDeclarationCategory.METHOD


def make(
    category: GoDeclarationCategory,
    name: str = "",
    receiver_type: str | None = None,
    index: int = 0,
) -> GoDeclaration:
    return GoDeclaration(
        category=category,
        original_index=index,
        start=0,
        end=0,
        text=b"",
        name=name,
        receiver_type=receiver_type,
    )


def labels(declarations: list[GoDeclaration]) -> list[str]:
    return [
        f"{d.receiver_type}.{d.name}" if d.is_method else f"{d.category.value}:{d.name}"
        for d in declarations
    ]


class TestGoDeclarationInvariants:
    def test_method_requires_receiver(self) -> None:
        with pytest.raises(UnsupportedGoDeclarationError):
            make(METHOD, "Area")

    @pytest.mark.parametrize("category", [IMPORT, CONST, VAR, TYPE, FUNC])
    def test_non_method_rejects_receiver(self, category: GoDeclarationCategory) -> None:
        with pytest.raises(UnsupportedGoDeclarationError):
            make(category, "x", receiver_type="Foo")


class TestCategoryPrecedence:
    def test_fixed_category_order(self) -> None:
        declarations = [
            make(FUNC, "a", index=0),
            make(TYPE, "A", index=1),
            make(VAR, index=2),
            make(CONST, index=3),
            make(IMPORT, index=4),
        ]
        assert [d.category for d in sort_go_declarations(declarations)] == [
            IMPORT,
            CONST,
            VAR,
            TYPE,
            FUNC,
        ]

    def test_category_beats_name(self) -> None:
        assert compare_go_declarations(make(TYPE, "Zzz"), make(FUNC, "aaa")) == -1
        assert compare_go_declarations(make(FUNC, "aaa"), make(TYPE, "Zzz")) == 1

    @pytest.mark.parametrize("category", [IMPORT, CONST, VAR])
    def test_stable_categories_keep_source_order(
        self, category: GoDeclarationCategory
    ) -> None:
        first = make(category, index=3)
        second = make(category, index=7)
        assert compare_go_declarations(first, second) == -1
        assert compare_go_declarations(second, first) == 1

    def test_types_sorted_by_name(self) -> None:
        declarations = [
            make(TYPE, "item10", index=0),
            make(TYPE, "item2", index=1),
            make(TYPE, "item9", index=2),
        ]
        assert [d.name for d in sort_go_declarations(declarations)] == [
            "item2",
            "item9",
            "item10",
        ]

    def test_functions_main_first(self) -> None:
        declarations = [
            make(FUNC, "zeta", index=0),
            make(FUNC, "main", index=1),
            make(FUNC, "alpha", index=2),
        ]
        assert [d.name for d in sort_go_declarations(declarations)] == [
            "main",
            "alpha",
            "zeta",
        ]


class TestCompareMethodToDeclaration:
    @pytest.mark.parametrize("category", [IMPORT, CONST, VAR])
    def test_after_values_and_imports(self, category: GoDeclarationCategory) -> None:
        method = make(METHOD, "Area", "Circle")
        assert compare_method_to_declaration(method, make(category)) == 1
        assert compare_go_declarations(make(category), method) == -1

    def test_right_after_own_type(self) -> None:
        method = make(METHOD, "Area", "Circle")
        circle = make(TYPE, "Circle")
        assert compare_go_declarations(method, circle) == 1
        assert compare_go_declarations(circle, method) == -1

    def test_placed_as_receiver_name_among_other_types(self) -> None:
        method = make(METHOD, "Area", "Circle")
        assert compare_go_declarations(method, make(TYPE, "Box")) == 1
        assert compare_go_declarations(method, make(TYPE, "Square")) == -1

    def test_methods_group_by_receiver_then_name(self) -> None:
        assert (
            compare_go_declarations(
                make(METHOD, "Zeta", "Box"), make(METHOD, "Alpha", "Circle")
            )
            == -1
        )
        assert (
            compare_go_declarations(
                make(METHOD, "Zeta", "Box"), make(METHOD, "Alpha", "Box")
            )
            == 1
        )

    def test_before_every_function(self) -> None:
        method = make(METHOD, "Zeta", "Zzz")
        assert compare_go_declarations(method, make(FUNC, "main")) == -1
        assert compare_go_declarations(make(FUNC, "aaa"), method) == 1


class TestSortGoDeclarations:
    def test_methods_cluster_after_their_type(self) -> None:
        declarations = [
            make(TYPE, "Foo", index=0),
            make(METHOD, "Zeta", "Foo", index=1),
            make(METHOD, "Alpha", "Foo", index=2),
            make(TYPE, "Bar", index=3),
        ]
        assert labels(sort_go_declarations(declarations)) == [
            "type:Bar",
            "type:Foo",
            "Foo.Alpha",
            "Foo.Zeta",
        ]

    def test_methods_cluster_before_next_type(self) -> None:
        declarations = [
            make(TYPE, "Goo", index=0),
            make(METHOD, "Zeta", "Foo", index=1),
            make(TYPE, "Foo", index=2),
            make(METHOD, "Alpha", "Foo", index=3),
        ]
        assert labels(sort_go_declarations(declarations)) == [
            "type:Foo",
            "Foo.Alpha",
            "Foo.Zeta",
            "type:Goo",
        ]

    def test_methods_without_local_type_take_the_type_slot(self) -> None:
        declarations = [
            make(FUNC, "helper", index=0),
            make(TYPE, "Zed", index=1),
            make(METHOD, "Run", "Remote", index=2),
            make(TYPE, "Alpha", index=3),
        ]
        assert labels(sort_go_declarations(declarations)) == [
            "type:Alpha",
            "Remote.Run",
            "type:Zed",
            "func:helper",
        ]

    def test_sort_is_stable_for_equal_names(self) -> None:
        first = make(METHOD, "Run", "Job", index=0)
        second = make(METHOD, "Run", "Job", index=1)
        assert sort_go_declarations([first, second]) == [first, second]
        assert sort_go_declarations([second, first]) == [second, first]
