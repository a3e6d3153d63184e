from __future__ import annotations

from functools import cmp_to_key
from typing import TYPE_CHECKING

from wexample_filestate_go.exceptions import UnsupportedGoDeclarationError
from wexample_filestate_go.utils.go_declarations_utils import GoDeclarationCategory

if TYPE_CHECKING:
    from wexample_filestate_go.utils.go_declarations_utils import GoDeclaration

MAIN_FUNCTION_NAME = "main"

# Methods have no slot of their own: they are placed relative to types.
CATEGORY_ORDER: dict[GoDeclarationCategory, int] = {
    GoDeclarationCategory.IMPORT: 0,
    GoDeclarationCategory.CONST: 1,
    GoDeclarationCategory.VAR: 2,
    GoDeclarationCategory.TYPE: 3,
    GoDeclarationCategory.FUNC: 4,
}

_STABLE_CATEGORIES = (
    GoDeclarationCategory.IMPORT,
    GoDeclarationCategory.CONST,
    GoDeclarationCategory.VAR,
)


def compare_function_names(a: str, b: str) -> int:
    """Numeric-aware comparison where `main` always comes first."""
    if a == b:
        return 0
    if a == MAIN_FUNCTION_NAME:
        return -1
    if b == MAIN_FUNCTION_NAME:
        return 1
    return compare_strings_with_whole_numbers(a, b)


def compare_go_declarations(a: GoDeclaration, b: GoDeclaration) -> int:
    """Total order: imports, consts, vars, types (each with its methods), funcs."""
    if a.is_method:
        return compare_method_to_declaration(a, b)
    if b.is_method:
        return -compare_method_to_declaration(b, a)
    if a.category is not b.category:
        return _compare(CATEGORY_ORDER[a.category], CATEGORY_ORDER[b.category])

    if a.category in _STABLE_CATEGORIES:
        return _compare(a.original_index, b.original_index)
    if a.category is GoDeclarationCategory.TYPE:
        return compare_strings_with_whole_numbers(a.name, b.name)
    if a.category is GoDeclarationCategory.FUNC:
        return compare_function_names(a.name, b.name)
    raise UnsupportedGoDeclarationError(f"unsupported category: {a.category}")


def compare_method_to_declaration(method: GoDeclaration, other: GoDeclaration) -> int:
    """Place a method right after its receiver type, and before every function.

    Methods of the same receiver are sorted by name. A method whose type is
    not the other side sorts as if it were a type named after its receiver.
    """
    receiver = method.receiver_type or ""

    if other.category in _STABLE_CATEGORIES:
        return 1
    if other.category is GoDeclarationCategory.TYPE:
        if other.name == receiver:
            return 1
        return compare_strings_with_whole_numbers(receiver, other.name)
    if other.category is GoDeclarationCategory.METHOD:
        c = compare_strings_with_whole_numbers(receiver, other.receiver_type or "")
        if c != 0:
            return c
        return compare_strings_with_whole_numbers(method.name, other.name)
    if other.category is GoDeclarationCategory.FUNC:
        return -1
    raise UnsupportedGoDeclarationError(f"unsupported category: {other.category}")


def compare_strings_with_whole_numbers(a: str, b: str) -> int:
    """Compare strings treating runs of digits as whole numbers.

    "item2" < "item10" because 2 < 10. Leading zeros are ignored, so
    "item02" and "item2" compare equal.
    """
    i, j = 0, 0
    while i < len(a) and j < len(b):
        if _is_digit(a[i]) and _is_digit(b[j]):
            a_number, i = _parse_number(a, i)
            b_number, j = _parse_number(b, j)
            if a_number != b_number:
                if len(a_number) != len(b_number):
                    return _compare(len(a_number), len(b_number))
                return _compare(a_number, b_number)
            continue

        if a[i] != b[j]:
            return _compare(a[i], b[j])
        i += 1
        j += 1

    if i < len(a):
        return 1
    if j < len(b):
        return -1
    return 0


go_declaration_sort_key = cmp_to_key(compare_go_declarations)


def sort_go_declarations(declarations: list[GoDeclaration]) -> list[GoDeclaration]:
    return sorted(declarations, key=go_declaration_sort_key)


def _compare(a, b) -> int:
    return (a > b) - (a < b)


def _is_digit(char: str) -> bool:
    return "0" <= char <= "9"


def _parse_number(s: str, i: int) -> tuple[str, int]:
    """Return the digit run at `i` without leading zeros, and the index after it."""
    j = i + 1
    while j < len(s) and _is_digit(s[j]):
        j += 1
    return s[i:j].lstrip("0"), j
