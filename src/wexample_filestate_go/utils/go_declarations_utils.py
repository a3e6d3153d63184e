from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

from wexample_filestate_go.exceptions import UnsupportedGoDeclarationError
from wexample_filestate_go.utils.go_parser_utils import (
    go_package_header_end,
    go_receiver_parameters,
    go_top_level_nodes,
    parse_go_source,
)

if TYPE_CHECKING:
    from tree_sitter import Node

logger = logging.getLogger(__name__)


class GoDeclarationCategory(str, Enum):
    IMPORT = "import"
    CONST = "const"
    VAR = "var"
    TYPE = "type"
    FUNC = "func"
    METHOD = "method"


_CATEGORY_BY_NODE_TYPE: dict[str, GoDeclarationCategory] = {
    "import_declaration": GoDeclarationCategory.IMPORT,
    "const_declaration": GoDeclarationCategory.CONST,
    "var_declaration": GoDeclarationCategory.VAR,
    "type_declaration": GoDeclarationCategory.TYPE,
    "function_declaration": GoDeclarationCategory.FUNC,
    "method_declaration": GoDeclarationCategory.METHOD,
}


@dataclass(frozen=True)
class GoDeclaration:
    """A top-level declaration together with the comment blocks attached to it.

    `start`/`end` delimit the span in the original buffer, attached comments
    included; `text` is the bytes of that span, without its line break.
    """

    category: GoDeclarationCategory
    original_index: int
    start: int
    end: int
    text: bytes
    name: str = ""
    receiver_type: str | None = None

    def __post_init__(self) -> None:
        is_method = self.category is GoDeclarationCategory.METHOD
        if is_method != (self.receiver_type is not None):
            raise UnsupportedGoDeclarationError(
                f"{self.category.value} declaration {self.name!r} "
                f"with receiver type {self.receiver_type!r}"
            )

    @property
    def is_method(self) -> bool:
        return self.category is GoDeclarationCategory.METHOD


def collect_go_declarations(root: Node, src: bytes) -> list[GoDeclaration]:
    """Partition a parsed file into declarations, attaching comments to the next one.

    Every comment block between the end of the previous declaration (or the
    package header for the first one) and a declaration is carried by that
    declaration. Comments before the header bound or after the last
    declaration are left out of every span.
    """
    comments, nodes = go_top_level_nodes(root)
    left_bound = go_package_header_end(root, src)

    declarations: list[GoDeclaration] = []
    j = 0
    for index, node in enumerate(nodes):
        # Skip comments that belong to the header or sit inside the previous span.
        while j < len(comments) and comments[j].start_byte < left_bound:
            j += 1

        start = node.start_byte
        if j < len(comments) and comments[j].start_byte < node.start_byte:
            start = comments[j].start_byte

        end = node.end_byte

        category = _CATEGORY_BY_NODE_TYPE.get(node.type)
        if category is None:
            raise UnsupportedGoDeclarationError(
                f"unsupported declaration node: {node.type}"
            )

        declarations.append(
            GoDeclaration(
                category=category,
                original_index=index,
                start=start,
                end=end,
                text=src[start:end],
                name=_declaration_name(node, category),
                receiver_type=(
                    _receiver_type_name(node)
                    if category is GoDeclarationCategory.METHOD
                    else None
                ),
            )
        )
        left_bound = end

    logger.debug("Collected %d Go declarations", len(declarations))
    return declarations


def extract_go_declarations(filename: str, src: bytes) -> list[GoDeclaration]:
    return collect_go_declarations(parse_go_source(filename, src), src)


def unwrap_receiver_type(node: Node) -> str | None:
    """Strip pointer and generic-instantiation wrappers down to the base type name.

    Returns None for any other type expression shape.
    """
    if node.type == "type_identifier":
        return node.text.decode("utf-8")
    if node.type == "pointer_type":
        inner = node.named_children
        return unwrap_receiver_type(inner[0]) if inner else None
    if node.type == "generic_type":
        base = node.child_by_field_name("type")
        return unwrap_receiver_type(base) if base is not None else None
    return None


def _declaration_name(node: Node, category: GoDeclarationCategory) -> str:
    if category in (GoDeclarationCategory.FUNC, GoDeclarationCategory.METHOD):
        name = node.child_by_field_name("name")
        return name.text.decode("utf-8") if name is not None else ""

    if category is GoDeclarationCategory.TYPE:
        # A grouped `type (...)` block sorts by its first spec.
        for spec in node.named_children:
            if spec.type in ("type_spec", "type_alias"):
                name = spec.child_by_field_name("name")
                return name.text.decode("utf-8") if name is not None else ""

    return ""


def _receiver_type_name(node: Node) -> str:
    parameters = go_receiver_parameters(node)
    if not parameters:
        raise UnsupportedGoDeclarationError("method declaration without receiver")

    type_node = parameters[0].child_by_field_name("type")
    name = unwrap_receiver_type(type_node) if type_node is not None else None
    if name is None:
        shape = type_node.type if type_node is not None else "<none>"
        raise UnsupportedGoDeclarationError(f"unsupported receiver type: {shape}")
    return name
