from __future__ import annotations

from typing import TYPE_CHECKING, NoReturn

import tree_sitter_go
from tree_sitter import Language, Parser

from wexample_filestate_go.exceptions import GoSyntaxError

if TYPE_CHECKING:
    from tree_sitter import Node

GO_LANGUAGE = Language(tree_sitter_go.language())

GO_COMMENT_NODE = "comment"
GO_PACKAGE_CLAUSE_NODE = "package_clause"
GO_DECLARATION_NODES: frozenset[str] = frozenset(
    {
        "import_declaration",
        "const_declaration",
        "var_declaration",
        "type_declaration",
        "function_declaration",
        "method_declaration",
    }
)


def go_package_header_end(root: Node, src: bytes) -> int:
    """Byte offset of the first newline after the `package` keyword.

    Falls back to the start of the file when there is no package clause or
    nothing follows it on another line.
    """
    for node in root.named_children:
        if node.type == GO_PACKAGE_CLAUSE_NODE:
            newline = src.find(b"\n", node.start_byte)
            return 0 if newline == -1 else newline
    return 0


def go_receiver_parameters(node: Node) -> list[Node]:
    receiver = node.child_by_field_name("receiver")
    if receiver is None:
        return []
    return [
        child
        for child in receiver.named_children
        if child.type == "parameter_declaration"
    ]


def go_top_level_nodes(root: Node) -> tuple[list[Node], list[Node]]:
    """Split top-level nodes into (comments, declarations), in source order."""
    comments: list[Node] = []
    declarations: list[Node] = []
    for node in root.named_children:
        if node.type == GO_COMMENT_NODE:
            comments.append(node)
        elif node.type in GO_DECLARATION_NODES:
            declarations.append(node)
    return comments, declarations


def parse_go_source(filename: str, src: bytes) -> Node:
    """Parse Go source and return the root node of a validated tree.

    Raises GoSyntaxError with the position of the first problem when the
    source is not a syntactically valid Go file.
    """
    # Parsers hold mutable state; one per call keeps parsing re-entrant.
    tree = Parser(GO_LANGUAGE).parse(src)
    root = tree.root_node

    if root.has_error:
        node = _first_error_node(root)
        if node is not None and node.is_missing:
            _raise_at(node, filename, f"expected '{node.type}'")
        _raise_at(node or root, filename, "syntax error")

    package_seen = False
    declaration_seen = False
    for node in root.named_children:
        if node.type == GO_COMMENT_NODE:
            continue
        if node.type == GO_PACKAGE_CLAUSE_NODE:
            if package_seen:
                _raise_at(node, filename, "expected declaration, found 'package'")
            package_seen = True
            continue
        if not package_seen:
            _raise_at(node, filename, "expected 'package'")
        if node.type not in GO_DECLARATION_NODES:
            _raise_at(
                node, filename, "non-declaration statement outside function body"
            )
        if node.type == "import_declaration":
            if declaration_seen:
                _raise_at(
                    node, filename, "imports must appear before other declarations"
                )
            continue
        declaration_seen = True
        if node.type == "method_declaration" and not go_receiver_parameters(node):
            _raise_at(node, filename, "method has no receiver")

    if not package_seen:
        _raise_at(root, filename, "expected 'package', found 'EOF'")

    return root


def _first_error_node(node: Node) -> Node | None:
    if node.type == "ERROR" or node.is_missing:
        return node
    for child in node.children:
        if child.has_error or child.is_missing:
            found = _first_error_node(child)
            if found is not None:
                return found
    return None


def _raise_at(node: Node, filename: str, message: str) -> NoReturn:
    row, column = node.start_point
    raise GoSyntaxError(message, filename=filename, lineno=row + 1, offset=column + 1)
