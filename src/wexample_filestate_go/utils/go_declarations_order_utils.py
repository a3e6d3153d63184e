from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from wexample_filestate_go.utils.go_declarations_compare_utils import (
    sort_go_declarations,
)
from wexample_filestate_go.utils.go_declarations_utils import collect_go_declarations
from wexample_filestate_go.utils.go_parser_utils import parse_go_source

if TYPE_CHECKING:
    from collections.abc import Sequence

    from wexample_filestate_go.utils.go_declarations_utils import GoDeclaration

logger = logging.getLogger(__name__)

NEWLINE = b"\n"
CRLF = b"\r\n"


def go_line_separator(src: bytes) -> bytes:
    """Line separator of the file, taken from its first line break."""
    index = src.find(NEWLINE)
    if index > 0 and src[index - 1 : index] == b"\r":
        return CRLF
    return NEWLINE


def organize_go_declarations(filename: str, src: bytes) -> bytes:
    """Reorder the top-level declarations of a Go file.

    Order: imports, constants, variables, types (each followed by its methods),
    then functions with `main` first. Imports, constants and variables keep
    their relative order; types, methods and functions are sorted by name,
    treating digit runs as numbers. Comments directly above a declaration
    move with it.

    A file whose declarations are already in order is returned as is.
    `filename` is only used in GoSyntaxError messages.
    """
    root = parse_go_source(filename, src)
    declarations = collect_go_declarations(root, src)
    if not declarations:
        return src

    ordered = sort_go_declarations(declarations)
    if ordered == declarations:
        logger.debug("%s: declarations already ordered", filename)
        return src

    logger.debug("%s: reordered %d declarations", filename, len(ordered))
    return reassemble_go_declarations(
        src,
        ordered,
        region_start=declarations[0].start,
        region_end=declarations[-1].end,
    )


def organize_go_source(filename: str, src: str) -> str:
    return organize_go_declarations(filename, src.encode("utf-8")).decode("utf-8")


def reassemble_go_declarations(
    src: bytes,
    declarations: Sequence[GoDeclaration],
    region_start: int,
    region_end: int,
) -> bytes:
    """Rebuild the file around the declaration region.

    The bytes before `region_start` and from `region_end` on are kept as is;
    in between, the declaration spans are emitted in the given order, one
    line separator apart.
    """
    rewritten = go_line_separator(src).join(
        declaration.text for declaration in declarations
    )
    return src[:region_start] + rewritten + src[region_end:]
