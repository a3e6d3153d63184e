from __future__ import annotations

from .exceptions import GoSyntaxError, UnsupportedGoDeclarationError
from .utils.go_declarations_order_utils import (
    organize_go_declarations,
    organize_go_source,
)

__all__ = [
    "GoSyntaxError",
    "UnsupportedGoDeclarationError",
    "organize_go_declarations",
    "organize_go_source",
]
