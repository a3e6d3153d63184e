from __future__ import annotations

from typing import TYPE_CHECKING

from wexample_helpers.decorator.base_class import base_class

from .abstract_go_file_content_option import AbstractGoFileContentOption

if TYPE_CHECKING:
    from wexample_filestate.const.types_state_items import TargetFileOrDirectoryType


@base_class
class OrganizeDeclarationsOption(AbstractGoFileContentOption):
    def get_description(self) -> str:
        return "Order Go top-level declarations: imports, constants, variables, types with their methods, then functions (main first)."

    def _apply_content_change(self, target: TargetFileOrDirectoryType) -> str:
        """Reorder top-level declarations, keeping attached comments with them.

        - Imports, constants and variables keep their relative order.
        - Types are sorted by name, each followed by its methods by name.
        - Functions come last, `main` first, then by name.
        - Names compare digit runs as numbers (item2 before item10).
        """
        from wexample_filestate_go.utils.go_declarations_order_utils import (
            organize_go_source,
        )

        src = target.get_local_file().read()
        return organize_go_source(str(target.get_path()), src)
