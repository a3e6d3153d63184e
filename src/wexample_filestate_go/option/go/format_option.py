from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar

from wexample_helpers.decorator.base_class import base_class

from .abstract_go_file_content_option import AbstractGoFileContentOption

if TYPE_CHECKING:
    from wexample_filestate.const.types_state_items import TargetFileOrDirectoryType


@base_class
class FormatOption(AbstractGoFileContentOption):
    # ClassVar keeps the binary out of the option's fields.
    _gofmt_binary: ClassVar[str] = "gofmt"

    def get_description(self) -> str:
        return "Format the Go file content using gofmt."

    def _apply_content_change(self, target: TargetFileOrDirectoryType) -> str:
        """Return gofmt's output, or the current content when gofmt rejects the file."""
        from wexample_helpers.helper.shell import shell_run

        result = shell_run(cmd=[self._gofmt_binary, str(target.get_path())])
        if result.returncode == 0:
            return result.stdout

        target.io.error(f"gofmt error: {result.stderr}\n\n")
        return target.get_local_file().read()
