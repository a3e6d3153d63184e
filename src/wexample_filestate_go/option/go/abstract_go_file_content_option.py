from __future__ import annotations

from wexample_filestate.option.abstract_file_content_option import (
    AbstractFileContentOption,
)
from wexample_helpers.decorator.base_class import base_class


@base_class
class AbstractGoFileContentOption(AbstractFileContentOption):
    """Base class for Go file content transformation options."""
