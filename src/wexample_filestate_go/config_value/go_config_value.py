from __future__ import annotations

from typing import Any

from wexample_config.config_value.config_value import ConfigValue
from wexample_helpers.classes.field import public_field
from wexample_helpers.decorator.base_class import base_class


@base_class
class GoConfigValue(ConfigValue):
    format: bool | None = public_field(
        default=None,
        description="Format Go code with gofmt",
    )
    organize_declarations: bool | None = public_field(
        default=None,
        description="Order top-level declarations (imports, consts, vars, types with methods, funcs)",
    )
    raw: Any = public_field(
        default=None, description="Disabled raw value for this config."
    )

    def to_option_raw_value(self) -> Any:
        from wexample_filestate_go.option.go.format_option import FormatOption
        from wexample_filestate_go.option.go.organize_declarations_option import (
            OrganizeDeclarationsOption,
        )

        return {
            FormatOption.get_name(): self.format,
            OrganizeDeclarationsOption.get_name(): self.organize_declarations,
        }
