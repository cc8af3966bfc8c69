# state.py

# Copyright (C) 2026 The tms9900fmt authors. License: GNU GPL Version 3

# This file is part of tms9900fmt. tms9900fmt is free software: you can
# redistribute it and/or modify it under the terms of the GNU General
# Public License as published by the Free Software Foundation, either
# version 3 of the License, or (at your option) any later version.
# tms9900fmt is distributed in the hope that it will be useful, but
# WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the GNU
# General Public License for more details. You should have received
# a copy of the GNU General Public License along with tms9900fmt. If
# not, see <https://www.gnu.org/licenses/>.

# -------------------------------------------------------------------------
# state.py defines the data structures passed between the parser, the
# renderer and the hosts: the parsed line record and the format
# configuration.
# -------------------------------------------------------------------------

from dataclasses import dataclass, fields, replace

import common

# -------------------------------------------------------------------------
# Parsed line
# -------------------------------------------------------------------------

# The four fields of a source line. src_line keeps the raw text so the
# renderer can tell a blank line from an empty parse, and a column 0
# comment from an indented one.

@dataclass
class ParsedLine:
    label: str = ""
    instruction: str = ""
    operands: str = ""
    comment: str = ""
    src_line: str = ""

    def has_code(self):
        return bool(self.label or self.instruction or self.operands)

    def is_comment_only(self):
        return bool(self.comment) and not self.has_code()

    def show(self):
        return (f"label=/{self.label}/ instruction=/{self.instruction}/"
                f" operands=/{self.operands}/ comment=/{self.comment}/")

# -------------------------------------------------------------------------
# Format configuration
# -------------------------------------------------------------------------

# A snapshot taken once at the start of a formatting pass. It is
# frozen: a pass sees the same settings from the first line to the
# last even if the user edits them meanwhile. Use with_changes to
# derive a modified copy.

@dataclass(frozen=True)
class FormatConfig:
    label_column: int = 0
    instruction_column: int = 9
    operand_column: int = 18  # reserved, not used by the renderer
    comment_column: int = 40
    uppercase_instructions: bool = True
    uppercase_directives: bool = True
    space_after_comma: bool = True

    def with_changes(self, **changes):
        return replace(self, **changes)

default_config = FormatConfig()

# -------------------------------------------------------------------------
# Host settings
# -------------------------------------------------------------------------

# Setting keys as the editor host stores them, mapped to config fields

setting_keys = {
    "format.labelColumn": "label_column",
    "format.instructionColumn": "instruction_column",
    "format.operandColumn": "operand_column",
    "format.commentColumn": "comment_column",
    "format.uppercaseInstructions": "uppercase_instructions",
    "format.uppercaseDirectives": "uppercase_directives",
    "format.spaceAfterComma": "space_after_comma",
}

true_words = ("true", "1", "yes", "on")
false_words = ("false", "0", "no", "off")

def to_bool(x):
    if isinstance(x, bool):
        return x
    if isinstance(x, int):
        return x != 0
    xs = str(x).strip().lower()
    if xs in true_words:
        return True
    if xs in false_words:
        return False
    raise ValueError(f"{x!r} is not a boolean")

def to_column(x):
    if isinstance(x, bool):
        raise ValueError(f"{x!r} is not a column number")
    k = int(x)
    if k < 0:
        raise ValueError(f"column {k} is negative")
    return k

def get_format_config(settings):
    """Build a FormatConfig from host settings.

    settings is anything with a get(key, default) method: a dict, or an
    adapter around QSettings. Missing keys take the documented default;
    values that cannot be converted are reported and also take the
    default.
    """
    values = {}
    types = {f.name: f.type for f in fields(FormatConfig)}
    for key, name in setting_keys.items():
        default = getattr(default_config, name)
        x = settings.get(key, default)
        convert = to_bool if types[name] in (bool, "bool") else to_column
        try:
            values[name] = convert(x)
        except (TypeError, ValueError) as e:
            common.mode.errlog(f"Setting {key}: {e}, using {default}")
            values[name] = default
    config = FormatConfig(**values)
    common.mode.devlog(f"get_format_config {config}")
    return config

def config_to_settings(config):
    return {key: getattr(config, name) for key, name in setting_keys.items()}
