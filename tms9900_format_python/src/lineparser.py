# lineparser.py

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

# ---------------------------------------------------------------------
# lineparser.py splits one line of TMS9900 assembly language into its
# label, operation, operands and comment fields
# ---------------------------------------------------------------------

import common
import architecture as arch
from state import ParsedLine

# ---------------------------------------------------------------------
# Comments
# ---------------------------------------------------------------------

# A line whose first non-blank character is one of these is entirely
# comment. '*' is the traditional column 0 comment of the TI assembler.

full_line_comment_chars = ("*", ";")
inline_comment_char = ";"

def is_full_line_comment(line):
    return line.lstrip().startswith(full_line_comment_chars)

# ---------------------------------------------------------------------
# Parser
# ---------------------------------------------------------------------

def parse_line(line):
    """Split a raw source line into a ParsedLine. Never fails: the worst
    case is a record with every field empty.
    """
    s = ParsedLine(src_line=line)

    # 1. Whole line comment
    if is_full_line_comment(line):
        s.comment = line.lstrip()
        return s

    # 2. Separate inline comment; only the first ';' counts
    comment_start = line.find(inline_comment_char)
    if comment_start != -1:
        s.comment = line[comment_start:].strip()
        code = line[:comment_start]
    else:
        code = line

    code = code.rstrip()
    if not code.strip():
        return s

    # 3. Label, operation, operands
    parts = code.split()
    i = 0

    # A first token outside the vocabulary is a label. If it is all
    # there is, the line is a bare label.
    if not arch.is_operation(parts[0]):
        s.label = parts[0]
        i = 1
        if len(parts) == 1:
            common.mode.devlog(f"parse_line bare label {s.show()}")
            return s

    if i < len(parts):
        s.instruction = parts[i]
        i += 1

    if i < len(parts):
        s.operands = " ".join(parts[i:])

    common.mode.devlog(f"parse_line {s.show()}")
    return s
