# docformat.py

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
# docformat.py runs the line formatter over a document, or a range of
# its lines, and collects an edit for each line that changes
# ---------------------------------------------------------------------

from typing import NamedTuple

import common
from renderer import format_line

# ---------------------------------------------------------------------
# Edits
# ---------------------------------------------------------------------

# Replace the whole of line `line` (0-based) with `text`. Edits never
# overlap, so a list of them can be applied in any order.

class Edit(NamedTuple):
    line: int
    text: str

def never_cancelled():
    return False

# ---------------------------------------------------------------------
# Document driver
# ---------------------------------------------------------------------

def format_lines(lines, config, start=0, end=None, cancelled=None):
    """Format lines[start..end] (inclusive) and return the edits.

    cancelled is polled before each line; once it returns True the loop
    stops and the edits collected so far are returned. A line that has
    been started is always finished.
    """
    if start < 0:
        raise ValueError(f"start line {start} is negative")
    if cancelled is None:
        cancelled = never_cancelled
    last = len(lines) - 1 if end is None else min(end, len(lines) - 1)
    common.mode.devlog(f"format_lines {start}..{last} of {len(lines)}")

    edits = []
    for i in range(start, last + 1):
        if cancelled():
            common.mode.devlog(f"format_lines cancelled before line {i}")
            break
        formatted = format_line(lines[i], config)
        if formatted != lines[i]:
            edits.append(Edit(i, formatted))
    return edits

def format_document(lines, config, cancelled=None):
    return format_lines(lines, config, cancelled=cancelled)

def format_range(lines, start, end, config, cancelled=None):
    return format_lines(lines, config, start, end, cancelled)

def apply_edits(lines, edits):
    result = list(lines)
    for e in edits:
        result[e.line] = e.text
    return result

# ---------------------------------------------------------------------
# Text
# ---------------------------------------------------------------------

def remove_cr(xs):
    return xs.replace("\r", "")

def split_lines(txt):
    return remove_cr(txt).split("\n")

# The line ending to write back: "\r\n" if the text uses it anywhere

def detect_newline(txt):
    return "\r\n" if "\r\n" in txt else "\n"

def format_text(txt, config):
    # split_lines keeps a final empty element for a trailing newline,
    # and a blank line formats to "", so the newline survives the join
    lines = split_lines(txt)
    return "\n".join(apply_edits(lines, format_document(lines, config)))
