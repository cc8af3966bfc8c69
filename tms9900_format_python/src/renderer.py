# renderer.py

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
# renderer.py puts the fields of a parsed line back together, with
# each field starting at its configured column
# ---------------------------------------------------------------------

import common
import architecture as arch
from lineparser import parse_line

# Separator used when the code already reaches the comment column

comment_gap = "  "

# ---------------------------------------------------------------------
# Fields
# ---------------------------------------------------------------------

def recase_operation(op, config):
    c = arch.classify(op)
    if c == arch.Instruction and config.uppercase_instructions:
        return op.upper()
    elif c == arch.Directive and config.uppercase_directives:
        return op.upper()
    # Unknown mnemonics and dot directives are kept as written
    return op

def format_operands(operands, config):
    if not operands or not config.space_after_comma:
        return operands
    # A comma followed by any amount of white space becomes ", ". This
    # is plain text substitution, so commas inside quoted operands are
    # changed too.
    out = []
    i = 0
    n = len(operands)
    while i < n:
        c = operands[i]
        out.append(c)
        i += 1
        if c == ",":
            while i < n and operands[i].isspace():
                i += 1
            out.append(" ")
    return "".join(out)

def place_label(label, config):
    width = config.instruction_column
    if not label:
        return " " * width
    if len(label) >= width:
        return label + " "
    return label.ljust(width)

def place_comment(xs, comment, config):
    code = xs.rstrip()
    if len(code) < config.comment_column:
        return code.ljust(config.comment_column) + comment
    return code + comment_gap + comment

# ---------------------------------------------------------------------
# Line renderer
# ---------------------------------------------------------------------

def render_line(s, config):
    line = s.src_line

    # Blank lines stay blank, never padded
    if not line.strip():
        return ""

    if s.is_comment_only():
        if line.lstrip() == line:
            return s.comment
        return " " * config.comment_column + s.comment

    xs = place_label(s.label, config)

    if s.instruction:
        xs += recase_operation(s.instruction, config)

    if s.operands:
        xs = xs.rstrip() + " " + format_operands(s.operands, config)

    if s.comment:
        xs = place_comment(xs, s.comment, config)

    result = xs.rstrip()
    common.mode.devlog(f"render_line /{line}/ -> /{result}/")
    return result

def format_line(line, config):
    return render_line(parse_line(line), config)
