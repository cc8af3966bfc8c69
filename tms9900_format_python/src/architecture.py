# architecture.py

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

# --------------------------------------------------------------------
# architecture.py defines the TMS9900 vocabulary: the mnemonics and
# assembler directives the formatter recognizes, and the one function
# that classifies a token against them
# --------------------------------------------------------------------

# --------------------------------------------------------------------
# Token classes
# --------------------------------------------------------------------

Instruction = "Instruction"
Directive = "Directive"
DotDirective = "DotDirective"  # .anything, local assembler directives
Unknown = "Unknown"

# --------------------------------------------------------------------
# Instruction mnemonics
# --------------------------------------------------------------------

# All entries are uppercase; lookups uppercase the token first.

instructions = frozenset([
    "A", "AB", "ABS", "AI", "ANDI", "B", "BL", "BLWP", "C", "CB", "CI", "CLR",
    "COC", "CZC", "DEC", "DECT", "DIV", "IDIV", "INC", "INCT", "INV",
    "JEQ", "JGT", "JHE", "JH", "JL", "JLE", "JLT", "JMP", "JNC", "JNE", "JNO",
    "JOC", "JOP",
    "LDCR", "LI", "LIMI", "LREX", "LWPI", "MOV", "MOVB", "MPY", "NEG", "ORI",
    "RTWP", "S", "SB", "SBO", "SBZ", "SETO", "SLA", "SRA", "SRC", "SRL",
    "STCR", "STST", "STWP", "SWPB", "SZC", "SZF", "TB", "X", "XOP", "XOR",
])

# --------------------------------------------------------------------
# Assembler directives
# --------------------------------------------------------------------

directives = frozenset([
    "EQU", "DATA", "BYTE", "TEXT", "BSS", "BES", "ORG", "END",
    "AORG", "RORG", "DORG",
    "IDT", "DEF", "REF", "TITL", "PAGE", "LIST", "UNL",
    "BCOPY", "COPY", "SAVE",
])

# --------------------------------------------------------------------
# Classification
# --------------------------------------------------------------------

# The parser uses classify to decide whether the first token of a line
# is a label, and the renderer uses it to decide whether to uppercase
# the operation field, so the two can never disagree about a token.

def classify(token):
    x = token.upper()
    if x in instructions:
        return Instruction
    elif x in directives:
        return Directive
    elif x.startswith("."):
        return DotDirective
    else:
        return Unknown

def is_operation(token):
    return classify(token) != Unknown
