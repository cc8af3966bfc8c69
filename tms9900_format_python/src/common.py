# common.py

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

# ----------------------------------------------------------------------
# common.py
# ----------------------------------------------------------------------

import sys

APP_NAME = "tms9900fmt"
APP_VERSION = "0.1.0"

# Name of the settings section the editor host stores the format
# options under

SETTINGS_SECTION = "tms9900"

# ----------------------------------------------------------------------
# Trace and error output
# ----------------------------------------------------------------------

# Trace output goes to stderr so that "format" can write the formatted
# source to stdout without interference.

class Mode:
    def __init__(self):
        self.trace = False
        self.show_err = True

    def set_trace(self):
        self.trace = True

    def clear_trace(self):
        self.trace = False

    def show_mode(self):
        print(f"trace={self.trace}", file=sys.stderr)

    def devlog(self, xs):
        if self.trace:
            print(xs, file=sys.stderr)

    def errlog(self, xs):
        if self.show_err:
            print(xs, file=sys.stderr)

mode = Mode()

# ----------------------------------------------------------------------
# Logging error message
# ----------------------------------------------------------------------

def indicate_error(xs):
    print(f"\033[91m\033[1m{xs}\033[0m", file=sys.stderr) # ANSI escape codes for red and bold

# ----------------------------------------------------------------------
# Dialogues with the user
# ----------------------------------------------------------------------

def modal_warning(msg):
    print(f"WARNING: {msg}", file=sys.stderr)
