# main.py

import sys
import argparse
from pathlib import Path

# Add the src directory to the Python path
sys.path.insert(0, str(Path(__file__).resolve().parent))

import common
import state
import docformat

# Exit statuses
EXIT_OK = 0
EXIT_CHANGES = 1
EXIT_ERROR = 2

def config_from_args(args):
    return state.FormatConfig(
        label_column=args.label_column,
        instruction_column=args.instruction_column,
        operand_column=args.operand_column,
        comment_column=args.comment_column,
        uppercase_instructions=not args.no_uppercase_instructions,
        uppercase_directives=not args.no_uppercase_directives,
        space_after_comma=not args.no_space_after_comma,
    )

def read_source(file_path):
    try:
        with open(file_path, 'r', newline='') as f:
            return f.read()
    except FileNotFoundError:
        common.indicate_error(f"Error: File not found at {file_path}")
    except OSError as e:
        common.indicate_error(f"Error: Cannot read {file_path}: {e}")
    return None

def format_file(file_path, config, line_range=None, in_place=False):
    src_text = read_source(file_path)
    if src_text is None:
        return EXIT_ERROR

    lines = docformat.split_lines(src_text)
    if line_range:
        first, last = line_range
        if first < 1 or last < first:
            common.indicate_error(f"Error: Invalid line range {first}-{last}")
            return EXIT_ERROR
        if last > len(lines):
            common.modal_warning(f"{file_path} has only {len(lines)} lines")
        edits = docformat.format_range(lines, first - 1, last - 1, config)
    else:
        edits = docformat.format_document(lines, config)
    common.mode.devlog(f"{file_path}: {len(edits)} lines changed")

    # Written back with the line ending the file already uses
    newline = docformat.detect_newline(src_text)
    out_text = newline.join(docformat.apply_edits(lines, edits))

    if in_place:
        if out_text == src_text:
            return EXIT_OK
        try:
            with open(file_path, 'w', newline='') as f:
                f.write(out_text)
        except OSError as e:
            common.indicate_error(f"Error: Cannot write {file_path}: {e}")
            return EXIT_ERROR
        print(f"Formatted {file_path} ({len(edits)} lines changed)")
    else:
        sys.stdout.write(out_text)
    return EXIT_OK

def check_file(file_path, config):
    src_text = read_source(file_path)
    if src_text is None:
        return EXIT_ERROR
    edits = docformat.format_document(docformat.split_lines(src_text), config)
    for e in edits:
        print(f"{file_path}:{e.line + 1}: would reformat")
    return EXIT_CHANGES if edits else EXIT_OK

def run_gui(file_path=None):
    # PySide6 is only needed for the editor
    import gui
    return gui.start_gui(file_path)

def add_format_options(p):
    defaults = state.default_config
    p.add_argument("--label-column", type=state.to_column, default=defaults.label_column, help="Column for labels")
    p.add_argument("--instruction-column", type=state.to_column, default=defaults.instruction_column, help="Column for mnemonics and directives")
    p.add_argument("--operand-column", type=state.to_column, default=defaults.operand_column, help="Column for operands (reserved)")
    p.add_argument("--comment-column", type=state.to_column, default=defaults.comment_column, help="Column for comments")
    p.add_argument("--no-uppercase-instructions", action="store_true", help="Keep the case of mnemonics as written")
    p.add_argument("--no-uppercase-directives", action="store_true", help="Keep the case of directives as written")
    p.add_argument("--no-space-after-comma", action="store_true", help="Leave spacing after commas alone")
    p.add_argument("--verbose", action="store_true", help="Enable verbose debug logging")

def make_parser():
    parser = argparse.ArgumentParser(prog=common.APP_NAME, description="TMS9900 assembly formatter")
    parser.add_argument("--version", action="version", version=f"{common.APP_NAME} {common.APP_VERSION}")
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Format command
    format_parser = subparsers.add_parser("format", help="Format a TMS9900 assembly file")
    format_parser.add_argument("file", help="Path to the assembly file")
    format_parser.add_argument("-i", "--in-place", action="store_true", help="Rewrite the file instead of printing it")
    format_parser.add_argument("--range", nargs=2, type=int, metavar=("START", "END"), help="Only format lines START to END (1-based, inclusive)")
    add_format_options(format_parser)

    # Check command
    check_parser = subparsers.add_parser("check", help="Report lines that would be reformatted")
    check_parser.add_argument("file", help="Path to the assembly file")
    add_format_options(check_parser)

    # Gui command
    gui_parser = subparsers.add_parser("gui", help="Open the editor")
    gui_parser.add_argument("file", nargs="?", help="Assembly file to open")
    gui_parser.add_argument("--verbose", action="store_true", help="Enable verbose debug logging")

    return parser

def main(argv=None):
    parser = make_parser()
    args = parser.parse_args(argv)

    if getattr(args, "verbose", False):
        common.mode.set_trace()
    try:
        if args.command == "format":
            config = config_from_args(args)
            return format_file(args.file, config, args.range, args.in_place)
        elif args.command == "check":
            return check_file(args.file, config_from_args(args))
        elif args.command == "gui":
            return run_gui(args.file)
        else:
            parser.print_help()
            return EXIT_OK
    finally:
        common.mode.clear_trace()

if __name__ == "__main__":
    sys.exit(main())
