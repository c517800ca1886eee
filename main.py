import sys
import argparse
from pathlib import Path

from locimport_logger import get_logger
logger = get_logger("main")

from core.log_sink import LoggerSink, log_banner
from core.pipeline import run_import
from locimport_enums import Severity
from locimport_exceptions import StructuralError
from locimport_settings import (
    default_output_path,
    load_settings,
    options_from_settings,
    remember_save_location,
    save_settings,
)
from models.import_summary import ImportOptions

EXIT_OK = 0
EXIT_IMPORT_FAILED = 1
EXIT_WRITE_FAILED = 2


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="locimport",
        description="Convert localization data copied from a spreadsheet into a Lua file.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter
        )
    parser.add_argument(
        "output",
        help="Destination file (defaults to the last saved location).",
        nargs='?',
        default=None
    )
    parser.add_argument(
        "-i", "--input",
        default=None,
        help="Read the sheet from this file ('-' for stdin) instead of the clipboard."
    )
    parser.add_argument(
        "-c", "--ignore-columns",
        default=None,
        help="Comma separated column letters to skip, e.g. 'c, d' (defaults to the saved value)."
    )
    parser.add_argument(
        "--reveal",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Reveal the saved file in the file manager (defaults to the saved value)."
    )
    return parser


def read_input(source) -> str:
    """Read the raw sheet text from a file, stdin or the clipboard."""
    if source == "-":
        return sys.stdin.read()
    if source:
        return Path(source).read_text(encoding='utf-8')

    from utils.clipboard import read_clipboard_text
    return read_clipboard_text()


def main(argv=None, sink=None) -> int:
    args = build_arg_parser().parse_args(argv)
    if sink is None:
        sink = LoggerSink("import")

    settings = load_settings()
    saved_options = options_from_settings(settings)
    options = ImportOptions(
        ignored_columns=(saved_options.ignored_columns
                         if args.ignore_columns is None else args.ignore_columns),
        reveal_in_explorer=(saved_options.reveal_in_explorer
                            if args.reveal is None else args.reveal),
    )
    output_path = Path(args.output) if args.output else default_output_path(settings)

    log_banner(sink)

    try:
        raw_text = read_input(args.input)
    except (OSError, UnicodeDecodeError) as e:
        message = f"Could not read input ({args.input}): {e}"
        logger.debug(message)
        sink.emit(message, Severity.ERROR)
        return EXIT_IMPORT_FAILED

    try:
        summary = run_import(raw_text, output_path, options, sink)
    except StructuralError:
        return EXIT_IMPORT_FAILED
    except OSError as e:
        message = f"Could not write {output_path}: {e}"
        logger.debug(message)
        sink.emit(message, Severity.ERROR)
        return EXIT_WRITE_FAILED

    remember_save_location(settings, summary.path)
    settings["columns_to_ignore"] = options.ignored_columns
    settings["reveal_in_explorer"] = options.reveal_in_explorer
    save_settings(settings)

    if options.reveal_in_explorer:
        from utils.explorer import reveal_in_file_manager
        reveal_in_file_manager(summary.path)

    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
