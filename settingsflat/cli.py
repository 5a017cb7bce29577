import argparse
import sys
from pathlib import Path
from typing import List, Optional

from .core.converter import SettingsConverter, configure_logging
from .core.loader import describe_formatters, discover_formatter_plugins, formatter_choices, select_formatter
from .core.models import ConvertOptions, OutputExistsError, SettingsFlatError
from .core.reporting import OUTPUT_CONSOLE, OUTPUT_FILE, OUTPUT_TYPES

DEFAULT_FORMAT = "azure"
DEFAULT_OUTPUT_TYPE = OUTPUT_CONSOLE

EXIT_OK = 0
EXIT_FAILED = 1
EXIT_USAGE = 2


def build_arg_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="settingsflat",
        description="Flatten a JSON settings file (appsettings.json style) into App Service settings or compose environment entries.",
    )
    p.add_argument("-i", "--input", dest="input_path", type=Path, required=True, help="Input JSON file path.")
    p.add_argument("-o", "--output", dest="output_path", default=None, help="Output file path (required with --output-type file).")
    p.add_argument("-k", "--output-type", type=str.lower, choices=OUTPUT_TYPES, default=DEFAULT_OUTPUT_TYPE, help="Write to the console or to a file (default: console).")
    p.add_argument("-f", "--format", dest="output_format", default=DEFAULT_FORMAT, help="Output format: 'azure' records or 'docker-compose' lines (default: azure).")
    p.add_argument("--oef", "--overwrite", dest="overwrite", action="store_true", help="Overwrite the output file if it already exists.")
    p.add_argument("--ss", "--slot-setting", dest="slot_setting", action="store_true", help="Mark every generated setting as a slot setting.")
    p.add_argument("-v", "--verbose", action="store_true", help="Enable verbose logging output.")
    return p


def run_convert(args: argparse.Namespace) -> int:
    if not args.input_path.is_file():
        print(f"Input file does not exist: {args.input_path}", file=sys.stderr)
        return EXIT_USAGE

    if args.output_type == OUTPUT_FILE and not (args.output_path or "").strip():
        print("An output file path must be specified", file=sys.stderr)
        return EXIT_USAGE

    formatter_plugins = discover_formatter_plugins()
    try:
        select_formatter(formatter_plugins, args.output_format)
    except KeyError:
        choices = ", ".join(formatter_choices(formatter_plugins))
        print(f"Unknown output format: {args.output_format} (choose from {choices})", file=sys.stderr)
        for line in describe_formatters(formatter_plugins):
            print(line, file=sys.stderr)
        return EXIT_USAGE

    options = ConvertOptions(
        input_path=args.input_path,
        output_path=Path(args.output_path) if args.output_type == OUTPUT_FILE else None,
        output_type=args.output_type,
        output_format=args.output_format,
        overwrite=args.overwrite,
        slot_setting=args.slot_setting,
    )
    logger = configure_logging(verbose=args.verbose)
    converter = SettingsConverter(options, formatter_plugins, logger=logger)

    try:
        converter.run()
    except OutputExistsError as exc:
        print(f"{exc}; pass --overwrite to replace it", file=sys.stderr)
        return EXIT_FAILED
    except SettingsFlatError as exc:
        logger.error("Conversion failed: %s", exc)
        return EXIT_FAILED
    return EXIT_OK


def main(argv: Optional[List[str]] = None) -> int:
    if argv is None:
        argv = sys.argv[1:]
    if not argv:
        print("A file path must be specified", file=sys.stderr)
        build_arg_parser().print_usage(sys.stderr)
        return EXIT_USAGE
    parser = build_arg_parser()
    args = parser.parse_args(argv)
    return run_convert(args)


if __name__ == "__main__":
    raise SystemExit(main())
