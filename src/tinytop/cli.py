"""CLI interface for tinytop."""

from __future__ import annotations

import argparse
import sys

from .app import App
from .config import Config, format_duration, parse_duration, settings
from .errors import AppError
from .formatters import FORMATS


def _duration(text: str) -> float:
    try:
        return parse_duration(text)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from e


def build_parser() -> argparse.ArgumentParser:
    """Build argument parser."""
    parser = argparse.ArgumentParser(
        prog="tinytop",
        description="A simple system monitoring tool.",
        epilog=(
            "Examples:\n"
            "  tinytop -i 500ms -d 30s\n"
            "  tinytop --interval 2s --duration 1m"
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "--version",
        "-V",
        action="store_true",
        help="Show version and exit",
    )
    parser.add_argument(
        "--interval",
        "-i",
        type=_duration,
        default=settings.default_interval_seconds,
        help=(
            "Collection interval, e.g. 1s, 500ms, 2m "
            f"(default: {format_duration(settings.default_interval_seconds)})"
        ),
    )
    parser.add_argument(
        "--duration",
        "-d",
        type=_duration,
        default=settings.default_duration_seconds,
        help=(
            "Collection duration, e.g. 1s, 30s, 5m "
            f"(default: {format_duration(settings.default_duration_seconds)})"
        ),
    )
    parser.add_argument(
        "-log",
        "--log",
        dest="log_file",
        default=settings.default_log_file,
        help=f"Log file path (default: {settings.default_log_file})",
    )
    parser.add_argument(
        "-stdout",
        "--stdout",
        dest="log_to_stdout",
        action="store_true",
        default=settings.log_to_stdout,
        help="Output logs to terminal in addition to log file",
    )
    parser.add_argument(
        "--format",
        "-f",
        choices=sorted(FORMATS),
        default="json",
        help="Output format (default: json)",
    )
    parser.add_argument(
        "--output",
        "-o",
        type=str,
        default=None,
        help="Output file (default: stdout)",
    )

    return parser


def main(argv: list[str] | None = None) -> None:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.version:
        from . import __version__

        sys.stdout.write(f"tinytop version {__version__}\n")
        raise SystemExit(0)

    try:
        config = Config(
            interval=args.interval,
            duration=args.duration,
            log_file=args.log_file,
            log_to_stdout=args.log_to_stdout,
            output_format=args.format,
            output_file=args.output,
        )
        App(settings.service_name, config).run()
    except AppError as e:
        sys.stderr.write(f"Error: {e.message}\n")
        raise SystemExit(e.exit_code) from e

    raise SystemExit(0)
