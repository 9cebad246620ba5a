"""CLI entry point for dragboard."""

import argparse
from pathlib import Path

from . import __version__
from .config import Settings
from .logging import setup_logging


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="dragboard",
        description="Terminal kanban board with drag-and-drop columns and tasks",
    )
    parser.add_argument(
        "--column",
        dest="columns",
        action="append",
        default=[],
        metavar="TITLE",
        help="Create a column at startup (repeatable)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Increase logging verbosity (-v for INFO, -vv for DEBUG)",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Path to write logs to file",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return parser.parse_args(argv)


def build_settings(args: argparse.Namespace) -> Settings:
    """Merge CLI arguments over environment-derived settings."""
    settings = Settings()
    updates: dict = {}
    if args.verbose:
        updates["verbose"] = args.verbose
    if args.log_file:
        updates["log_file"] = args.log_file
    if args.columns:
        updates["initial_columns"] = [*settings.initial_columns, *args.columns]
    return settings.model_copy(update=updates)


def main() -> None:
    """Main entry point."""
    settings = build_settings(parse_args())

    setup_logging(settings.verbose, settings.log_file)

    # Import here to keep --help and --version fast
    from .app import run

    run(settings)


if __name__ == "__main__":
    main()
