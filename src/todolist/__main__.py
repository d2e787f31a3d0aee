"""CLI entry point for todolist."""

import argparse
from pathlib import Path

from . import __version__
from .config import Settings
from .logging import setup_logging


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="todolist",
        description="Terminal to-do list with priorities (state lives in memory only)",
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
        "--confirm-delete",
        action="store_true",
        help="Ask for confirmation before deleting a task",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return parser.parse_args(argv)


def build_settings(args: argparse.Namespace) -> Settings:
    """Build settings from CLI args, falling back to TODOLIST_* env vars."""
    settings_kwargs: dict = {}
    if args.verbose:
        settings_kwargs["verbose"] = args.verbose
    if args.log_file:
        settings_kwargs["log_file"] = args.log_file
    if args.confirm_delete:
        settings_kwargs["confirm_delete"] = True
    return Settings(**settings_kwargs)


def main() -> None:
    """Main entry point."""
    args = parse_args()
    settings = build_settings(args)

    setup_logging(settings)

    # Import here so --help and --version stay fast
    from .app import run

    run(settings)


if __name__ == "__main__":
    main()
