"""Command-line entry point for the R Labs learning platform.

This module lists and shows lab cards and copies a card's example code to the
system clipboard. The terminal has no document context, so copying uses the
native clipboard only and reports the outcome through the exit status.
"""

import argparse
import asyncio
import logging
import sys
from typing import List, Optional

from rlabs.capability import HostEnvironment
from rlabs.catalog import Catalog, load_catalog
from rlabs.clipboard_manager import Outcome, PyperclipClipboard
from rlabs.config import settings
from rlabs.exceptions import CatalogError
from rlabs.feedback import AsyncioScheduler, create_feedback_state
from rlabs.session import LabSession

# Module-level logger
logger = logging.getLogger(__name__)


def setup_logging(level: Optional[str] = None):
    """Configure basic logging for the application."""
    logging.basicConfig(
        level=getattr(logging, (level or settings.log_level).upper()),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="rlabs",
        description="Browse R lab cards and copy their example code."
    )
    parser.add_argument(
        "--catalog",
        default=None,
        help="Lab catalog JSON file (default: bundled catalog or RLABS_CATALOG_PATH)"
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default=None,
        help=f"Logging level (default: {settings.log_level})"
    )

    subparsers = parser.add_subparsers(dest="command", required=True)
    subparsers.add_parser("list", help="List lab titles")

    show = subparsers.add_parser("show", help="Show one lab card")
    show.add_argument("number", type=int, help="Lab number (1-based)")

    copy = subparsers.add_parser("copy", help="Copy a lab's example code to the clipboard")
    copy.add_argument("number", type=int, help="Lab number (1-based)")

    return parser


def cmd_list(catalog: Catalog) -> int:
    print(catalog.intro.title)
    for number, lab in enumerate(catalog.labs, start=1):
        print(f"{number:>3}. {lab.title}")
    return 0


def cmd_show(catalog: Catalog, number: int) -> int:
    lab = catalog.lab(number - 1)
    sections = [
        lab.title,
        "",
        "Example:",
        lab.example,
        "",
        "Output:",
        lab.output,
        "",
        "Interpretation:",
        lab.interpretation,
        "",
        f"Exercise: {lab.exercise}",
    ]
    print("\n".join(sections))
    return 0


async def copy_example(catalog: Catalog, item_id: int) -> int:
    """Copy one card's example through a short-lived session.

    Args:
        catalog: Loaded catalog
        item_id: Zero-based card index

    Returns:
        0 if the example was copied, 1 otherwise
    """
    lab = catalog.lab(item_id)

    feedback = create_feedback_state(
        settings.feedback_mode,
        AsyncioScheduler(),
        settings.copied_feedback_seconds,
    )
    session = LabSession(
        HostEnvironment(clipboard=PyperclipClipboard()),
        feedback,
        mechanism_preference=settings.clipboard_mechanism,
    )

    try:
        outcome = await session.request_copy(lab.example, item_id)
    finally:
        session.close()

    if outcome is Outcome.SUCCESS:
        print(f"Copied! ({lab.title})")
        return 0

    print(f"Copy failed: {session.last_error}", file=sys.stderr)
    return 1


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the command-line interface.

    Returns:
        0 for success, 1 for error
    """
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level)

    try:
        catalog = load_catalog(args.catalog or settings.catalog_path)

        if args.command == "list":
            return cmd_list(catalog)
        if args.command == "show":
            return cmd_show(catalog, args.number)
        return asyncio.run(copy_example(catalog, args.number - 1))

    except CatalogError as e:
        logger.error(f"Catalog error: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == '__main__':
    sys.exit(main())
