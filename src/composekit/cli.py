"""CLI entry point running the demonstration scenario.

Usage:
    composekit                     # run the demo
    composekit --strict --quiet    # strict role registry, no section headings
    composekit --log-level DEBUG
"""

from __future__ import annotations

import argparse
import logging
import sys

from composekit.core.errors import ComposeKitError
from composekit.demo import run_demo
from composekit.engine import Engine
from composekit.log import setup_logging

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="composekit",
        description="Run the composekit behavior composition demo",
    )
    parser.add_argument("--log-level", default=None, help="Logging level (default from settings)")
    parser.add_argument("--strict", action="store_true", help="Reject duplicate role registration")
    parser.add_argument("--quiet", action="store_true", help="Omit section headings")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)

    overrides = {"strict_roles": True} if args.strict else {}
    engine = Engine.from_settings(**overrides)
    setup_logging(args.log_level or engine.settings.log_level)

    try:
        lines = run_demo(engine, headings=not args.quiet)
    except ComposeKitError as e:
        logger.error("Demo failed: %s", e)
        print(f"error: {e}", file=sys.stderr)
        return 1

    for line in lines:
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())
