#!/usr/bin/env python3
"""
Auto Assign Issues entry point.

Runs once per workflow step: reads the event the runner wrote to
GITHUB_EVENT_PATH and assigns the labeled issue to its configured team.
"""

import argparse
import asyncio
import logging
import sys
import traceback
from typing import List, Optional

from auto_assign.config import Settings
from auto_assign.core.action_context import ActionContext
from auto_assign.core.auto_assigner import run
from auto_assign.core.logging_config import configure_logging


logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="auto-assign-issues",
        description="Assign team members to a GitHub issue based on the label it just received",
    )
    parser.add_argument("--event-path", help="Path to the event payload JSON (default: $GITHUB_EVENT_PATH)")
    parser.add_argument("--repository", help="Repository as owner/repo (default: $GITHUB_REPOSITORY)")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    overrides = {}
    if args.event_path:
        overrides["github_event_path"] = args.event_path
    if args.repository:
        overrides["github_repository"] = args.repository
    if args.debug:
        overrides["debug"] = True

    configure_logging(debug=args.debug)

    try:
        settings = Settings().model_copy(update=overrides)
        if settings.debug and not args.debug:
            configure_logging(debug=True)

        context = ActionContext.from_settings(settings)
        asyncio.run(run(context, settings=settings))
    except Exception:
        logger.error(f"Action failed: {traceback.format_exc()}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
