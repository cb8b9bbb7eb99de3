# File: daybook/cli.py
"""
Command line entry point.

    daybook list
    daybook add "Standup" 2024-01-01T09:00:00 2024-01-01T09:30:00
    daybook init
"""

import argparse
import logging
import sys
from datetime import datetime
from typing import Iterable, List, Optional

from daybook import __version__
from daybook.core.config_manager import Config
from daybook.core.exceptions import (
    MalformedInput,
    MalformedStorage,
    ScheduleConflict,
    StorageUnavailable,
)
from daybook.core.schedule_manager import ScheduleManager
from daybook.models.common import parse_datetime, display_datetime
from daybook.models.schedule import Schedule
from daybook.services.calendar_store import CalendarStore
from daybook.utils.logger import setup_logger, set_console_level

logger = setup_logger(__name__)

EXIT_OK = 0
EXIT_CONFLICT = 1
EXIT_USAGE = 2
EXIT_STORAGE = 3

TABLE_HEADER = ("ID", "Start", "End", "Subject")


def _datetime_arg(value: str) -> datetime:
    try:
        return parse_datetime(value)
    except MalformedInput as e:
        raise argparse.ArgumentTypeError(str(e)) from e


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="daybook",
        description="Keep a personal list of non-overlapping appointments."
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "-f", "--file",
        help=f"Schedule file (default: $DAYBOOK_SCHEDULE_FILE or {Config.DEFAULT_SCHEDULE_FILE})"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug output to stderr")

    sub = parser.add_subparsers(dest="command", metavar="COMMAND")
    sub.required = True

    sub.add_parser("list", help="Show all schedules in stored order")

    add = sub.add_parser("add", help="Add a schedule if it does not overlap an existing one")
    add.add_argument("subject", help="Title of the appointment")
    add.add_argument("start", type=_datetime_arg, help="Start, e.g. 2024-01-01T09:00:00")
    add.add_argument("end", type=_datetime_arg, help="End (exclusive), e.g. 2024-01-01T10:00:00")

    init = sub.add_parser("init", help="Create an empty schedule file")
    init.add_argument("--force", action="store_true", help="Overwrite an existing schedule file")

    return parser


def format_table(schedules: Iterable[Schedule]) -> List[str]:
    """Render schedules as tab separated rows, header first."""
    lines = ["\t".join(TABLE_HEADER)]
    for s in schedules:
        lines.append(f"{s.id}\t{display_datetime(s.start)}\t{display_datetime(s.end)}\t{s.subject}")
    return lines


def cmd_list(manager: ScheduleManager) -> int:
    for line in format_table(manager.list_schedules()):
        print(line)
    return EXIT_OK


def cmd_add(manager: ScheduleManager, args: argparse.Namespace) -> int:
    try:
        schedule = manager.add_schedule(args.subject, args.start, args.end)
    except ScheduleConflict as e:
        print(f"Error: schedule conflicts with an existing one: {e}")
        return EXIT_CONFLICT

    print(f"Schedule added (id {schedule.id})")
    return EXIT_OK


def cmd_init(store: CalendarStore, args: argparse.Namespace) -> int:
    try:
        store.initialize(force=args.force)
    except FileExistsError as e:
        logger.error(f"{e} (use --force to overwrite)")
        return EXIT_USAGE

    print(f"Created empty schedule file {store.path}")
    return EXIT_OK


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main execution function.

    Returns:
        Exit code (0 success, 1 conflict, 2 invalid input, 3 storage failure)
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        set_console_level(logging.DEBUG)

    store = CalendarStore(args.file)
    for problem in Config.validate(store.path):
        logger.warning(f"Configuration: {problem}")

    manager = ScheduleManager(store=store)
    logger.debug(f"Running '{args.command}' against {store.path}")

    try:
        if args.command == "list":
            return cmd_list(manager)
        if args.command == "add":
            return cmd_add(manager, args)
        return cmd_init(store, args)

    except MalformedInput as e:
        logger.error(str(e))
        return EXIT_USAGE

    except (StorageUnavailable, MalformedStorage) as e:
        logger.error(str(e), exc_info=args.verbose)
        return EXIT_STORAGE


if __name__ == "__main__":
    sys.exit(main())
