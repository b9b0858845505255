from __future__ import annotations

import argparse
import logging
import sys
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from codexsync.app import check_snapshot, merge_snapshot_directories
from codexsync.config import ConfigurationError, configure_logging, parse_kinds
from codexsync.domain.model import EntityKind

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

log = logging.getLogger(__name__)


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Reconcile the reference codex with the authoritative store"
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Log debug output",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    merge = subparsers.add_parser("merge", help="Merge snapshots, oldest first")
    merge.add_argument(
        "snapshots",
        nargs="+",
        metavar="SNAPSHOT_DIR",
        help="Snapshot directories, oldest first",
    )
    merge.add_argument(
        "--output",
        "-o",
        required=True,
        help="Directory the merged snapshot is written to",
    )

    check = subparsers.add_parser("check", help="Reconcile a snapshot")
    check.add_argument("snapshot", metavar="SNAPSHOT_DIR", help="Snapshot directory to check")
    check.add_argument(
        "--fix",
        action="store_true",
        help="Write corrections to the store instead of only reporting them",
    )
    check.add_argument(
        "--kind",
        action="append",
        dest="kinds",
        choices=[kind.value for kind in EntityKind],
        help="Entity kind to check (repeatable, defaults to config)",
    )
    check.add_argument(
        "--output",
        "-o",
        help="Directory the store contents are written to after the pass",
    )

    return parser.parse_args(list(argv))


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    parsed_args: argparse.Namespace
    kinds: tuple[EntityKind, ...] | None = None
    try:
        parsed_args = _parse_args(args_list)
        configure_logging(level=logging.DEBUG if parsed_args.verbose else logging.INFO)
        if parsed_args.command == "check" and parsed_args.kinds:
            kinds = parse_kinds(",".join(parsed_args.kinds))
    except (ValueError, ConfigurationError):
        log.exception("CLI validation error")
        sys.exit(2)

    try:
        if parsed_args.command == "merge":
            merge_snapshot_directories(parsed_args.snapshots, parsed_args.output)
        elif parsed_args.command == "check":
            report = check_snapshot(
                parsed_args.snapshot,
                fix=parsed_args.fix,
                kinds=kinds,
                output=parsed_args.output,
            )
            summary = report.summary()
            log.info(
                "Check finished: %s",
                ", ".join(f"{key}={value}" for key, value in summary.items()),
            )
        else:
            raise ValueError(f"Unsupported command: {parsed_args.command}")  # noqa: TRY301

    except Exception:
        log.exception("Fatal error during reconciliation")
        sys.exit(1)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(0)


if __name__ == "__main__":
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()
