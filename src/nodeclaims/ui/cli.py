# ruff: noqa: T201

from __future__ import annotations

import argparse
import logging
import sys
from datetime import UTC, timedelta, timezone
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from nodeclaims.adapters.explorer.client import DEFAULT_PAGE_SIZE
from nodeclaims.app import list_created_nodes, reconcile_node_rewards
from nodeclaims.config import (
    ConfigurationError,
    configure_logging,
    get_method_selectors,
    get_node_create_selector,
)
from nodeclaims.ui.report import render_json, render_node_list, render_text

if TYPE_CHECKING:
    from collections.abc import Sequence
    from datetime import tzinfo
    from types import FrameType

log = logging.getLogger(__name__)


def _add_fetch_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--start-block",
        type=int,
        default=0,
        help="First block to include (default: %(default)s)",
    )
    parser.add_argument(
        "--end-block",
        type=int,
        help="Last block to include (defaults to the chain head)",
    )
    parser.add_argument(
        "--page-size",
        type=int,
        default=DEFAULT_PAGE_SIZE,
        help="Number of transactions to request per API call (default: %(default)s)",
    )
    parser.add_argument(
        "--max-pages",
        type=int,
        help="Maximum number of pages to fetch before stopping",
    )


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Reconcile node reward claims")
    subparsers = parser.add_subparsers(dest="command", required=True)

    report = subparsers.add_parser("report", help="Show every node's last reward claim")
    _add_fetch_arguments(report)
    report.add_argument(
        "--utc-offset",
        type=float,
        help="Hours offset from UTC used for timestamps (defaults to local time)",
    )
    report.add_argument(
        "--json",
        action="store_true",
        help="Emit the report as JSON",
    )

    nodes = subparsers.add_parser("nodes", help="List created nodes and their owners")
    _add_fetch_arguments(nodes)

    return parser.parse_args(list(argv))


def _resolve_timezone(utc_offset: float | None) -> tzinfo | None:
    # None formats each timestamp in the local zone at that moment.
    if utc_offset is None:
        return None
    if not -24 < utc_offset < 24:
        raise ValueError(f"UTC offset out of range: {utc_offset}")
    if utc_offset == 0:
        return UTC
    return timezone(timedelta(hours=utc_offset))


def _validate_fetch_arguments(args: argparse.Namespace) -> None:
    if args.start_block < 0:
        raise ValueError("Start block must be non-negative")
    if args.end_block is not None and args.end_block < args.start_block:
        raise ValueError("End block must not precede start block")
    if args.page_size <= 0:
        raise ValueError("Page size must be positive")
    if args.max_pages is not None and args.max_pages <= 0:
        raise ValueError("Max pages must be positive")


def _fetch_options(args: argparse.Namespace) -> dict[str, int | None]:
    return {
        "start_block": args.start_block,
        "end_block": args.end_block,
        "page_size": args.page_size,
        "max_pages": args.max_pages,
    }


def _run_nodes(args: argparse.Namespace) -> list[str]:
    try:
        node_create_selector = get_node_create_selector()
    except ConfigurationError:
        log.exception("CLI validation error")
        sys.exit(2)

    try:
        registry = list_created_nodes(
            node_create_selector=node_create_selector,
            **_fetch_options(args),
        )
    except Exception:
        log.exception("Fatal error while listing nodes")
        sys.exit(1)
    return render_node_list(registry.nodes)


def _run_report(args: argparse.Namespace) -> list[str]:
    try:
        tz = _resolve_timezone(args.utc_offset)
        selectors = get_method_selectors()
    except (ValueError, ConfigurationError):
        log.exception("CLI validation error")
        sys.exit(2)

    try:
        report = reconcile_node_rewards(selectors=selectors, **_fetch_options(args))
    except Exception:
        log.exception("Fatal error during reconciliation")
        sys.exit(1)

    if args.json:
        return [render_json(report, tz=tz)]
    return render_text(report, tz=tz)


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    configure_logging()
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    try:
        parsed_args = _parse_args(args_list)
        _validate_fetch_arguments(parsed_args)
    except ValueError:
        log.exception("CLI validation error")
        sys.exit(2)

    lines = _run_nodes(parsed_args) if parsed_args.command == "nodes" else _run_report(parsed_args)
    for line in lines:
        print(line)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(0)


def run() -> None:
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
