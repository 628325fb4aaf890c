# ruff: noqa: T201

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace
from pathlib import Path
from signal import SIGINT, signal
from threading import Event
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from traduora_sync.adapters.traduora import build_traduora_client
from traduora_sync.app import compute_changes, push_changes
from traduora_sync.config import ConfigurationError, configure_logging, get_traduora_config
from traduora_sync.domain.diff import ChangeKind, describe
from traduora_sync.domain.reconciliation import Conflict
from traduora_sync.domain.updates import ALL_KINDS, plan_updates

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

    from traduora_sync.domain.diff import Change
    from traduora_sync.domain.reconciliation import ClassifiedChange

log = logging.getLogger(__name__)

_cancel = Event()
_pushing = Event()


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Push changes of a local translation file to Traduora"
    )
    parser.add_argument(
        "--config",
        type=Path,
        help="TOML configuration file (defaults to .traduora.toml when present)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    status = subparsers.add_parser("status", help="List remote changes and their conflicts")
    push = subparsers.add_parser("push", help="Apply the selected changes to Traduora")
    for subparser in (status, push):
        subparser.add_argument(
            "--revision",
            type=str,
            help="git revision of the translation file used as baseline (overrides config)",
        )

    push.add_argument(
        "--only",
        action="append",
        choices=[kind.value for kind in ChangeKind],
        help="Restrict the push to one kind of change (repeatable)",
    )
    push.add_argument(
        "--force",
        action="store_true",
        help="Also push changes that conflict with remote edits made since the baseline",
    )
    push.add_argument(
        "--dry-run",
        action="store_true",
        help="Show the changes that would be pushed without applying them",
    )

    return parser.parse_args(list(argv))


def _format_entry(entry: ClassifiedChange) -> str:
    line = f"{entry.change.kind.value:<8} {describe(entry.change)}"
    classification = entry.classification
    if isinstance(classification, Conflict):
        line += f"\n         conflict ({classification.reason.value}): {classification.detail}"
    return line


def _print_changes(classified: Sequence[ClassifiedChange]) -> None:
    if not classified:
        print("Remote terms are up to date.")
        return
    for entry in classified:
        print(_format_entry(entry))


def _print_plan(plan: Sequence[Change]) -> None:
    if not plan:
        print("Nothing to push.")
        return
    for change in plan:
        print(f"{change.kind.value:<8} {describe(change)}")


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    parsed_args = _parse_args(args_list)
    configure_logging(level=logging.DEBUG if parsed_args.verbose else logging.INFO)

    try:
        config = get_traduora_config(config_file=parsed_args.config)
        if parsed_args.revision:
            config = replace(config, revision=parsed_args.revision)
    except ConfigurationError:
        log.exception("Invalid configuration")
        sys.exit(2)

    try:
        client = build_traduora_client(config)
        classified = compute_changes(config, source=client)

        if parsed_args.command == "status":
            _print_changes(classified)
            return

        kinds = frozenset(ChangeKind(kind) for kind in parsed_args.only or ()) or ALL_KINDS
        if parsed_args.dry_run:
            _print_plan(
                plan_updates(classified, kinds=kinds, include_conflicts=parsed_args.force)
            )
            return

        _pushing.set()
        try:
            report = push_changes(
                classified,
                applier=client,
                kinds=kinds,
                include_conflicts=parsed_args.force,
                cancel=_cancel,
            )
        finally:
            _pushing.clear()
    except Exception:
        log.exception("Fatal error during sync")
        sys.exit(1)

    if report.failures:
        log.error(f"Failed to create/update/delete {len(report.failures)} terms:")
        for failure in report.failures:
            log.error(
                "    Term %r (%s). Reason: %s",
                failure.change.key,
                failure.change.kind.value,
                failure.error,
            )
    if not report.ok:
        sys.exit(1)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Stop pushing after the current update; a second Ctrl+C aborts the push."""
    if not _pushing.is_set():
        log.info("Closed by user (Ctrl+C)")
        sys.exit(0)
    if _cancel.is_set():
        log.error("Push aborted by user (Ctrl+C), remote terms may be partially updated")
        sys.exit(1)
    log.info("Cancelling after the current update (Ctrl+C again to quit)")
    _cancel.set()


def run() -> None:
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
