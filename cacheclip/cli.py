"""
CacheClip command line entry point
"""
import argparse
import logging
import signal
import sys
import threading
from pathlib import Path
from typing import List, Optional

from cacheclip.config import AppPaths
from cacheclip.core.di_container import AppContainer
from cacheclip.services import ClipboardError, EntryNotFoundError, StorageError

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_NOT_FOUND = 1
EXIT_ENVIRONMENT = 2


def non_negative_int(value: str) -> int:
    count = int(value)
    if count < 0:
        raise argparse.ArgumentTypeError(f"{value} is not a non-negative integer")
    return count


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="cacheclip", description="A clipboard history manager")
    parser.add_argument("--config", type=Path, help="Path to settings.yml")
    parser.add_argument("--data-dir", type=Path, help="Directory holding history.json")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable informational logging")

    subparsers = parser.add_subparsers(dest="command")

    list_parser = subparsers.add_parser("list", help="List recent clipboard items")
    list_parser.add_argument("-c", "--count", type=non_negative_int, help="Number of items to show")

    search_parser = subparsers.add_parser("search", help="Search clipboard history")
    search_parser.add_argument("query", help="Text to search for")

    restore_parser = subparsers.add_parser("restore", help="Restore a clipboard item")
    restore_parser.add_argument("index", type=int, help="Item index to restore")

    subparsers.add_parser("clear", help="Clear clipboard history")
    subparsers.add_parser("daemon", help="Start monitoring the clipboard in the background")

    return parser


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )


def cmd_list(container: AppContainer, count: Optional[int]) -> int:
    service = container.history_service
    if service.entry_count() == 0:
        print("Clipboard history is empty.")
        return EXIT_OK

    print("Recent clipboard items:")
    for line in service.list_entries(count):
        print(line)
    return EXIT_OK


def cmd_search(container: AppContainer, query: str) -> int:
    lines = container.history_service.search_entries(query)
    if not lines:
        print("No matching items found.")
        return EXIT_OK

    print(f"Search results for '{query}':")
    for line in lines:
        print(line)
    return EXIT_OK


def cmd_restore(container: AppContainer, index: int) -> int:
    try:
        container.history_service.restore_entry(index)
    except EntryNotFoundError as e:
        print(str(e), file=sys.stderr)
        return EXIT_NOT_FOUND

    print(f"Restored item [{index}] to clipboard")
    return EXIT_OK


def cmd_clear(container: AppContainer) -> int:
    container.history_service.clear_history()
    print("Clipboard history cleared.")
    return EXIT_OK


def cmd_daemon(container: AppContainer) -> int:
    container.clipboard_service.open()
    stop_event = threading.Event()

    def signal_handler(signum, frame):
        logger.info(f"Received signal {signum}, shutting down...")
        stop_event.set()

    signal.signal(signal.SIGTERM, signal_handler)
    signal.signal(signal.SIGINT, signal_handler)

    print("CacheClip daemon started. Press Ctrl+C to stop.")
    container.history_service.run_daemon(stop_event)
    return EXIT_OK


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    if args.command is None:
        print("No command specified. Use --help for more information.")
        return EXIT_OK

    paths = AppPaths.from_overrides(data_dir=args.data_dir, config_path=args.config)
    container = AppContainer.create(paths=paths)

    try:
        if args.command == "list":
            return cmd_list(container, args.count)
        if args.command == "search":
            return cmd_search(container, args.query)
        if args.command == "restore":
            return cmd_restore(container, args.index)
        if args.command == "clear":
            return cmd_clear(container)
        if args.command == "daemon":
            return cmd_daemon(container)
    except (StorageError, ClipboardError) as e:
        logger.error(str(e))
        return EXIT_ENVIRONMENT

    parser.error(f"unknown command {args.command}")
