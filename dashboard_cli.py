#!/usr/bin/env python3
"""Inventory Dashboard CLI - paginated books catalog."""
import argparse
import asyncio
import sys
import logging

from inventory.async_client import AsyncBooksApiClient
from inventory.client import BooksApiClient
from inventory.config import Config
from inventory.dashboard import AsyncInventoryDashboard, InventoryDashboard
from inventory.errors import ConfigError
from inventory.filters import parse_filter
from inventory.models import AvailabilityFilter, DashboardState
from inventory.view import render_counts, render_dashboard, render_json, render_charts

logger = logging.getLogger(__name__)

FILTER_CHOICES = [f.value for f in AvailabilityFilter]


def setup_logging(config: Config):
    """Configure root logging from LOG_LEVEL."""
    logging.basicConfig(
        level=getattr(logging, config.LOG_LEVEL, logging.INFO),
        format='%(asctime)s - %(levelname)s - %(message)s'
    )


def build_client(config: Config) -> BooksApiClient:
    return BooksApiClient(
        config.base_url,
        timeout=config.DEFAULT_TIMEOUT,
        max_retries=config.DEFAULT_MAX_RETRIES,
        base_backoff=config.DEFAULT_BACKOFF
    )


def page_limit(args):
    """None means load every page."""
    return None if args.all else args.pages


def load_sync(args, config: Config) -> DashboardState:
    with build_client(config) as client:
        dashboard = InventoryDashboard(client, args.filter)
        return dashboard.load_all(max_pages=page_limit(args))


async def load_async(args, config: Config) -> DashboardState:
    async with AsyncBooksApiClient(config.base_url, timeout=config.DEFAULT_TIMEOUT) as client:
        dashboard = AsyncInventoryDashboard(client, args.filter)
        try:
            return await dashboard.load_all(max_pages=page_limit(args))
        finally:
            await dashboard.close()


def load_state(args, config: Config) -> DashboardState:
    if args.use_async:
        return asyncio.run(load_async(args, config))
    return load_sync(args, config)


def show_dashboard(args, config: Config):
    """Load pages and print the full dashboard."""
    state = load_state(args, config)

    if args.format == "json":
        print(render_json(state))
    else:
        print("\n" + render_dashboard(state))


def show_summary(args, config: Config):
    """Print counts and charts only."""
    args.filter = AvailabilityFilter.ALL.value
    state = load_state(args, config)

    if args.format == "json":
        print(render_json(state))
        return

    print("\n" + "=" * 50)
    print("INVENTORY COUNT SUMMARY")
    print("=" * 50)
    print(render_counts(state.summary))
    print(f"Total books loaded: {len(state.catalog)}")
    print("=" * 50 + "\n")
    print(render_charts(state.summary))


def handle_command(dashboard: InventoryDashboard, line: str) -> bool:
    """
    Apply one line typed in browse mode.

    Empty line scrolls to the bottom, a filter label switches the filter.
    Returns False when the user quits.
    """
    command = line.strip()

    if command.lower() in ("q", "quit", "exit"):
        return False

    if not command:
        dashboard.scroll_near_bottom()
        return True

    try:
        dashboard.change_filter(parse_filter(command))
    except ValueError as e:
        print(e)
    return True


def browse(args, config: Config):
    """Interactive loop: Enter loads the next page, a filter name filters, q quits."""
    with build_client(config) as client:
        dashboard = InventoryDashboard(client, args.filter)
        dashboard.mount()

        while True:
            print("\n" + render_dashboard(dashboard.state))
            print(f"\n[Enter] next page | {' / '.join(FILTER_CHOICES)} | q to quit")
            try:
                line = input("> ")
            except EOFError:
                break
            if not handle_command(dashboard, line):
                break


def add_load_arguments(parser: argparse.ArgumentParser):
    group = parser.add_mutually_exclusive_group()
    group.add_argument("--pages", type=int, default=1, help="Pages to load (default: 1)")
    group.add_argument("--all", action="store_true", help="Load every page")
    parser.add_argument("--format", choices=["table", "json"], default="table", help="Output format")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Inventory Dashboard - paginated books catalog",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # First two pages, in stock only
  %(prog)s show --pages 2 --filter "In Stock"

  # Counts over the whole catalog, as JSON
  %(prog)s --async summary --all --format json

  # Scroll through the catalog interactively
  %(prog)s browse
        """
    )
    parser.add_argument("--async", dest="use_async", action="store_true", help="Use async client")

    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    # Show command
    show_parser = subparsers.add_parser("show", help="Show the dashboard")
    add_load_arguments(show_parser)
    show_parser.add_argument("--filter", choices=FILTER_CHOICES, default="All", help="Availability filter")

    # Summary command
    summary_parser = subparsers.add_parser("summary", help="Show inventory counts and charts")
    add_load_arguments(summary_parser)

    # Browse command
    browse_parser = subparsers.add_parser("browse", help="Interactive paginated browsing")
    browse_parser.add_argument("--filter", choices=FILTER_CHOICES, default="All", help="Availability filter")

    return parser


def main():
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        sys.exit(1)

    config = Config()
    setup_logging(config)

    try:
        if args.command == "show":
            show_dashboard(args, config)

        elif args.command == "summary":
            show_summary(args, config)

        elif args.command == "browse":
            browse(args, config)

    except ConfigError as e:
        logger.error(f"❌ {e}")
        sys.exit(2)
    except KeyboardInterrupt:
        logger.info("\n⚠️  Interrupted by user")
        sys.exit(0)
    except Exception as e:
        logger.error(f"❌ Error: {e}", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
