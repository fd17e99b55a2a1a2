"""Command line entry point: sync a JSON data file to Brick Owl wish lists."""

from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import Optional, Sequence

from bowishlist.cache import CacheStore
from bowishlist.config import ClientConfig, RunConfig
from bowishlist.errors import BOWishlistError
from bowishlist.local import load_desired_lists
from bowishlist.manager import WishlistManager
from bowishlist.plan import ReconcilePlan

logger = logging.getLogger(__name__)

API_KEY_ENV: str = "BRICKOWL_API_KEY"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bowishlist",
        description="Create Brick Owl wish lists from a JSON data file.",
    )
    parser.add_argument(
        "--apikey",
        default=os.environ.get(API_KEY_ENV, ""),
        help=f"api key registered on Brick Owl (default: ${API_KEY_ENV}).",
    )
    parser.add_argument("--datafile", default="", help="json file used for wishlists.")
    parser.add_argument(
        "--purgelists",
        action="store_true",
        help="Purge existing lists that aren't present in the data file.",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable verbose logging output.")
    parser.add_argument(
        "--cache-dir",
        default=".",
        help="Directory holding the color and part id cache files.",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Print the list changes that would be made, without making them.",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.apikey or not args.datafile:
        parser.print_help(sys.stderr)
        return 1

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    client_config = ClientConfig(api_key=args.apikey, verbose=args.verbose)
    run_config = RunConfig(
        data_file=args.datafile,
        purge_lists=args.purgelists,
        dry_run=args.dry_run,
        cache_dir=args.cache_dir,
    )

    try:
        result = run(client_config, run_config)
    except BOWishlistError as exc:
        logger.error("%s %s", exc, exc.details or "")
        return 1

    if isinstance(result, ReconcilePlan):
        for op in result.operations:
            print(op.describe())
    return 0


def run(client_config: ClientConfig, run_config: RunConfig):
    """Load the data file and reconcile. Returns a ReconcilePlan on dry runs."""
    desired_lists = load_desired_lists(run_config.data_file)
    manager = WishlistManager(
        client_config,
        CacheStore(run_config.cache_dir),
        boids_cache_name=run_config.boids_cache_name,
        colors_cache_name=run_config.colors_cache_name,
    )
    try:
        return manager.reconcile(
            desired_lists,
            purge=run_config.purge_lists,
            dry_run=run_config.dry_run,
        )
    finally:
        manager.close()
