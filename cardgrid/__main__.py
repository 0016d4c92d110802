"""Resolve queries into one category of a card grid from the command line."""

import argparse
import asyncio
import logging
import sys
from concurrent.futures import ThreadPoolExecutor

from .clients import CardSearchClient
from .config import CARD_SEARCH_URL, LOG_LEVEL, LOOKUP_MAX_RETRIES, LOOKUP_TIMEOUT, LOOKUP_WORKERS
from .models import GridLayout, SlotSettings
from .services import GridController, make_slot_factory


async def run(args: argparse.Namespace) -> int:
    with ThreadPoolExecutor(max_workers=args.workers) as executor:
        return await resolve_category(args, executor)


async def resolve_category(args: argparse.Namespace, executor: ThreadPoolExecutor) -> int:
    client = CardSearchClient(args.url, timeout=args.timeout, max_retries=LOOKUP_MAX_RETRIES)
    settings = SlotSettings(lookup_timeout=args.timeout)
    grid = GridController(make_slot_factory(client, settings, executor=executor), GridLayout())

    created = grid.set_category_count(args.categories)
    for category in created:
        category.mount()

    try:
        category = grid.category(args.category)
    except KeyError:
        print(f"Error: category {args.category} not in grid of {len(grid)}", flush=True)
        return 1

    queries = args.queries[: len(category.slots)]
    if len(queries) < len(args.queries):
        print(f"Only {len(category.slots)} slots per category, ignoring the rest", flush=True)

    for slot, query in zip(category.slots, queries):
        slot.submit_query(query)
    await grid.wait()

    print("\n=== RESULTS ===")
    for i, (slot, query) in enumerate(zip(category.slots, queries)):
        print(f"[{i:2}] {slot.current_state().value:<10} {query!r} -> {slot.current_image()}")

    grid.close()
    return 0


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(prog="cardgrid", description=__doc__)
    ap.add_argument("queries", nargs="*", help="One search query per slot")
    ap.add_argument("--categories", default="1", help="Number of categories in the grid")
    ap.add_argument("--category", type=int, default=0, help="Category receiving the queries")
    ap.add_argument("--url", default=CARD_SEARCH_URL)
    ap.add_argument("--timeout", type=float, default=LOOKUP_TIMEOUT)
    ap.add_argument("--workers", type=int, default=LOOKUP_WORKERS, help="Threads running lookups")
    ap.add_argument("--log-level", default=LOG_LEVEL)
    args = ap.parse_args(argv)

    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    return asyncio.run(run(args))


if __name__ == "__main__":
    sys.exit(main())
