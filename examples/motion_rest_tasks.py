#!/usr/bin/env python3
from __future__ import annotations

import argparse
import asyncio
import logging

from taskbridge.motion import MotionRESTConnector, PaginationLimits


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="List Motion tasks via REST (needs MOTION_API_KEY)")
    p.add_argument("workspace_id", nargs="?", default=None)
    p.add_argument("--max-pages", type=int, default=3)
    p.add_argument("--max-items", type=int, default=100)
    p.add_argument("--all-statuses", action="store_true")
    p.add_argument("-v", "--verbose", action="store_true")
    return p.parse_args()


async def main() -> None:
    args = parse_args()
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    async with MotionRESTConnector.from_env() as motion:
        result = await motion.list_tasks(
            args.workspace_id,
            include_all_statuses=args.all_statuses,
            limits=PaginationLimits(max_pages=args.max_pages, max_items=args.max_items),
        )
    print("=" * 72)
    print(f"Tasks      : {result.total_items}")
    print(f"Pages      : {result.pages_fetched}")
    print(f"Truncated  : {result.truncated} ({result.truncation_reason.value})")
    print("=" * 72)
    print(f"{'Name':40} | {'Status':15} | {'Duration':>8} | Labels")
    print("-" * 72)
    for task in result.items:
        status = task.get("status")
        status_name = status.name if status is not None and status.name else "-"
        duration = task.get("duration")
        labels = ", ".join(task.get("labels", []))
        print(f"{task.get('name', '')[:40]:40} | {status_name[:15]:15} | {str(duration):>8} | {labels}")
    if result.truncated:
        print(f"... more available from cursor {result.next_cursor}")


if __name__ == "__main__":
    asyncio.run(main())
