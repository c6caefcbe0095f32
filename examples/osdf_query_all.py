#!/usr/bin/env python3
from __future__ import annotations

import argparse
import asyncio
import json
import logging

from osdf.client import OSDFClient


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Fetch every result of an OSDF search")
    p.add_argument("namespace", nargs="?", default="test")
    p.add_argument(
        "query",
        nargs="?",
        default='{"query": {"match_all": {}}}',
        help="ElasticSearch JSON query, or an OQL string with --oql",
    )
    p.add_argument("--oql", action="store_true", help="Treat query as OQL")
    p.add_argument("--show", type=int, default=5, help="Number of results to print")
    p.add_argument("-v", "--verbose", action="store_true", help="Log each page fetched")
    return p.parse_args()


async def main() -> None:
    args = parse_args()
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    async with OSDFClient.from_env() as osdf:
        if args.oql:
            found = await osdf.oql_query_all(args.query, args.namespace)
        else:
            found = await osdf.query_all(json.loads(args.query), args.namespace)

    print(f"{found.result_count} results in namespace '{args.namespace}'")
    print("-" * 60)
    for result in found.results[: args.show]:
        node_id = result.get("id") if isinstance(result, dict) else result
        node_type = result.get("node_type", "-") if isinstance(result, dict) else "-"
        print(f"{str(node_id):36} | {node_type}")


if __name__ == "__main__":
    asyncio.run(main())
