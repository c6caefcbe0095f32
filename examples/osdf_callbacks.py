#!/usr/bin/env python3
"""Error-first callbacks, with and without a running event loop."""

from __future__ import annotations

import asyncio

from osdf.client import OSDFClient


def on_info(err, info) -> None:
    if err:
        print(f"info failed: {err}")
    else:
        print(f"connected to {info.title} (api {info.api_version})")


def blocking_style() -> None:
    # No event loop here: the call returns once on_info has run.
    OSDFClient.from_env().info(callback=on_info)


async def loop_style() -> None:
    async with OSDFClient.from_env() as osdf:
        def on_missing(err, node) -> None:
            print(f"get_node('does-not-exist') -> {type(err).__name__}: {err}")

        # In a running loop each call returns the scheduled task.
        tasks = [
            osdf.info(callback=on_info),
            osdf.get_node("does-not-exist", callback=on_missing),
        ]
        await asyncio.gather(*tasks, return_exceptions=True)


if __name__ == "__main__":
    blocking_style()
    asyncio.run(loop_style())
