#!/usr/bin/env python3
from __future__ import annotations

import argparse
import asyncio

from osdf.client import ClientSettings, OSDFClient


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Show OSDF server information")
    p.add_argument("--host", default=None)
    p.add_argument("--port", type=int, default=None)
    p.add_argument("--auth", default=None, help="username:password")
    p.add_argument("--ssl", action="store_true")
    return p.parse_args()


async def main() -> None:
    args = parse_args()
    settings = ClientSettings.from_env()
    overrides = {"host": args.host, "port": args.port, "auth": args.auth, "ssl": args.ssl or None}

    async with OSDFClient(settings, **overrides) as osdf:
        info = await osdf.info()
        namespaces = await osdf.get_namespaces()

    print("=" * 60)
    print(f"Server      : {osdf.base_url}")
    print(f"Title       : {info.title}")
    print(f"API version : {info.api_version}")
    print(f"Description : {info.description or '-'}")
    print("=" * 60)
    for label, value in (
        ("Admin", info.admin_contact_email1),
        ("Admin", info.admin_contact_email2),
        ("Technical", info.technical_contact1),
        ("Technical", info.technical_contact2),
    ):
        if value:
            print(f"{label:11} : {value}")
    print("-" * 60)
    print(f"Namespaces  : {', '.join(sorted(namespaces)) if namespaces else '-'}")


if __name__ == "__main__":
    asyncio.run(main())
