#!/usr/bin/env python3
"""Verification script for an OSDF server and osdf-client.

Runs every client operation against a live server and prints a report.
Write operations create a throwaway node (and, with --schemas, throwaway
schemas) and remove them again.

Usage:
    # Read-only checks against the server in OSDF_HOST/OSDF_PORT
    python scripts/verify_server.py

    # Include node and schema write checks
    python scripts/verify_server.py --writes --schemas

    # Save report as JSON
    python scripts/verify_server.py --output report.json
"""

import argparse
import asyncio
import json
import time
from collections.abc import Awaitable, Callable
from datetime import datetime
from pathlib import Path
from typing import Any

from osdf.client import ClientSettings, OSDFClient

SAMPLE_NODE = {
    "acl": {"read": ["all"], "write": ["all"]},
    "linkage": {},
    "node_type": "unregistered",
    "meta": {},
}


class VerificationResult:
    """Result of a single verification check."""

    def __init__(self, check_name: str):
        self.check_name = check_name
        self.success = False
        self.error: str | None = None
        self.duration_ms: float = 0.0
        self.data_count: int = 0

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "check_name": self.check_name,
            "success": self.success,
            "error": self.error,
            "duration_ms": self.duration_ms,
            "data_count": self.data_count,
        }


class ServerVerifier:
    """Runs client operations against one OSDF server."""

    def __init__(self, settings: ClientSettings, namespace: str, verbose: bool = True):
        self.settings = settings
        self.namespace = namespace
        self.verbose = verbose
        self.results: list[VerificationResult] = []
        self.osdf: OSDFClient | None = None

    def log(self, message: str):
        if self.verbose:
            print(f"[VERIFY] {message}")

    async def __aenter__(self):
        self.osdf = OSDFClient(self.settings)
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        if self.osdf:
            await self.osdf.close()

    async def check(
        self, check_name: str, operation: Callable[[], Awaitable[int]]
    ) -> VerificationResult:
        """Run ``operation``, which returns the number of items it saw."""
        result = VerificationResult(check_name)
        start = time.perf_counter()
        try:
            result.data_count = await operation()
            result.success = True
        except Exception as e:
            result.error = f"{type(e).__name__}: {e}"
        finally:
            result.duration_ms = (time.perf_counter() - start) * 1000

        self.log(f"{'ok  ' if result.success else 'FAIL'} {check_name}")
        self.results.append(result)
        return result

    async def verify_reads(self):
        ns = self.namespace

        async def info():
            await self.osdf.info()
            return 1

        async def namespaces():
            return len(await self.osdf.get_namespaces())

        async def namespace():
            await self.osdf.get_namespace(ns)
            return 1

        async def schemas():
            return len(await self.osdf.get_schemas(ns))

        async def aux_schemas():
            return len(await self.osdf.get_aux_schemas(ns))

        await self.check("INFO", info)
        await self.check("NAMESPACES", namespaces)
        await self.check("NAMESPACE", namespace)
        await self.check("SCHEMAS", schemas)
        await self.check("AUX_SCHEMAS", aux_schemas)

    async def verify_search(self):
        ns = self.namespace
        es_query = {"query": {"match_all": {}}}
        oql = '"unregistered"[node_type]'

        async def query():
            return (await self.osdf.query(es_query, ns)).result_count

        async def query_all():
            found = await self.osdf.query_all(es_query, ns)
            if found.result_count != len(found.results):
                raise ValueError("result_count does not match results")
            return found.result_count

        async def oql_query():
            return (await self.osdf.oql_query(oql, ns)).result_count

        async def oql_query_all():
            return (await self.osdf.oql_query_all(oql, ns)).result_count

        await self.check("QUERY", query)
        await self.check("QUERY_ALL", query_all)
        await self.check("OQL_QUERY", oql_query)
        await self.check("OQL_QUERY_ALL", oql_query_all)

    async def verify_node_writes(self):
        node = {"ns": self.namespace, **SAMPLE_NODE}
        node_id: str | None = None

        async def validate():
            report = await self.osdf.validate_node(node)
            if not report.valid:
                raise ValueError(report.message)
            return 1

        async def insert():
            nonlocal node_id
            node_id = await self.osdf.insert_node(node)
            return 1

        async def read_back():
            fetched = await self.osdf.get_node(node_id)
            await self.osdf.edit_node(node_id, {**node, "ver": fetched.ver, "meta": {"v": 2}})
            await self.osdf.get_node_by_version(node_id, fetched.ver)
            links = await self.osdf.get_node_out_links(node_id)
            return links.result_count

        async def delete():
            await self.osdf.delete_node(node_id)
            return 1

        await self.check("NODE_VALIDATE", validate)
        result = await self.check("NODE_INSERT", insert)
        if result.success:
            await self.check("NODE_READ_EDIT", read_back)
            await self.check("NODE_DELETE", delete)

    async def verify_schema_writes(self):
        ns = self.namespace
        name = f"verify_{int(time.time())}"
        schema = {"type": "object"}

        async def schema_cycle():
            await self.osdf.insert_schema(ns, name, schema)
            await self.osdf.edit_schema(ns, name, {**schema, "required": []})
            await self.osdf.get_schema(ns, name)
            await self.osdf.delete_schema(ns, name)
            return 1

        async def aux_schema_cycle():
            await self.osdf.insert_aux_schema(ns, name, {"type": "string"})
            await self.osdf.edit_aux_schema(ns, name, {"type": "string", "minLength": 1})
            await self.osdf.get_aux_schema(ns, name)
            await self.osdf.delete_aux_schema(ns, name)
            return 1

        await self.check("SCHEMA_CYCLE", schema_cycle)
        await self.check("AUX_SCHEMA_CYCLE", aux_schema_cycle)

    def generate_report(self) -> dict[str, Any]:
        total = len(self.results)
        successful = sum(1 for r in self.results if r.success)
        return {
            "timestamp": datetime.now().isoformat(),
            "server": self.settings.base_url,
            "namespace": self.namespace,
            "summary": {
                "total_checks": total,
                "successful": successful,
                "failed": total - successful,
                "success_rate": f"{(successful / total * 100):.1f}%" if total > 0 else "0%",
            },
            "results": [r.to_dict() for r in self.results],
        }

    def print_report(self):
        report = self.generate_report()
        summary = report["summary"]

        print("\n" + "=" * 60)
        print(f"VERIFICATION REPORT ({report['server']})")
        print("=" * 60)
        print(f"Total Checks: {summary['total_checks']}")
        print(f"Successful: {summary['successful']}")
        print(f"Failed: {summary['failed']}")
        print(f"Success Rate: {summary['success_rate']}")

        failures = [r for r in self.results if not r.success]
        if failures:
            print("\n" + "-" * 60)
            print("FAILURES:")
            for result in failures:
                print(f"  {result.check_name}: {result.error}")

        print("\n" + "=" * 60)


async def main():
    parser = argparse.ArgumentParser(description="Verify an OSDF server with osdf-client")
    parser.add_argument("--namespace", default="test", help="Namespace to exercise")
    parser.add_argument("--auth", help="username:password (defaults to OSDF_AUTH)")
    parser.add_argument("--writes", action="store_true", help="Insert, edit and delete a node")
    parser.add_argument("--schemas", action="store_true", help="Insert and delete schemas")
    parser.add_argument("--output", type=str, help="Save report to JSON file")
    parser.add_argument("--quiet", action="store_true", help="Reduce output verbosity")
    args = parser.parse_args()

    settings = ClientSettings.from_env()
    if args.auth:
        settings = ClientSettings.from_mapping({**settings.model_dump(), "auth": args.auth})

    async with ServerVerifier(settings, args.namespace, verbose=not args.quiet) as verifier:
        await verifier.verify_reads()
        await verifier.verify_search()
        if args.writes:
            await verifier.verify_node_writes()
        if args.schemas:
            await verifier.verify_schema_writes()

        verifier.print_report()

        if args.output:
            Path(args.output).write_text(json.dumps(verifier.generate_report(), indent=2))
            print(f"\nReport saved to {args.output}")


if __name__ == "__main__":
    asyncio.run(main())
