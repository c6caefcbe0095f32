"""Integration tests against a running OSDF server."""

import asyncio
import os

import pytest

from osdf.client import NotFoundError, OSDFClient, SearchResults

pytestmark = pytest.mark.skipif(
    os.environ.get("RUN_OSDF_SERVER_TESTS") != "1",
    reason="Requires a live OSDF server. Set RUN_OSDF_SERVER_TESTS=1 to run",
)

NAMESPACE = "test"

TEST_NODE = {
    "ns": NAMESPACE,
    "acl": {"read": ["all"], "write": ["all"]},
    "linkage": {},
    "node_type": "unregistered",
    "meta": {},
}

INFO_KEYS = {
    "api_version",
    "title",
    "description",
    "admin_contact_email1",
    "admin_contact_email2",
    "technical_contact1",
    "technical_contact2",
    "comment1",
    "comment2",
}


class TestServerInfo:
    @pytest.mark.asyncio
    async def test_info(self, osdf_settings):
        async with OSDFClient(osdf_settings) as osdf:
            info = await osdf.info()

        assert INFO_KEYS <= set(info.model_dump())
        assert info.api_version


class TestNodeLifecycle:
    @pytest.mark.asyncio
    async def test_insert_get_edit_delete(self, osdf_settings):
        async with OSDFClient(osdf_settings) as osdf:
            node_id = await osdf.insert_node(TEST_NODE)
            assert isinstance(node_id, str) and node_id

            try:
                node = await osdf.get_node(node_id)
                assert node.id == node_id
                assert node.ver == 1
                assert node.hash

                updated = {**TEST_NODE, "meta": {"updated": True}, "ver": 1}
                await osdf.edit_node(node_id, updated)

                first = await osdf.get_node_by_version(node_id, 1)
                assert first.ver == 1

                latest = await osdf.get_node(node_id)
                assert latest.ver == 2
                assert latest.meta == {"updated": True}

                in_links = await osdf.get_node_in_links(node_id)
                out_links = await osdf.get_node_out_links(node_id)
                assert in_links.result_count == 0
                assert out_links.result_count == 0
            finally:
                await osdf.delete_node(node_id)

            with pytest.raises(NotFoundError):
                await osdf.get_node(node_id)

    @pytest.mark.asyncio
    async def test_validate_node(self, osdf_settings):
        invalid = {k: v for k, v in TEST_NODE.items() if k != "node_type"}

        async with OSDFClient(osdf_settings) as osdf:
            good = await osdf.validate_node(TEST_NODE)
            bad = await osdf.validate_node(invalid)

        assert good.valid
        assert not bad.valid
        assert bad.message


class TestNamespaces:
    @pytest.mark.asyncio
    async def test_namespace_and_schema_listing(self, osdf_settings):
        async with OSDFClient(osdf_settings) as osdf:
            namespaces = await osdf.get_namespaces()
            namespace = await osdf.get_namespace(NAMESPACE)
            schemas = await osdf.get_schemas(NAMESPACE)
            aux_schemas = await osdf.get_aux_schemas(NAMESPACE)

        assert namespaces
        assert namespace
        assert isinstance(schemas, dict)
        assert isinstance(aux_schemas, dict)


class TestSearch:
    @pytest.mark.asyncio
    async def test_query_all_starts_with_first_page(self, osdf_settings):
        es_query = {"query": {"match": {"node_type": "unregistered"}}}

        async with OSDFClient(osdf_settings) as osdf:
            everything = await osdf.query_all(es_query, NAMESPACE)
            first = await osdf.query_page(es_query, NAMESPACE, 1)

        assert isinstance(everything, SearchResults)
        assert everything.result_count == len(everything.results)
        assert everything.results[: len(first.results)] == first.results

    @pytest.mark.asyncio
    async def test_oql_query_all(self, osdf_settings):
        async with OSDFClient(osdf_settings) as osdf:
            everything = await osdf.oql_query_all('"unregistered"[node_type]', NAMESPACE)

        assert everything.result_count == everything.search_result_total

    @pytest.mark.asyncio
    async def test_concurrent_query_all_independent(self, osdf_settings):
        async with OSDFClient(osdf_settings) as osdf:
            es_results, oql_results = await asyncio.gather(
                osdf.query_all({"query": {"match_all": {}}}, NAMESPACE),
                osdf.oql_query_all('"unregistered"[node_type]', NAMESPACE),
            )

        assert es_results.result_count == len(es_results.results)
        assert oql_results.result_count == len(oql_results.results)


class TestCallbacks:
    def test_info_with_callback_blocks_without_loop(self, osdf_settings):
        received = []

        OSDFClient(osdf_settings).info(callback=lambda err, info: received.append((err, info)))

        assert len(received) == 1
        err, info = received[0]
        assert err is None
        assert info.title
