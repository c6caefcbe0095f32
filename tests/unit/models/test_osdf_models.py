"""Unit tests for OSDF data models."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from osdf.client.models import (
    Node,
    NodeACL,
    SearchPage,
    SearchResults,
    ServerInfo,
    ValidationReport,
)


class TestNode:
    def test_minimal_node_defaults(self):
        node = Node(ns="test", node_type="sample")
        assert node.acl == NodeACL(read=["all"], write=["all"])
        assert node.linkage == {}
        assert node.meta == {}
        assert node.id is None

    def test_to_document_omits_unset_server_fields(self):
        node = Node(ns="test", node_type="sample", linkage={"part_of": ["abc"]})
        doc = node.to_document()
        assert doc == {
            "ns": "test",
            "node_type": "sample",
            "acl": {"read": ["all"], "write": ["all"]},
            "linkage": {"part_of": ["abc"]},
            "meta": {},
        }

    def test_server_document_round_trips_unknown_keys(self):
        node = Node.model_validate(
            {
                "id": "abc123",
                "ver": 2,
                "ns": "test",
                "node_type": "sample",
                "acl": {"read": ["all"], "write": ["all"]},
                "linkage": {},
                "meta": {"name": "x"},
                "hash": "deadbeef",
                "extra_field": 7,
            }
        )
        assert node.ver == 2
        assert node.to_document()["extra_field"] == 7

    def test_ns_required(self):
        with pytest.raises(ValidationError):
            Node(node_type="sample")


class TestSearchPage:
    def test_result_count_derived_when_missing(self):
        page = SearchPage.model_validate({"results": [{"id": "a"}, {"id": "b"}]})
        assert page.result_count == 2
        assert page.search_result_total is None
        assert not page.is_empty

    def test_server_counts_kept(self):
        page = SearchPage.model_validate(
            {"results": [], "result_count": 0, "search_result_total": 40, "page": 3}
        )
        assert page.is_empty
        assert page.search_result_total == 40
        assert page.page == 3

    def test_page_numbers_start_at_one(self):
        with pytest.raises(ValidationError):
            SearchPage(results=[], page=0)


class TestSearchResults:
    def test_from_results_counts(self):
        results = SearchResults.from_results(["a", "b", "c"])
        assert results.result_count == 3
        assert results.search_result_total == 3

    def test_has_no_page_field(self):
        assert "page" not in SearchResults.model_fields


class TestServerInfo:
    def test_parse_info(self):
        info = ServerInfo.model_validate(
            {
                "api_version": "1.0",
                "title": "OSDF",
                "description": "Open Science Data Framework",
                "admin_contact_email1": "admin@example.org",
                "admin_contact_email2": "admin2@example.org",
                "technical_contact1": "tech@example.org",
                "technical_contact2": "tech2@example.org",
                "comment1": "",
                "comment2": "",
            }
        )
        assert info.title == "OSDF"
        assert info.technical_contact2 == "tech2@example.org"

    def test_numeric_version_coerced(self):
        assert ServerInfo(api_version=1.0, title="OSDF").api_version == "1.0"


class TestValidationReport:
    def test_truthiness_follows_validity(self):
        assert ValidationReport(valid=True)
        assert not ValidationReport(valid=False, message="meta is required")
