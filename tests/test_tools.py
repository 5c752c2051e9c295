"""Tests for the tool catalogue."""

from __future__ import annotations

from docmanifest.artifacts import Tool
from docmanifest.index.tools import (
    TOOL_DEFINITIONS,
    dangling_links,
    default_tools,
    resource_uri,
    schema_uri,
)


class TestDefaultTools:
    """Test default_tools function."""

    def test_one_tool_per_definition(self) -> None:
        tools = default_tools()

        assert len(tools) == len(TOOL_DEFINITIONS)
        assert len({tool.name for tool in tools}) == len(tools)

    def test_uris_use_scheme(self) -> None:
        tools = default_tools("acme")
        create = next(tool for tool in tools if tool.name == "toss_create_fund")

        assert create.schema_uri == "acme://schemas/tools/create-fund.json"
        assert create.related_docs[0] == "acme://docs/protocol/processes/fund-manager/create-fund"

    def test_uri_helpers(self) -> None:
        assert resource_uri("a/b", "toss") == "toss://docs/a/b"
        assert schema_uri("x.json", "toss") == "toss://schemas/tools/x.json"


class TestDanglingLinks:
    """Test dangling_links function."""

    def test_reports_unknown_uris(self) -> None:
        tools = [
            Tool(name="t1", description="d", schema_uri="s", related_docs=["toss://docs/a"]),
            Tool(
                name="t2",
                description="d",
                schema_uri="s",
                related_docs=["toss://docs/a", "toss://docs/gone"],
            ),
        ]

        assert dangling_links(tools, {"toss://docs/a"}) == [("t2", "toss://docs/gone")]

    def test_all_resolved(self) -> None:
        tools = [Tool(name="t", description="d", schema_uri="s", related_docs=["toss://docs/a"])]

        assert dangling_links(tools, {"toss://docs/a", "toss://docs/b"}) == []
