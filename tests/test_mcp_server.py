"""
Tests for the jotbox MCP tool server.
"""

import json

import pytest


@pytest.fixture
def patched_store(store, monkeypatch):
    """Point the server's shared store at the temp database."""
    from jotbox_mcp import server
    monkeypatch.setattr(server, "store", store)
    return store


def payload(result):
    """Decode the JSON text of a single tool result."""
    assert len(result) == 1
    return json.loads(result[0].text)


class TestListTools:
    """Tests for tool registration."""

    async def test_tool_names(self):
        from jotbox_mcp.server import list_tools

        names = [tool.name for tool in await list_tools()]
        assert names == [
            "jotbox_list",
            "jotbox_search",
            "jotbox_create",
            "jotbox_update",
            "jotbox_delete",
            "jotbox_categories",
            "jotbox_categories_in_use",
        ]

    async def test_create_requires_title_and_content(self):
        from jotbox_mcp.server import list_tools

        tools = {tool.name: tool for tool in await list_tools()}
        assert tools["jotbox_create"].inputSchema["required"] == ["title", "content"]


class TestNoteTools:
    """Tests for the note tools through call_tool()."""

    async def test_create_auto(self, patched_store):
        from jotbox_mcp.server import call_tool

        note = payload(await call_tool("jotbox_create", {
            "title": "Trip to the mountains",
            "content": "Booking flights and hotel for the hiking adventure",
            "category": "Auto",
        }))

        assert note["category"] == "Travel"
        assert note["created_at"] == note["updated_at"]
        assert patched_store.get(note["id"]).title == "Trip to the mountains"

    async def test_create_validation_error(self, patched_store):
        from jotbox_mcp.server import call_tool

        result = await call_tool("jotbox_create", {"title": "  ", "content": "x"})
        assert result[0].text == "Error: Title is required"
        assert patched_store.list_all() == []

    async def test_list_and_filter(self, patched_store, sample_notes):
        from jotbox_mcp.server import call_tool

        business, travel, general = sample_notes
        all_notes = payload(await call_tool("jotbox_list", {}))
        travel_notes = payload(await call_tool("jotbox_list", {"category": "Travel"}))

        assert [n["id"] for n in all_notes] == [general.id, travel.id, business.id]
        assert [n["id"] for n in travel_notes] == [travel.id]

    async def test_search(self, patched_store, sample_notes):
        from jotbox_mcp.server import call_tool

        business, travel, general = sample_notes
        found = payload(await call_tool("jotbox_search", {"keyword": "REVENUE"}))
        everything = payload(await call_tool("jotbox_search", {"keyword": ""}))

        assert [n["id"] for n in found] == [business.id]
        assert len(everything) == 3

    async def test_update(self, patched_store, sample_notes):
        from jotbox_mcp.server import call_tool

        business, _, _ = sample_notes
        note = payload(await call_tool("jotbox_update", {
            "note_id": business.id,
            "title": "Gym",
            "content": "workout and protein",
        }))

        assert note["id"] == business.id
        assert note["category"] == "Health"
        assert note["updated_at"] > note["created_at"]

    async def test_update_not_found(self, patched_store):
        from jotbox_mcp.server import call_tool

        result = await call_tool("jotbox_update", {
            "note_id": "nope", "title": "T", "content": "C",
        })
        assert result[0].text == "Not found: nope"

    async def test_delete(self, patched_store, sample_notes):
        from jotbox_mcp.server import call_tool

        _, travel, _ = sample_notes
        result = await call_tool("jotbox_delete", {"note_id": travel.id})
        again = await call_tool("jotbox_delete", {"note_id": travel.id})

        assert result[0].text == f"Deleted: {travel.id}"
        assert again[0].text == f"Not found: {travel.id}"

    async def test_missing_note_id(self, patched_store):
        from jotbox_mcp.server import call_tool

        result = await call_tool("jotbox_delete", {})
        assert result[0].text == "Error: No note_id provided"

    async def test_unknown_tool(self, patched_store):
        from jotbox_mcp.server import call_tool

        result = await call_tool("jotbox_nope", {})
        assert result[0].text == "Unknown tool: jotbox_nope"


class TestCategoryTools:
    """Tests for category lookups."""

    async def test_all_categories(self, patched_store):
        from jotbox_mcp.server import call_tool

        categories = payload(await call_tool("jotbox_categories", {}))
        assert categories[0] == "Educational"
        assert categories[-1] == "General"
        assert len(categories) == 8

    async def test_categories_in_use(self, patched_store, sample_notes):
        from jotbox_mcp.server import call_tool

        categories = payload(await call_tool("jotbox_categories_in_use", {}))
        assert categories == ["Business", "General", "Travel"]
