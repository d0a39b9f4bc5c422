"""
MCP Server for Jotbox.

Exposes the note store as tools: list, search, create, update, delete and
category lookups.
"""

import json
import logging

from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import Tool, TextContent

# Import jotbox modules
from jotbox.config import load_config
from jotbox.errors import JotboxError, NotFoundError, ValidationError
from jotbox.logs import configure_logging
from jotbox.models import Note
from jotbox.store import NoteStore
from jotbox.taxonomy import AUTO, category_names

logger = logging.getLogger(__name__)

# Create MCP server
server = Server("jotbox")

# Opened in main(); tests replace it with a store on a temp database
store: NoteStore | None = None


def get_store() -> NoteStore:
    """Return the shared note store, opening it on first use."""
    global store
    if store is None:
        store = NoteStore()
    return store


def notes_json(notes: list[Note]) -> str:
    """Serialize notes for a tool result."""
    return json.dumps([note.model_dump(mode="json") for note in notes], indent=2)


def note_json(note: Note) -> str:
    """Serialize one note for a tool result."""
    return json.dumps(note.model_dump(mode="json"), indent=2)


CATEGORY_PROPERTY = {
    "type": "string",
    "description": f"Category name, or '{AUTO}' (default) to detect it from the text",
    "default": AUTO,
}


@server.list_tools()
async def list_tools() -> list[Tool]:
    """List available tools."""
    return [
        Tool(
            name="jotbox_list",
            description="List all notes, newest first. Optionally only one category.",
            inputSchema={
                "type": "object",
                "properties": {
                    "category": {
                        "type": "string",
                        "description": "Only notes in this category (optional)",
                    },
                },
            },
        ),
        Tool(
            name="jotbox_search",
            description="Find notes whose title or content contains a keyword (case-insensitive).",
            inputSchema={
                "type": "object",
                "properties": {
                    "keyword": {
                        "type": "string",
                        "description": "Text to look for. Empty returns every note.",
                    },
                },
                "required": ["keyword"],
            },
        ),
        Tool(
            name="jotbox_create",
            description="Create a note. The category is detected from the text unless given.",
            inputSchema={
                "type": "object",
                "properties": {
                    "title": {
                        "type": "string",
                        "description": "Note title",
                    },
                    "content": {
                        "type": "string",
                        "description": "Note body",
                    },
                    "category": CATEGORY_PROPERTY,
                },
                "required": ["title", "content"],
            },
        ),
        Tool(
            name="jotbox_update",
            description="Replace a note's title, content and category.",
            inputSchema={
                "type": "object",
                "properties": {
                    "note_id": {
                        "type": "string",
                        "description": "The ID of the note to update",
                    },
                    "title": {
                        "type": "string",
                        "description": "New title",
                    },
                    "content": {
                        "type": "string",
                        "description": "New body",
                    },
                    "category": CATEGORY_PROPERTY,
                },
                "required": ["note_id", "title", "content"],
            },
        ),
        Tool(
            name="jotbox_delete",
            description="Delete a note permanently.",
            inputSchema={
                "type": "object",
                "properties": {
                    "note_id": {
                        "type": "string",
                        "description": "The ID of the note to delete",
                    },
                },
                "required": ["note_id"],
            },
        ),
        Tool(
            name="jotbox_categories",
            description="List every category a note can be filed under.",
            inputSchema={
                "type": "object",
                "properties": {},
            },
        ),
        Tool(
            name="jotbox_categories_in_use",
            description="List the categories that currently have notes.",
            inputSchema={
                "type": "object",
                "properties": {},
            },
        ),
    ]


@server.call_tool()
async def call_tool(name: str, arguments: dict) -> list[TextContent]:
    """Handle tool calls."""
    try:
        if name == "jotbox_list":
            return await tool_list(arguments)
        elif name == "jotbox_search":
            return await tool_search(arguments)
        elif name == "jotbox_create":
            return await tool_create(arguments)
        elif name == "jotbox_update":
            return await tool_update(arguments)
        elif name == "jotbox_delete":
            return await tool_delete(arguments)
        elif name == "jotbox_categories":
            return await tool_categories(arguments)
        elif name == "jotbox_categories_in_use":
            return await tool_categories_in_use(arguments)
        else:
            return [TextContent(type="text", text=f"Unknown tool: {name}")]
    except NotFoundError as e:
        return [TextContent(type="text", text=f"Not found: {e.note_id}")]
    except ValidationError as e:
        return [TextContent(type="text", text=f"Error: {e}")]
    except JotboxError as e:
        logger.exception("Tool %s failed", name)
        return [TextContent(type="text", text=f"Error: {e}")]


async def tool_list(args: dict) -> list[TextContent]:
    """List notes."""
    category = args.get("category") or None
    notes = get_store().list_all(category=category)
    return [TextContent(type="text", text=notes_json(notes))]


async def tool_search(args: dict) -> list[TextContent]:
    """Search notes."""
    keyword = args.get("keyword", "")
    notes = get_store().search(keyword)
    return [TextContent(type="text", text=notes_json(notes))]


async def tool_create(args: dict) -> list[TextContent]:
    """Create a note."""
    note = get_store().create(
        args.get("title", ""),
        args.get("content", ""),
        args.get("category"),
    )
    return [TextContent(type="text", text=note_json(note))]


async def tool_update(args: dict) -> list[TextContent]:
    """Update a note."""
    note_id = args.get("note_id", "").strip()
    if not note_id:
        return [TextContent(type="text", text="Error: No note_id provided")]

    note = get_store().update(
        note_id,
        args.get("title", ""),
        args.get("content", ""),
        args.get("category"),
    )
    return [TextContent(type="text", text=note_json(note))]


async def tool_delete(args: dict) -> list[TextContent]:
    """Delete a note."""
    note_id = args.get("note_id", "").strip()
    if not note_id:
        return [TextContent(type="text", text="Error: No note_id provided")]

    get_store().delete(note_id)
    return [TextContent(type="text", text=f"Deleted: {note_id}")]


async def tool_categories(args: dict) -> list[TextContent]:
    """Every category name."""
    return [TextContent(type="text", text=json.dumps(category_names()))]


async def tool_categories_in_use(args: dict) -> list[TextContent]:
    """Categories that have notes."""
    categories = get_store().list_categories_in_use()
    return [TextContent(type="text", text=json.dumps(categories))]


async def main():
    """Run the MCP server. Fails before serving if the database cannot be opened."""
    global store
    config = load_config()
    configure_logging(config)
    store = NoteStore(config=config)

    async with stdio_server() as (read_stream, write_stream):
        await server.run(read_stream, write_stream, server.create_initialization_options())


def run() -> None:
    """Console script entry point."""
    import asyncio
    asyncio.run(main())


if __name__ == "__main__":
    run()
