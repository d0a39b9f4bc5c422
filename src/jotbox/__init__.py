"""
Jotbox: personal notes that file themselves.

A small note-taking core that provides:
- Keyword-based categorization into a fixed taxonomy
- Durable SQLite storage with recency, search and category queries
- CLI and MCP front ends
"""

__version__ = "0.1.0"
