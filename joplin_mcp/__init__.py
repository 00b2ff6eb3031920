"""Joplin MCP Server - MCP tools adapter for the Joplin Web Clipper API."""

__version__ = "1.0.0"
