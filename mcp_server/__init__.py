"""Slide Deck MCP server package."""
