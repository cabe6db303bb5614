"""Tests for MCP server tool registration."""

import logging

import pytest

from mcp_server.server import check_startup, mcp
from slidegen.config import SlideGenConfig


class TestServerRegistration:
    def test_server_name(self):
        assert mcp.name == "slidedeck"

    def test_tools_registered(self):
        """Verify both tools are registered on the FastMCP instance."""
        tool_names = {tool.name for tool in mcp._tool_manager._tools.values()}

        assert tool_names == {"create_ppt_from_text", "get_youtube_transcript"}

    @pytest.mark.asyncio
    async def test_tool_schemas(self):
        tools = {tool.name: tool for tool in await mcp.list_tools()}

        create_schema = tools["create_ppt_from_text"].inputSchema
        assert create_schema["required"] == ["userText"]
        assert "accountId" in create_schema["properties"]
        assert tools["get_youtube_transcript"].inputSchema["required"] == ["ytUrl"]


class TestCheckStartup:
    def test_valid_config(self, caplog):
        with caplog.at_level(logging.WARNING, logger="mcp_server.server"):
            assert check_startup(SlideGenConfig(account_id="acct-1")) is True
        assert caplog.text == ""

    def test_warns_without_account_id(self, caplog):
        with caplog.at_level(logging.WARNING, logger="mcp_server.server"):
            assert check_startup(SlideGenConfig()) is True
        assert "SLIDEGEN_ACCOUNT_ID" in caplog.text

    def test_reports_errors(self, caplog):
        with caplog.at_level(logging.WARNING, logger="mcp_server.server"):
            assert check_startup(SlideGenConfig(generation_url="")) is False
        assert "generation_url is not configured" in caplog.text
