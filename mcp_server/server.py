"""
Slide Deck MCP Server

Exposes slide generation as MCP tools for AI agent orchestration.
Supports stdio transport (for desktop MCP hosts) and SSE transport.

Usage:
    python -m mcp_server.server                    # stdio mode (default)
    python -m mcp_server.server --transport sse     # SSE mode
"""

import argparse
import logging
import os
from typing import Optional

from mcp.server.fastmcp import FastMCP

from mcp_server.config import MCPServerConfig
from slidegen.config import SlideGenConfig
from slidegen.logging_config import configure_logging, logging_config

logger = logging.getLogger(__name__)

# Initialize FastMCP server
mcp = FastMCP(
    "slidedeck",
)


# --- Tool Definitions ---

@mcp.tool()
async def create_ppt_from_text(
    userText: str,
    accountId: Optional[str] = None,
) -> dict:
    """Generate a PowerPoint presentation from text or a YouTube URL.

    Slide count, model (gpt-4 or gemini), template and images can be
    requested in the text itself, e.g. "8 slides about volcanoes using
    gpt-4 with images".

    Args:
        userText: Topic text, or a YouTube URL to build the deck from its transcript.
        accountId: Account ID used to check the caller's plan (default: SLIDEGEN_ACCOUNT_ID).
    """
    from mcp_server.tools.create_ppt import create_ppt_from_text as _create
    return await _create(user_text=userText, account_id=accountId)


@mcp.tool()
async def get_youtube_transcript(
    ytUrl: str,
) -> dict:
    """Fetch the transcript of a YouTube video.

    Args:
        ytUrl: YouTube video URL (youtube.com or youtu.be).
    """
    from mcp_server.tools.youtube_transcript import get_youtube_transcript as _transcript
    return await _transcript(yt_url=ytUrl)


def check_startup(config: SlideGenConfig) -> bool:
    """Log the configuration status once at startup.

    Returns:
        True if the configuration allows generation calls
    """
    status = config.validate()
    for warning in status.warnings:
        logger.warning(warning)
    for error in status.errors:
        logger.error(error)
    return status.ok


# --- Server Entry Point ---

def main():
    """Start the MCP server."""
    parser = argparse.ArgumentParser(description="Slide Deck MCP Server")
    parser.add_argument("--transport", choices=["stdio", "sse"], default=None)
    parser.add_argument("--port", type=int, default=None)
    parser.add_argument("--config", type=str, help="Path to server config YAML")
    args = parser.parse_args()

    config = MCPServerConfig.load(args.config)

    configure_logging(level=config.log_level, log_file=config.log_file)

    # Tools load their configuration per call from SLIDEGEN_CONFIG.
    os.environ.setdefault("SLIDEGEN_CONFIG", config.slidegen_config_path)
    slidegen_config = SlideGenConfig.load_from_yaml(config.slidegen_config_path)
    logging_config.log_configuration_details(vars(slidegen_config))
    check_startup(slidegen_config)

    transport = args.transport or config.transport
    mcp.settings.port = args.port or config.port

    if transport == "sse":
        mcp.run(transport="sse")
    else:
        mcp.run(transport="stdio")


if __name__ == "__main__":
    main()
