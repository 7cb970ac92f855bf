# Copyright (c) 2026 Heureum AI. All rights reserved.

"""Compression domain tools: trim, summarize."""

from mcp.server.fastmcp import FastMCP

from slimcontext_mcp.tools.compression.summarize import register_summarize_messages
from slimcontext_mcp.tools.compression.trim import register_trim_messages


def register_compression_tools(mcp: FastMCP) -> None:
    """Register all compression tools with the MCP server.

    Args:
        mcp (FastMCP): The MCP server instance to register tools with.
    """
    register_trim_messages(mcp)
    register_summarize_messages(mcp)
