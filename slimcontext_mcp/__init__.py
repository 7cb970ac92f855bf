# Copyright (c) 2026 Heureum AI. All rights reserved.

"""SlimContext MCP: chat history compression exposed as MCP tools."""

__version__ = "0.1.0"
