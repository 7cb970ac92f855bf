# Copyright (c) 2026 Heureum AI. All rights reserved.

"""trim_messages tool.

Removes the oldest non-system messages once the conversation exceeds the
token threshold, keeping system messages and the most recent context.
"""

from mcp.server.fastmcp import FastMCP

from slimcontext_mcp.compaction import TokenBudgetConfig, TrimCompressor
from slimcontext_mcp.config import settings
from slimcontext_mcp.schemas import TrimMessagesArgs
from slimcontext_mcp.tools.compression.report import (
    configured_estimator,
    error_report,
    success_report,
)


def register_trim_messages(mcp: FastMCP) -> None:
    """Register the trim_messages tool with the MCP server.

    Args:
        mcp (FastMCP): The MCP server instance to register the
            trim_messages tool with.
    """

    @mcp.tool()
    async def trim_messages(
        messages: list[dict],
        max_model_tokens: int = settings.DEFAULT_MAX_MODEL_TOKENS,
        threshold_percent: float = settings.DEFAULT_THRESHOLD_PERCENT,
        min_recent_messages: int = settings.TRIM_MIN_RECENT_MESSAGES,
    ) -> str:
        """Compress chat message history using token-based trimming. Removes oldest non-system messages when the token count exceeds the threshold while preserving system messages and recent context.

        Args:
            messages: Chat messages to compress, oldest first. Each item is
                {"role": "system" | "user" | "assistant" | "tool" | "human",
                "content": "..."}.
            max_model_tokens: The model's maximum context window in tokens.
            threshold_percent: Share of the window (0-1) that triggers
                compression.
            min_recent_messages: Number of most recent messages always kept.

        Returns:
            str: JSON string with message counts, compression ratio and the
                compressed messages. On error, returns a JSON string with
                success=false, the error message and its type.
        """
        try:
            args = TrimMessagesArgs(
                messages=messages,
                max_model_tokens=max_model_tokens,
                threshold_percent=threshold_percent,
                min_recent_messages=min_recent_messages,
            )
            compressor = TrimCompressor(TokenBudgetConfig(
                max_model_tokens=args.max_model_tokens,
                threshold_percent=args.threshold_percent,
                min_recent_messages=args.min_recent_messages,
                estimate_tokens=configured_estimator(),
            ))
            result = compressor.run(args.messages)
        except Exception as e:
            return error_report("trim_messages", e)

        return success_report(result.to_report())
