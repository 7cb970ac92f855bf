# Copyright (c) 2026 Heureum AI. All rights reserved.

"""summarize_messages tool.

Replaces the oldest reducible messages with a single system message written
by an OpenAI model. The API key comes from the call arguments or, failing
that, from the OPENAI_API_KEY setting.
"""
from typing import Optional

from mcp.server.fastmcp import FastMCP

from slimcontext_mcp.compaction import SummarizeCompressor, SummarizeConfig
from slimcontext_mcp.config import settings
from slimcontext_mcp.errors import ConfigurationError
from slimcontext_mcp.providers import OpenAIChatAdapter
from slimcontext_mcp.schemas import SummarizeMessagesArgs
from slimcontext_mcp.tools.compression.report import (
    configured_estimator,
    error_report,
    success_report,
)


def register_summarize_messages(mcp: FastMCP) -> None:
    """Register the summarize_messages tool with the MCP server.

    Args:
        mcp (FastMCP): The MCP server instance to register the
            summarize_messages tool with.
    """

    @mcp.tool()
    async def summarize_messages(
        messages: list[dict],
        max_model_tokens: int = settings.DEFAULT_MAX_MODEL_TOKENS,
        threshold_percent: float = settings.DEFAULT_THRESHOLD_PERCENT,
        min_recent_messages: int = settings.SUMMARIZE_MIN_RECENT_MESSAGES,
        openai_api_key: Optional[str] = None,
        openai_model: str = settings.OPENAI_MODEL,
        custom_prompt: Optional[str] = None,
    ) -> str:
        """Compress chat message history using AI-powered summarization. Creates a concise summary of older messages while preserving system messages and recent context.

        Args:
            messages: Chat messages to compress, oldest first. Each item is
                {"role": "system" | "user" | "assistant" | "tool" | "human",
                "content": "..."}.
            max_model_tokens: The model's maximum context window in tokens.
            threshold_percent: Share of the window (0-1) that triggers
                compression.
            min_recent_messages: Number of most recent messages always kept.
            openai_api_key: OpenAI API key (can also be set via the
                OPENAI_API_KEY environment variable).
            openai_model: OpenAI model used for summarization.
            custom_prompt: Custom summarization prompt (optional).

        Returns:
            str: JSON string with message counts, whether a summary was
                generated, compression ratio and the compressed messages.
                On error, returns a JSON string with success=false, the
                error message and its type.
        """
        try:
            args = SummarizeMessagesArgs(
                messages=messages,
                max_model_tokens=max_model_tokens,
                threshold_percent=threshold_percent,
                min_recent_messages=min_recent_messages,
                openai_api_key=openai_api_key,
                openai_model=openai_model,
                custom_prompt=custom_prompt,
            )

            api_key = args.openai_api_key or settings.OPENAI_API_KEY
            if not api_key:
                raise ConfigurationError(
                    "OpenAI API key is required. Provide it via the openai_api_key "
                    "parameter or the OPENAI_API_KEY environment variable."
                )

            model = OpenAIChatAdapter(
                api_key=api_key,
                model=args.openai_model,
                temperature=settings.SUMMARY_TEMPERATURE,
                max_tokens=settings.SUMMARY_MAX_TOKENS,
                base_url=settings.OPENAI_BASE_URL,
            )
            compressor = SummarizeCompressor(SummarizeConfig(
                max_model_tokens=args.max_model_tokens,
                threshold_percent=args.threshold_percent,
                min_recent_messages=args.min_recent_messages,
                estimate_tokens=configured_estimator(),
                model=model,
                prompt=args.custom_prompt,
            ))
            result = await compressor.run(args.messages)
        except Exception as e:
            return error_report("summarize_messages", e)

        return success_report(result.to_report(include_summary_flag=True))
