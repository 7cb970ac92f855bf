# Copyright (c) 2026 Heureum AI. All rights reserved.

"""
Compressor facade.

Both compressors take the same budget configuration and return the same
``CompressionResult``; they differ only in what happens to the messages
selected for removal.

    trim = TrimCompressor(TokenBudgetConfig(max_model_tokens=8192))
    messages = trim.compress(messages)

    summarize = SummarizeCompressor(SummarizeConfig(model=adapter))
    messages = await summarize.compress(messages)
"""

from __future__ import annotations

from typing import List

from slimcontext_mcp.compaction.budget import needs_compression
from slimcontext_mcp.compaction.result import CompressionResult
from slimcontext_mcp.compaction.settings import SummarizeConfig, TokenBudgetConfig
from slimcontext_mcp.compaction.summarizer import summarize_history
from slimcontext_mcp.compaction.trim import trim_history
from slimcontext_mcp.models import Message


class TrimCompressor:
    """Drops the oldest reducible messages. Pure and synchronous."""

    def __init__(self, config: TokenBudgetConfig):
        self.config = config

    def needs_compression(self, messages: List[Message]) -> bool:
        return needs_compression(messages, self.config)

    def run(self, messages: List[Message]) -> CompressionResult:
        return trim_history(messages, self.config)

    def compress(self, messages: List[Message]) -> List[Message]:
        return self.run(messages).messages


class SummarizeCompressor:
    """Replaces the oldest reducible span with an adapter-generated summary."""

    def __init__(self, config: SummarizeConfig):
        self.config = config

    def needs_compression(self, messages: List[Message]) -> bool:
        return needs_compression(messages, self.config)

    async def run(self, messages: List[Message]) -> CompressionResult:
        return await summarize_history(messages, self.config)

    async def compress(self, messages: List[Message]) -> List[Message]:
        return (await self.run(messages)).messages
