# Copyright (c) 2026 Heureum AI. All rights reserved.

"""
Message compression engine.

Keeps a chat history within a model's context window while never dropping
system instructions and always keeping the most recent exchanges verbatim.

  Token estimation   (tokens.py)
      Per-message cost; chars/4 heuristic by default, tiktoken optional.

  Budget policy      (budget.py)
      budget = max_model_tokens * threshold_percent; compress only above it.

  Partitioning       (partition.py)
      Protected (system + trailing window) vs reducible messages.

  Trim               (trim.py)
      Drop reducible messages oldest-first until within budget.

  Summarize          (summarizer.py)
      Replace the same span with one adapter-generated system message.

Usage:

    config = TokenBudgetConfig(max_model_tokens=8192, threshold_percent=0.7)
    messages = TrimCompressor(config).compress(messages)
"""

from slimcontext_mcp.compaction.budget import compute_budget, exceeds_budget, needs_compression
from slimcontext_mcp.compaction.compressors import SummarizeCompressor, TrimCompressor
from slimcontext_mcp.compaction.partition import MessagePartition, partition_messages
from slimcontext_mcp.compaction.result import CompressionResult
from slimcontext_mcp.compaction.settings import (
    SummarizeConfig,
    TokenBudgetConfig,
    TokenEstimator,
)
from slimcontext_mcp.compaction.summarizer import (
    build_summary_request,
    summarize_history,
    summarize_messages,
)
from slimcontext_mcp.compaction.tokens import (
    estimate_message_tokens,
    estimate_messages_tokens,
    make_tiktoken_estimator,
    resolve_estimator,
)
from slimcontext_mcp.compaction.trim import (
    plan_removal,
    select_removal_indices,
    trim_history,
    trim_messages,
)

__all__ = [
    "TokenBudgetConfig",
    "SummarizeConfig",
    "TokenEstimator",
    "estimate_message_tokens",
    "estimate_messages_tokens",
    "make_tiktoken_estimator",
    "resolve_estimator",
    "compute_budget",
    "exceeds_budget",
    "needs_compression",
    "MessagePartition",
    "partition_messages",
    "select_removal_indices",
    "plan_removal",
    "trim_history",
    "trim_messages",
    "build_summary_request",
    "summarize_history",
    "summarize_messages",
    "CompressionResult",
    "TrimCompressor",
    "SummarizeCompressor",
]
