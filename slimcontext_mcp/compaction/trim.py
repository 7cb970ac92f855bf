# Copyright (c) 2026 Heureum AI. All rights reserved.

"""
Trim strategy.

Drops reducible messages oldest-first until the conversation fits the
budget. Protected messages are never touched and the surviving messages keep
their original order; only presence changes, never content.

If even dropping every reducible message is not enough (e.g. the system
prompt alone exceeds the budget) the best achievable result is returned.
Callers can detect residual overflow with ``needs_compression``.
"""

from __future__ import annotations

import logging
from typing import Callable, List, Sequence

from slimcontext_mcp.compaction.budget import compute_budget, exceeds_budget
from slimcontext_mcp.compaction.partition import MessagePartition, partition_messages
from slimcontext_mcp.compaction.result import CompressionResult
from slimcontext_mcp.compaction.settings import TokenBudgetConfig
from slimcontext_mcp.compaction.tokens import estimate_message_costs, resolve_estimator
from slimcontext_mcp.models import Message, normalize_human_roles

logger = logging.getLogger(__name__)


def select_removal_indices(
    partition: MessagePartition,
    costs: Sequence[int],
    budget: float,
) -> List[int]:
    """Pick reducible positions to drop, oldest first.

    Walks the reducible partition from the oldest message and removes
    messages while the running total stays above *budget*.

    Args:
        partition (MessagePartition): Split of the conversation.
        costs (Sequence[int]): Token cost of each message, by position.
        budget (float): Absolute token ceiling.

    Returns:
        List[int]: Ascending positions to remove. Always a prefix of
            ``partition.reducible_indices``.
    """
    running = sum(costs)
    removed: List[int] = []
    for idx in partition.reducible_indices:
        if running <= budget:
            break
        removed.append(idx)
        running -= costs[idx]
    return removed


def plan_removal(
    messages: List[Message],
    config: TokenBudgetConfig,
    estimator: Callable[[Message], int],
) -> List[int]:
    """Shared selection for trim and summarize.

    Args:
        messages (List[Message]): Normalized conversation.
        config (TokenBudgetConfig): Compression configuration.
        estimator (Callable[[Message], int]): Checked per-message estimator.

    Returns:
        List[int]: Positions to remove. Empty when the conversation is
            within budget or nothing is reducible.
    """
    costs = estimate_message_costs(messages, estimator)
    total = sum(costs)
    if not exceeds_budget(total, config):
        return []

    budget = compute_budget(config)
    partition = partition_messages(messages, config.min_recent_messages)
    if not partition.reducible_indices:
        logger.debug(
            "Over budget (%d > %.1f) but all %d messages are protected",
            total,
            budget,
            len(messages),
        )
        return []
    return select_removal_indices(partition, costs, budget)


def trim_history(messages: List[Message], config: TokenBudgetConfig) -> CompressionResult:
    """Trim a conversation to the token budget.

    Args:
        messages (List[Message]): Conversation, oldest first.
        config (TokenBudgetConfig): Compression configuration.

    Returns:
        CompressionResult: Result whose ``messages`` is the input list
            itself when nothing needed removing.
    """
    messages = normalize_human_roles(messages)
    estimator = resolve_estimator(config)
    removed = plan_removal(messages, config, estimator)
    if not removed:
        return CompressionResult(messages=messages, original_count=len(messages))

    drop = set(removed)
    kept = [m for i, m in enumerate(messages) if i not in drop]
    logger.info("Trimmed %d messages -> %d", len(messages), len(kept))
    return CompressionResult(messages=kept, original_count=len(messages))


def trim_messages(messages: List[Message], config: TokenBudgetConfig) -> List[Message]:
    """Trim a conversation and return only the surviving messages."""
    return trim_history(messages, config).messages
