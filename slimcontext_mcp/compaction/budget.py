# Copyright (c) 2026 Heureum AI. All rights reserved.

"""Budget policy: decide whether a conversation needs compression at all."""

from __future__ import annotations

import logging
from typing import List

from slimcontext_mcp.compaction.settings import TokenBudgetConfig
from slimcontext_mcp.compaction.tokens import estimate_messages_tokens, resolve_estimator
from slimcontext_mcp.models import Message

logger = logging.getLogger(__name__)


def compute_budget(config: TokenBudgetConfig) -> float:
    """Absolute token ceiling for *config*.

    Args:
        config (TokenBudgetConfig): Compression configuration.

    Returns:
        float: ``max_model_tokens * threshold_percent``.
    """
    return config.budget


def exceeds_budget(total: int, config: TokenBudgetConfig) -> bool:
    """Compare an already estimated total against the budget.

    Args:
        total (int): Estimated token total of the conversation.
        config (TokenBudgetConfig): Compression configuration.

    Returns:
        bool: ``True`` if *total* is strictly above the budget.
    """
    budget = compute_budget(config)
    logger.debug("Conversation uses %d tokens (budget %.1f)", total, budget)
    return total > budget


def needs_compression(messages: List[Message], config: TokenBudgetConfig) -> bool:
    """Check whether the conversation exceeds the token budget.

    A ``threshold_percent`` of 0 yields a zero budget, so any message
    triggers compression. A ``threshold_percent`` of 1 only triggers once
    the whole context window is exceeded.

    Args:
        messages (List[Message]): Conversation to check.
        config (TokenBudgetConfig): Compression configuration.

    Returns:
        bool: ``True`` if the estimated total is strictly above the budget.
    """
    return exceeds_budget(estimate_messages_tokens(messages, resolve_estimator(config)), config)
