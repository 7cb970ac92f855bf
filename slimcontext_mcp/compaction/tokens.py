# Copyright (c) 2026 Heureum AI. All rights reserved.

"""
Token estimation utilities.

The default estimator is a chars/4 heuristic plus a small per-message
overhead for role framing. It is monotonic in content length and never
returns zero, so a single huge message is always visible to the budget check.

An exact estimator backed by tiktoken can be plugged in through
``TokenBudgetConfig.estimate_tokens``; the rest of the engine does not care
which one is used.
"""

from __future__ import annotations

import logging
import math
from typing import Callable, List, Optional, Sequence

import tiktoken

from slimcontext_mcp.compaction.settings import TokenBudgetConfig, TokenEstimator
from slimcontext_mcp.errors import EstimatorError
from slimcontext_mcp.models import Message

CHARS_PER_TOKEN = 4
MESSAGE_OVERHEAD_TOKENS = 2

logger = logging.getLogger(__name__)


def estimate_message_tokens(msg: Message) -> int:
    """Estimate token count for a single message using the char heuristic.

    Args:
        msg (Message): Message to estimate tokens for.

    Returns:
        int: ``ceil(len(content) / CHARS_PER_TOKEN)`` plus
            ``MESSAGE_OVERHEAD_TOKENS``.
    """
    return math.ceil(len(msg.content) / CHARS_PER_TOKEN) + MESSAGE_OVERHEAD_TOKENS


def make_tiktoken_estimator(model: str = "gpt-4o") -> TokenEstimator:
    """Build an estimator that counts tokens with tiktoken.

    The encoding is resolved on first use so that building the estimator
    never touches the network.

    Args:
        model (str): Model name passed to ``tiktoken.encoding_for_model``.
            Defaults to ``"gpt-4o"``.

    Returns:
        TokenEstimator: Function mapping a message to its exact content
            token count plus ``MESSAGE_OVERHEAD_TOKENS``.
    """
    encoding: Optional[tiktoken.Encoding] = None

    def _estimate(msg: Message) -> int:
        nonlocal encoding
        if encoding is None:
            encoding = tiktoken.encoding_for_model(model)
            logger.debug("Loaded tiktoken encoding for %s", model)
        return len(encoding.encode(msg.content)) + MESSAGE_OVERHEAD_TOKENS

    return _estimate


def resolve_estimator(config: TokenBudgetConfig) -> Callable[[Message], int]:
    """Return a checked estimator for *config*.

    The configured estimator (or the default heuristic) is wrapped so that a
    cost which is not a non-negative integer raises ``EstimatorError``
    instead of silently corrupting the budget arithmetic.

    Args:
        config (TokenBudgetConfig): Configuration carrying an optional
            custom estimator.

    Returns:
        Callable[[Message], int]: Validating estimator.
    """
    estimator = config.estimate_tokens or estimate_message_tokens

    def _checked(msg: Message) -> int:
        tokens = estimator(msg)
        if isinstance(tokens, bool) or not isinstance(tokens, int):
            raise EstimatorError(
                f"Token estimator returned {type(tokens).__name__}, expected int"
            )
        if tokens < 0:
            raise EstimatorError(f"Token estimator returned negative count {tokens}")
        return tokens

    return _checked


def estimate_messages_tokens(
    messages: Sequence[Message],
    estimator: Callable[[Message], int] = estimate_message_tokens,
) -> int:
    """Estimate total token count for a list of messages.

    Args:
        messages (Sequence[Message]): Messages to estimate tokens for.
        estimator (Callable[[Message], int]): Per-message estimator.
            Defaults to the char heuristic.

    Returns:
        int: Sum of estimated token counts across all messages.
    """
    return sum(estimator(m) for m in messages)


def estimate_message_costs(
    messages: Sequence[Message],
    estimator: Callable[[Message], int],
) -> List[int]:
    """Per-message token costs, in sequence order."""
    return [estimator(m) for m in messages]
