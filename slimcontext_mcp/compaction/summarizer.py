# Copyright (c) 2026 Heureum AI. All rights reserved.

"""
Summarize strategy.

Selects the same removal span as the trim strategy, but instead of dropping
it the span is sent to a text-generation adapter and replaced by a single
synthetic system message holding the summary. The summary is spliced in at
the position of the first removed message; everything else keeps its order.

Single pass:
  The summary itself consumes tokens and the result is NOT re-checked
  against the budget. Callers that need strict compliance compress the
  result again.

Failure:
  An adapter failure fails the whole call with ``AdapterError``. There is no
  fallback to plain trimming and the output list is only built after the
  adapter call resolves, so cancellation leaves nothing half-done.
"""

from __future__ import annotations

import logging
from typing import List, Sequence

from slimcontext_mcp.compaction.result import CompressionResult
from slimcontext_mcp.compaction.settings import SummarizeConfig
from slimcontext_mcp.compaction.tokens import resolve_estimator
from slimcontext_mcp.compaction.trim import plan_removal
from slimcontext_mcp.errors import AdapterError, SlimContextError
from slimcontext_mcp.models import Message, MessageRole, normalize_human_roles
from slimcontext_mcp.prompts import DEFAULT_SUMMARY_PROMPT
from slimcontext_mcp.providers.base import TextGenerationAdapter, to_adapter_messages

logger = logging.getLogger(__name__)


def build_summary_request(span: Sequence[Message], prompt: str) -> List[Message]:
    """Assemble the adapter request for a removal span.

    Args:
        span (Sequence[Message]): Messages selected for removal, oldest
            first.
        prompt (str): Summarization instruction.

    Returns:
        List[Message]: ``[system: prompt] + span`` with ``tool`` messages
            sent as ``assistant``.
    """
    return [Message(role=MessageRole.SYSTEM, content=prompt)] + to_adapter_messages(span)


async def _generate_summary(
    span: Sequence[Message],
    model: TextGenerationAdapter,
    prompt: str,
) -> str:
    """Call the adapter once and return the summary text.

    Raises:
        AdapterError: If the adapter raises or returns empty content.
    """
    try:
        summary = await model.generate(build_summary_request(span, prompt))
    except SlimContextError:
        raise
    except Exception as e:
        raise AdapterError(f"Summarization failed: {e}", e) from e

    if not isinstance(summary, str) or not summary.strip():
        raise AdapterError("Text-generation adapter returned no content")
    return summary


async def summarize_history(messages: List[Message], config: SummarizeConfig) -> CompressionResult:
    """Compress a conversation by summarizing its oldest reducible span.

    Args:
        messages (List[Message]): Conversation, oldest first.
        config (SummarizeConfig): Compression configuration carrying the
            adapter and optional custom prompt.

    Returns:
        CompressionResult: Result with ``summary`` set when the adapter was
            called. ``messages`` is the input list itself when nothing
            needed removing.

    Raises:
        AdapterError: If the adapter fails.
    """
    messages = normalize_human_roles(messages)
    estimator = resolve_estimator(config)
    removed = plan_removal(messages, config, estimator)
    if not removed:
        return CompressionResult(messages=messages, original_count=len(messages))

    span = [messages[i] for i in removed]
    prompt = config.prompt or DEFAULT_SUMMARY_PROMPT
    summary_text = await _generate_summary(span, config.model, prompt)

    summary = Message(role=MessageRole.SYSTEM, content=summary_text)
    drop = set(removed)
    insert_at = removed[0]
    compressed: List[Message] = []
    for i, msg in enumerate(messages):
        if i == insert_at:
            compressed.append(summary)
        if i not in drop:
            compressed.append(msg)

    logger.info(
        "Summarized %d messages into 1 (%d -> %d messages)",
        len(span),
        len(messages),
        len(compressed),
    )
    return CompressionResult(messages=compressed, original_count=len(messages), summary=summary)


async def summarize_messages(messages: List[Message], config: SummarizeConfig) -> List[Message]:
    """Summarize a conversation and return only the resulting messages."""
    return (await summarize_history(messages, config)).messages
