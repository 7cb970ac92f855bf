# Copyright (c) 2026 Heureum AI. All rights reserved.

"""Request schemas for the compression tools.

Validation happens here, before the engine is invoked: at least one message,
roles from the closed enum, a positive context window, a threshold within
``[0, 1]`` and a non-negative protected tail. The legacy ``human`` role is
normalized to ``user`` on the way in.
"""

from typing import List, Optional

from pydantic import BaseModel, Field, field_validator

from slimcontext_mcp.compaction.settings import (
    DEFAULT_MAX_MODEL_TOKENS,
    DEFAULT_SUMMARIZE_MIN_RECENT,
    DEFAULT_THRESHOLD_PERCENT,
    DEFAULT_TRIM_MIN_RECENT,
)
from slimcontext_mcp.models import Message, normalize_human_roles
from slimcontext_mcp.providers.openai import DEFAULT_OPENAI_MODEL


class CompressionArgs(BaseModel):
    """Arguments shared by both compression tools.

    Attributes:
        messages (List[Message]): Conversation to compress, oldest first.
        max_model_tokens (int): The model's context window in tokens.
        threshold_percent (float): Share of the window that triggers
            compression.
        min_recent_messages (int): Trailing messages always preserved.
    """

    messages: List[Message] = Field(min_length=1)
    max_model_tokens: int = Field(default=DEFAULT_MAX_MODEL_TOKENS, ge=1)
    threshold_percent: float = Field(default=DEFAULT_THRESHOLD_PERCENT, ge=0, le=1)
    min_recent_messages: int = Field(default=DEFAULT_TRIM_MIN_RECENT, ge=0)

    @field_validator("messages")
    @classmethod
    def _normalize_roles(cls, messages: List[Message]) -> List[Message]:
        """Map ``human`` to ``user`` before anything else sees the messages."""
        return normalize_human_roles(messages)


class TrimMessagesArgs(CompressionArgs):
    """Arguments of the ``trim_messages`` tool."""


class SummarizeMessagesArgs(CompressionArgs):
    """Arguments of the ``summarize_messages`` tool.

    Attributes:
        min_recent_messages (int): Defaults to 4 for summarization.
        openai_api_key (Optional[str]): API key; falls back to the
            ``OPENAI_API_KEY`` setting.
        openai_model (str): Model used to write the summary.
        custom_prompt (Optional[str]): Replacement summarization prompt.
    """

    min_recent_messages: int = Field(default=DEFAULT_SUMMARIZE_MIN_RECENT, ge=0)
    openai_api_key: Optional[str] = None
    openai_model: str = DEFAULT_OPENAI_MODEL
    custom_prompt: Optional[str] = None
