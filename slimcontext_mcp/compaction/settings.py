# Copyright (c) 2026 Heureum AI. All rights reserved.

"""
Compression settings.

The token budget is expressed as a ratio of the model's context window:

    budget = max_model_tokens * threshold_percent
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, Optional

from slimcontext_mcp.errors import ConfigurationError
from slimcontext_mcp.models import Message

if TYPE_CHECKING:
    from slimcontext_mcp.providers.base import TextGenerationAdapter

TokenEstimator = Callable[[Message], int]

DEFAULT_MAX_MODEL_TOKENS = 8192
DEFAULT_THRESHOLD_PERCENT = 0.7
DEFAULT_TRIM_MIN_RECENT = 2
DEFAULT_SUMMARIZE_MIN_RECENT = 4


@dataclass(frozen=True)
class TokenBudgetConfig:
    """Configuration shared by both compression strategies.

    Attributes:
        max_model_tokens (int): The model's maximum context window in tokens.
            Must be at least 1.
        threshold_percent (float): Share of the window, in ``[0, 1]``, above
            which compression is triggered.
        min_recent_messages (int): Number of trailing messages that are
            always kept verbatim. Must be non-negative.
        estimate_tokens (Optional[TokenEstimator]): Per-message token
            estimator. ``None`` selects the default character heuristic.
    """

    max_model_tokens: int = DEFAULT_MAX_MODEL_TOKENS
    threshold_percent: float = DEFAULT_THRESHOLD_PERCENT
    min_recent_messages: int = DEFAULT_TRIM_MIN_RECENT
    estimate_tokens: Optional[TokenEstimator] = None

    def __post_init__(self) -> None:
        if isinstance(self.max_model_tokens, bool) or not isinstance(self.max_model_tokens, int):
            raise ConfigurationError(
                f"max_model_tokens must be an integer, got {self.max_model_tokens!r}"
            )
        if self.max_model_tokens < 1:
            raise ConfigurationError(
                f"max_model_tokens must be >= 1, got {self.max_model_tokens}"
            )
        if not 0 <= self.threshold_percent <= 1:
            raise ConfigurationError(
                f"threshold_percent must be within [0, 1], got {self.threshold_percent}"
            )
        if isinstance(self.min_recent_messages, bool) or not isinstance(self.min_recent_messages, int):
            raise ConfigurationError(
                f"min_recent_messages must be an integer, got {self.min_recent_messages!r}"
            )
        if self.min_recent_messages < 0:
            raise ConfigurationError(
                f"min_recent_messages must be >= 0, got {self.min_recent_messages}"
            )
        if self.estimate_tokens is not None and not callable(self.estimate_tokens):
            raise ConfigurationError("estimate_tokens must be callable")

    @property
    def budget(self) -> float:
        """Absolute token ceiling.

        Returns:
            float: Product of ``max_model_tokens`` and ``threshold_percent``.
        """
        return self.max_model_tokens * self.threshold_percent


@dataclass(frozen=True)
class SummarizeConfig(TokenBudgetConfig):
    """Configuration for the summarize strategy.

    Attributes:
        min_recent_messages (int): Defaults to 4 for summarization.
        model (TextGenerationAdapter): Adapter that turns the removed span
            into summary text. Required: the ``None`` default only exists
            because dataclass fields after a defaulted base field need one,
            and ``__post_init__`` rejects it.
        prompt (Optional[str]): Custom summarization instruction. ``None``
            selects ``DEFAULT_SUMMARY_PROMPT``.
    """

    min_recent_messages: int = DEFAULT_SUMMARIZE_MIN_RECENT
    model: Optional["TextGenerationAdapter"] = None
    prompt: Optional[str] = None

    def __post_init__(self) -> None:
        super().__post_init__()
        if self.model is None:
            raise ConfigurationError("SummarizeConfig requires a text-generation model")
        if not callable(getattr(self.model, "generate", None)):
            raise ConfigurationError(
                f"model must provide an async generate(messages) method, got {type(self.model).__name__}"
            )
