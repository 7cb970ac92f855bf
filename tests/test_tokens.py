# Copyright (c) 2026 Heureum AI. All rights reserved.

"""Tests for token estimation utilities."""
from unittest.mock import MagicMock, patch

import pytest

from slimcontext_mcp.compaction.settings import TokenBudgetConfig
from slimcontext_mcp.compaction.tokens import (
    MESSAGE_OVERHEAD_TOKENS,
    estimate_message_tokens,
    estimate_messages_tokens,
    make_tiktoken_estimator,
    resolve_estimator,
)
from slimcontext_mcp.errors import EngineError, EstimatorError
from slimcontext_mcp.models import Message, MessageRole


def _user(content: str) -> Message:
    return Message(role=MessageRole.USER, content=content)


# ---------------------------------------------------------------------------
# Default heuristic
# ---------------------------------------------------------------------------


class TestEstimateMessageTokens:
    """Tests for the chars/4 heuristic estimator."""

    @pytest.mark.parametrize(
        "content,expected",
        [
            ("", 2),
            ("a", 3),
            ("abcd", 3),
            ("abcde", 4),
            ("x" * 400, 102),
        ],
    )
    def test_values(self, content, expected):
        """Verify ceil(len / 4) plus the per-message overhead."""
        assert estimate_message_tokens(_user(content)) == expected

    def test_positive_for_any_message(self):
        """Verify every message costs at least the overhead."""
        assert estimate_message_tokens(_user("")) == MESSAGE_OVERHEAD_TOKENS

    def test_monotonic_in_length(self):
        """Verify longer content never costs fewer tokens."""
        costs = [estimate_message_tokens(_user("x" * n)) for n in range(0, 200, 7)]
        assert costs == sorted(costs)

    def test_role_does_not_matter(self):
        """Verify the heuristic depends on content only."""
        a = Message(role=MessageRole.SYSTEM, content="same text")
        b = Message(role=MessageRole.TOOL, content="same text")
        assert estimate_message_tokens(a) == estimate_message_tokens(b)

    def test_sum(self):
        """Verify the list estimate is the sum of message estimates."""
        msgs = [_user("abcd"), _user("x" * 400)]
        assert estimate_messages_tokens(msgs) == 3 + 102

    def test_sum_with_custom_estimator(self):
        """Verify a custom estimator is applied to every message."""
        assert estimate_messages_tokens([_user("a")] * 3, lambda _m: 7) == 21


# ---------------------------------------------------------------------------
# tiktoken estimator
# ---------------------------------------------------------------------------


class TestTiktokenEstimator:
    """Tests for the tiktoken-backed estimator."""

    def test_counts_encoded_tokens(self):
        """Verify the estimate is the encoded length plus overhead."""
        encoding = MagicMock()
        encoding.encode.return_value = [1, 2, 3, 4, 5]
        with patch("slimcontext_mcp.compaction.tokens.tiktoken.encoding_for_model", return_value=encoding) as efm:
            estimate = make_tiktoken_estimator("gpt-4o")
            efm.assert_not_called()
            assert estimate(_user("hello world")) == 5 + MESSAGE_OVERHEAD_TOKENS
            encoding.encode.assert_called_once_with("hello world")

    def test_encoding_loaded_once(self):
        """Verify the encoding is resolved lazily and cached."""
        encoding = MagicMock()
        encoding.encode.return_value = []
        with patch("slimcontext_mcp.compaction.tokens.tiktoken.encoding_for_model", return_value=encoding) as efm:
            estimate = make_tiktoken_estimator("gpt-4o-mini")
            estimate(_user("a"))
            estimate(_user("b"))
            efm.assert_called_once_with("gpt-4o-mini")


# ---------------------------------------------------------------------------
# resolve_estimator
# ---------------------------------------------------------------------------


class TestResolveEstimator:
    """Tests for resolve_estimator validation wrapper."""

    def test_default(self):
        """Verify the default heuristic is used when none is configured."""
        estimate = resolve_estimator(TokenBudgetConfig())
        assert estimate(_user("abcd")) == 3

    def test_custom(self):
        """Verify a configured estimator is used."""
        estimate = resolve_estimator(TokenBudgetConfig(estimate_tokens=lambda _m: 42))
        assert estimate(_user("abcd")) == 42

    def test_zero_allowed(self):
        """Verify zero is a valid cost."""
        estimate = resolve_estimator(TokenBudgetConfig(estimate_tokens=lambda _m: 0))
        assert estimate(_user("abcd")) == 0

    @pytest.mark.parametrize("bad", [-1, 1.0, "3", None, True])
    def test_invalid_costs(self, bad):
        """Verify non-integer or negative costs raise EstimatorError."""
        estimate = resolve_estimator(TokenBudgetConfig(estimate_tokens=lambda _m: bad))
        with pytest.raises(EstimatorError):
            estimate(_user("abcd"))

    def test_estimator_error_is_engine_error(self):
        """Verify estimator failures are classified as engine errors."""
        estimate = resolve_estimator(TokenBudgetConfig(estimate_tokens=lambda _m: -3))
        with pytest.raises(EngineError) as exc_info:
            estimate(_user("abcd"))
        assert exc_info.value.kind == "engine"
