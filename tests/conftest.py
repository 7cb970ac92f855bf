# Copyright (c) 2026 Heureum AI. All rights reserved.

"""Shared test configuration and fixtures."""
import os
from typing import Callable, List, Optional
from unittest.mock import AsyncMock, MagicMock

import pytest

# Ensure test environment before settings are loaded
os.environ.setdefault("OPENAI_API_KEY", "test-key")
os.environ.setdefault("TOKEN_ESTIMATOR", "heuristic")

from slimcontext_mcp.models import Message, MessageRole  # noqa: E402


# ---------------------------------------------------------------------------
# Message factories
# ---------------------------------------------------------------------------


@pytest.fixture
def sample_message():
    """Factory fixture for creating Message instances."""

    def _factory(role: MessageRole = MessageRole.USER, content: str = "hello") -> Message:
        return Message(role=role, content=content)

    return _factory


@pytest.fixture
def conversation():
    """Factory fixture for a system prompt followed by user/assistant pairs."""

    def _factory(pairs: int = 10, system: Optional[str] = "You are helpful.") -> List[Message]:
        msgs: List[Message] = []
        if system is not None:
            msgs.append(Message(role=MessageRole.SYSTEM, content=system))
        for i in range(pairs):
            msgs.append(Message(role=MessageRole.USER, content=f"question {i}"))
            msgs.append(Message(role=MessageRole.ASSISTANT, content=f"answer {i}"))
        return msgs

    return _factory


# ---------------------------------------------------------------------------
# Estimator / adapter helpers
# ---------------------------------------------------------------------------


@pytest.fixture
def fixed_estimator() -> Callable[[int], Callable[[Message], int]]:
    """Factory fixture for estimators that charge a flat cost per message."""

    def _factory(tokens: int = 50) -> Callable[[Message], int]:
        return lambda _msg: tokens

    return _factory


@pytest.fixture
def mock_adapter():
    """Factory fixture for a mocked text-generation adapter."""

    def _factory(text: str = "Summary of conversation.", side_effect=None) -> MagicMock:
        adapter = MagicMock()
        adapter.generate = AsyncMock(return_value=text, side_effect=side_effect)
        return adapter

    return _factory
