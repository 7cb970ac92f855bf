# Copyright (c) 2026 Heureum AI. All rights reserved.

"""
Message partitioning.

Splits a conversation into messages that must survive compression and
messages that may be removed or summarized:

  protected: every system message, plus the trailing window of
      ``min_recent_messages`` messages regardless of role
  reducible: everything else, oldest first

A system message inside the trailing window is protected by the system rule;
it is counted once.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple

from slimcontext_mcp.errors import ConfigurationError
from slimcontext_mcp.models import Message, MessageRole


@dataclass(frozen=True)
class MessagePartition:
    """Positional split of a conversation.

    Attributes:
        messages (Tuple[Message, ...]): The partitioned conversation.
        protected_indices (Tuple[int, ...]): Ascending positions of
            protected messages.
        reducible_indices (Tuple[int, ...]): Ascending positions of
            reducible messages.
    """

    messages: Tuple[Message, ...]
    protected_indices: Tuple[int, ...]
    reducible_indices: Tuple[int, ...]

    @property
    def protected(self) -> List[Message]:
        """Protected messages in original order."""
        return [self.messages[i] for i in self.protected_indices]

    @property
    def reducible(self) -> List[Message]:
        """Reducible messages in original order."""
        return [self.messages[i] for i in self.reducible_indices]


def _recent_window_start(count: int, min_recent_messages: int) -> int:
    """First position of the protected trailing window."""
    return max(0, count - min_recent_messages)


def partition_messages(messages: List[Message], min_recent_messages: int) -> MessagePartition:
    """Classify messages into protected and reducible partitions.

    Args:
        messages (List[Message]): Conversation, oldest first.
        min_recent_messages (int): Size of the trailing window that is
            always protected.

    Returns:
        MessagePartition: The split. ``reducible_indices`` is empty when
            ``min_recent_messages >= len(messages)``.

    Raises:
        ConfigurationError: If ``min_recent_messages`` is negative.
    """
    if min_recent_messages < 0:
        raise ConfigurationError(
            f"min_recent_messages must be >= 0, got {min_recent_messages}"
        )

    tail_start = _recent_window_start(len(messages), min_recent_messages)
    protected: List[int] = []
    reducible: List[int] = []
    for i, msg in enumerate(messages):
        if msg.role == MessageRole.SYSTEM or i >= tail_start:
            protected.append(i)
        else:
            reducible.append(i)

    return MessagePartition(
        messages=tuple(messages),
        protected_indices=tuple(protected),
        reducible_indices=tuple(reducible),
    )
