# Copyright (c) 2026 Heureum AI. All rights reserved.

"""Shared message models for the compression engine."""

from enum import Enum
from typing import Dict, List, Sequence

from pydantic import BaseModel, ConfigDict


class MessageRole(str, Enum):
    """Message role enumeration.

    Attributes:
        SYSTEM (str): System instruction role. Never removed by compression.
        USER (str): User role.
        ASSISTANT (str): Assistant role.
        TOOL (str): Tool result role. Sent to text-generation adapters as
            ``assistant``.
        HUMAN (str): Legacy alias of ``user``, normalized before processing.
    """

    SYSTEM = "system"
    USER = "user"
    ASSISTANT = "assistant"
    TOOL = "tool"
    HUMAN = "human"


class Message(BaseModel):
    """Immutable chat message.

    Attributes:
        role (MessageRole): The role of the message sender.
        content (str): The text content of the message.
    """

    model_config = ConfigDict(frozen=True)

    role: MessageRole
    content: str

    def with_role(self, role: MessageRole) -> "Message":
        """Return a copy of this message with a different role.

        Args:
            role (MessageRole): Role for the copy.

        Returns:
            Message: ``self`` when the role is unchanged, otherwise a new
                message carrying the same content.
        """
        if role == self.role:
            return self
        return Message(role=role, content=self.content)

    def to_dict(self) -> Dict[str, str]:
        """Plain ``{"role", "content"}`` mapping for JSON reports."""
        return {"role": self.role.value, "content": self.content}


def normalize_human_roles(messages: List[Message]) -> List[Message]:
    """Map the legacy ``human`` role to ``user``.

    Args:
        messages (List[Message]): Conversation to normalize.

    Returns:
        List[Message]: The same list object when no message uses the
            ``human`` role, otherwise a new list with those messages copied
            as ``user`` messages.
    """
    if not any(m.role == MessageRole.HUMAN for m in messages):
        return messages
    return [
        m.with_role(MessageRole.USER) if m.role == MessageRole.HUMAN else m
        for m in messages
    ]


def messages_to_dicts(messages: Sequence[Message]) -> List[Dict[str, str]]:
    """Serialize messages for a JSON report."""
    return [m.to_dict() for m in messages]
