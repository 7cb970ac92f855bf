# Copyright (c) 2026 Heureum AI. All rights reserved.

"""Text-generation adapter contract.

Adapters speak a three-role protocol (system / user / assistant). The engine
translates ``tool`` to ``assistant`` right before the call; nothing else in
the engine rewrites roles.
"""

from typing import List, Protocol, Sequence, runtime_checkable

from slimcontext_mcp.models import Message, MessageRole

_ADAPTER_ROLE_MAP = {
    MessageRole.TOOL: MessageRole.ASSISTANT,
    MessageRole.HUMAN: MessageRole.USER,
}


@runtime_checkable
class TextGenerationAdapter(Protocol):
    """Injected capability that turns a conversation into one text response."""

    async def generate(self, messages: Sequence[Message]) -> str:
        """Generate a single response for *messages*.

        Args:
            messages (Sequence[Message]): Conversation whose roles are all
                ``system``, ``user`` or ``assistant``.

        Returns:
            str: Non-empty generated text.

        Raises:
            AdapterError: If no content is produced or the call fails.
        """
        ...


def to_adapter_messages(messages: Sequence[Message]) -> List[Message]:
    """Translate roles for an adapter call.

    Args:
        messages (Sequence[Message]): Messages from the engine.

    Returns:
        List[Message]: Copies restricted to the adapter's role vocabulary
            (``tool`` becomes ``assistant``). Input messages are untouched.
    """
    return [m.with_role(_ADAPTER_ROLE_MAP.get(m.role, m.role)) for m in messages]
