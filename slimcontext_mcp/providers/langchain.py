# Copyright (c) 2026 Heureum AI. All rights reserved.

"""LangChain chat model adapter."""

import logging
from typing import List, Sequence

from langchain_core.language_models import BaseChatModel
from langchain_core.messages import AIMessage, BaseMessage, HumanMessage, SystemMessage

from slimcontext_mcp.errors import AdapterError
from slimcontext_mcp.models import Message, MessageRole
from slimcontext_mcp.providers.base import to_adapter_messages

logger = logging.getLogger(__name__)


def _to_langchain(messages: Sequence[Message]) -> List[BaseMessage]:
    """Convert adapter-safe messages to LangChain message objects."""
    converted: List[BaseMessage] = []
    for msg in to_adapter_messages(messages):
        if msg.role == MessageRole.SYSTEM:
            converted.append(SystemMessage(content=msg.content))
        elif msg.role == MessageRole.ASSISTANT:
            converted.append(AIMessage(content=msg.content))
        else:
            converted.append(HumanMessage(content=msg.content))
    return converted


class LangChainChatAdapter:
    """Text-generation adapter wrapping any LangChain ``BaseChatModel``.

    Attributes:
        llm (BaseChatModel): The wrapped chat model.
    """

    def __init__(self, llm: BaseChatModel):
        self.llm = llm

    async def generate(self, messages: Sequence[Message]) -> str:
        """Invoke the chat model once and return its text content.

        Raises:
            AdapterError: If the model call fails or yields empty content.
        """
        try:
            response = await self.llm.ainvoke(_to_langchain(messages))
        except Exception as e:
            logger.error("Chat model error (%s): %s", type(e).__name__, e)
            raise AdapterError(f"Chat model error: {e}", e) from e

        content = response.content if isinstance(response.content, str) else str(response.content)
        if not content.strip():
            raise AdapterError("No content returned from chat model")
        return content
