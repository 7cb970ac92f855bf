# Copyright (c) 2026 Heureum AI. All rights reserved.

"""Text-generation adapters used by the summarize strategy."""

from slimcontext_mcp.providers.base import TextGenerationAdapter, to_adapter_messages
from slimcontext_mcp.providers.langchain import LangChainChatAdapter
from slimcontext_mcp.providers.openai import DEFAULT_OPENAI_MODEL, OpenAIChatAdapter

__all__ = [
    "TextGenerationAdapter",
    "to_adapter_messages",
    "OpenAIChatAdapter",
    "LangChainChatAdapter",
    "DEFAULT_OPENAI_MODEL",
]
