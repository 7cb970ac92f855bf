# Copyright (c) 2026 Heureum AI. All rights reserved.

"""OpenAI chat completions adapter.

Sends the summarization request with a low temperature and a bounded
completion length. Every failure surfaces as ``OpenAIError`` so callers can
tell a model/service problem from an engine problem.
"""

import logging
from typing import Optional, Sequence

from openai import AsyncOpenAI

from slimcontext_mcp.errors import OpenAIError
from slimcontext_mcp.models import Message
from slimcontext_mcp.providers.base import to_adapter_messages

logger = logging.getLogger(__name__)

DEFAULT_OPENAI_MODEL = "gpt-4o-mini"


class OpenAIChatAdapter:
    """Text-generation adapter backed by ``AsyncOpenAI``.

    Attributes:
        model (str): Chat completions model name.
        temperature (float): Sampling temperature.
        max_tokens (int): Completion length cap.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        model: str = DEFAULT_OPENAI_MODEL,
        *,
        temperature: float = 0.1,
        max_tokens: int = 1000,
        base_url: Optional[str] = None,
        client: Optional[AsyncOpenAI] = None,
    ):
        """Create the adapter.

        Args:
            api_key (Optional[str]): OpenAI API key. Ignored when *client*
                is given.
            model (str): Chat completions model name. Defaults to
                ``"gpt-4o-mini"``.
            temperature (float): Sampling temperature. Defaults to 0.1.
            max_tokens (int): Completion length cap. Defaults to 1000.
            base_url (Optional[str]): Alternative API base URL.
            client (Optional[AsyncOpenAI]): Pre-built client, mainly for
                tests.
        """
        self._client = client or AsyncOpenAI(api_key=api_key, base_url=base_url)
        self.model = model
        self.temperature = temperature
        self.max_tokens = max_tokens

    async def generate(self, messages: Sequence[Message]) -> str:
        """Run one chat completion and return its text.

        Args:
            messages (Sequence[Message]): Conversation to send.

        Returns:
            str: Content of the first choice.

        Raises:
            OpenAIError: If the API call fails or returns no content.
        """
        payload = [
            {"role": m.role.value, "content": m.content}
            for m in to_adapter_messages(messages)
        ]
        try:
            response = await self._client.chat.completions.create(
                model=self.model,
                messages=payload,
                temperature=self.temperature,
                max_tokens=self.max_tokens,
            )
        except Exception as e:
            logger.error("OpenAI API error (%s): %s", type(e).__name__, e)
            raise OpenAIError(f"OpenAI API error: {e}", e) from e

        content = response.choices[0].message.content if response.choices else None
        if not content:
            raise OpenAIError("No content returned from OpenAI API")
        return content
