# Copyright (c) 2026 Heureum AI. All rights reserved.

"""MCP Server configuration."""
from typing import Literal, Optional

from pydantic import BaseModel
from pydantic_settings import BaseSettings, SettingsConfigDict


class ServerConfig(BaseModel):
    """Per-server configuration.

    Attributes:
        name (str): Unique identifier for the server.
        host (str): Hostname or IP address to bind to (network transports).
        port (int): Port number to listen on (network transports).
        transport (str): Transport protocol: "stdio", "sse" or
            "streamable-http".
    """

    name: str
    host: str = "0.0.0.0"
    port: int = 3002
    transport: Literal["stdio", "sse", "streamable-http"] = "stdio"


class Settings(BaseSettings):
    """SlimContext MCP settings.

    Attributes:
        SERVERS (dict[str, ServerConfig]): Map of server key to configuration.
        OPENAI_API_KEY (str): Fallback API key for summarization when the
            tool call does not carry one.
        OPENAI_MODEL (str): Default model used for summarization.
        OPENAI_BASE_URL (Optional[str]): Alternative OpenAI-compatible
            endpoint.
        SUMMARY_TEMPERATURE (float): Sampling temperature for summaries.
        SUMMARY_MAX_TOKENS (int): Completion length cap for summaries.
        DEFAULT_MAX_MODEL_TOKENS (int): Default context window size.
        DEFAULT_THRESHOLD_PERCENT (float): Default compression threshold.
        TRIM_MIN_RECENT_MESSAGES (int): Default protected tail for trimming.
        SUMMARIZE_MIN_RECENT_MESSAGES (int): Default protected tail for
            summarization.
        TOKEN_ESTIMATOR (str): "heuristic" (chars/4) or "tiktoken".
        TIKTOKEN_MODEL (str): Model whose encoding tiktoken should use.
        LOG_LEVEL (str): Root log level for the server process.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    SERVERS: dict[str, ServerConfig] = {
        "slimcontext": ServerConfig(name="slimcontext-mcp-server"),
    }

    OPENAI_API_KEY: str = ""
    OPENAI_MODEL: str = "gpt-4o-mini"
    OPENAI_BASE_URL: Optional[str] = None
    SUMMARY_TEMPERATURE: float = 0.1
    SUMMARY_MAX_TOKENS: int = 1000

    DEFAULT_MAX_MODEL_TOKENS: int = 8192
    DEFAULT_THRESHOLD_PERCENT: float = 0.7
    TRIM_MIN_RECENT_MESSAGES: int = 2
    SUMMARIZE_MIN_RECENT_MESSAGES: int = 4

    TOKEN_ESTIMATOR: Literal["heuristic", "tiktoken"] = "heuristic"
    TIKTOKEN_MODEL: str = "gpt-4o"

    LOG_LEVEL: str = "INFO"


settings = Settings()
