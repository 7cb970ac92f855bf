# Copyright (c) 2026 Heureum AI. All rights reserved.

"""Integration tests: trim_messages / summarize_messages MCP tools with mocking."""

import json
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from slimcontext_mcp.config import settings
from slimcontext_mcp.errors import OpenAIError
from slimcontext_mcp.servers import create_server
from slimcontext_mcp.tools.compression.report import configured_estimator, error_report

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _make_server():
    """Create the slimcontext MCP server."""
    return create_server("slimcontext")


async def _call_tool(server, name: str, args: dict) -> dict:
    """Call a registered tool by name and return parsed JSON."""
    tools = server._tool_manager._tools
    result = await tools[name].fn(**args)
    return json.loads(result)


def _long_conversation(pairs: int = 5) -> list[dict]:
    """System prompt (6 tokens) followed by 102-token user/assistant turns."""
    msgs = [{"role": "system", "content": "You are helpful."}]
    for i in range(pairs):
        msgs.append({"role": "user", "content": f"{i}" * 400})
        msgs.append({"role": "assistant", "content": f"{i}" * 400})
    return msgs


def _mock_adapter_cls(text: str = "SUMMARY", side_effect=None) -> MagicMock:
    """Mock OpenAIChatAdapter class whose instances return *text*."""
    instance = MagicMock()
    instance.generate = AsyncMock(return_value=text, side_effect=side_effect)
    return MagicMock(return_value=instance)


# ---------------------------------------------------------------------------
# trim_messages
# ---------------------------------------------------------------------------


class TestTrimMessagesTool:
    """Tests for the trim_messages tool."""

    @pytest.mark.asyncio
    async def test_trims_oldest(self):
        """Verify counts, ratio and survivors of a trimmed conversation."""
        msgs = _long_conversation()
        # 6 + 10 * 102 = 1026 tokens, budget 350 -> drop 7
        data = await _call_tool(_make_server(), "trim_messages", {
            "messages": msgs,
            "max_model_tokens": 500,
            "threshold_percent": 0.7,
        })
        assert data["success"] is True
        assert data["original_message_count"] == 11
        assert data["compressed_message_count"] == 4
        assert data["messages_removed"] == 7
        assert data["compression_ratio"] == pytest.approx(4 / 11)
        assert data["compressed_messages"][0] == msgs[0]
        assert data["compressed_messages"][1:] == msgs[-3:]
        assert "summary_generated" not in data

    @pytest.mark.asyncio
    async def test_defaults_leave_small_conversation(self):
        """Verify a small conversation is returned unchanged with defaults."""
        msgs = [{"role": "user", "content": "hi"}, {"role": "assistant", "content": "hello"}]
        data = await _call_tool(_make_server(), "trim_messages", {"messages": msgs})
        assert data["success"] is True
        assert data["compressed_messages"] == msgs
        assert data["compression_ratio"] == 1.0

    @pytest.mark.asyncio
    async def test_human_role_normalized(self):
        """Verify the legacy human role is reported as user."""
        data = await _call_tool(_make_server(), "trim_messages", {
            "messages": [{"role": "human", "content": "hi"}],
        })
        assert data["compressed_messages"] == [{"role": "user", "content": "hi"}]

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "overrides",
        [
            {"messages": []},
            {"messages": [{"role": "robot", "content": "beep"}]},
            {"messages": [{"role": "user"}]},
            {"max_model_tokens": 0},
            {"threshold_percent": 1.5},
            {"threshold_percent": -0.1},
            {"min_recent_messages": -1},
        ],
    )
    async def test_validation_errors(self, overrides):
        """Verify malformed arguments produce a validation failure report."""
        args = {"messages": [{"role": "user", "content": "hi"}]}
        args.update(overrides)
        data = await _call_tool(_make_server(), "trim_messages", args)
        assert data["success"] is False
        assert data["error_type"] == "ValidationError"
        assert data["error_kind"] == "validation"
        assert data["error"]

    @pytest.mark.asyncio
    async def test_unexpected_error(self):
        """Verify unexpected exceptions are reported as UnknownError."""
        with patch(
            "slimcontext_mcp.tools.compression.trim.TrimCompressor.run",
            side_effect=RuntimeError("kaboom"),
        ):
            data = await _call_tool(_make_server(), "trim_messages", {
                "messages": [{"role": "user", "content": "hi"}],
            })
        assert data == {
            "success": False,
            "error": "kaboom",
            "error_type": "UnknownError",
            "error_kind": "unknown",
        }


# ---------------------------------------------------------------------------
# summarize_messages
# ---------------------------------------------------------------------------


class TestSummarizeMessagesTool:
    """Tests for the summarize_messages tool."""

    @pytest.mark.asyncio
    async def test_summarizes_span(self):
        """Verify the span is replaced by a single summary message."""
        adapter_cls = _mock_adapter_cls("SUMMARY")
        msgs = _long_conversation()
        with patch("slimcontext_mcp.tools.compression.summarize.OpenAIChatAdapter", adapter_cls):
            data = await _call_tool(_make_server(), "summarize_messages", {
                "messages": msgs,
                "max_model_tokens": 500,
                "threshold_percent": 0.7,
                "min_recent_messages": 2,
            })
        assert data["success"] is True
        assert data["summary_generated"] is True
        assert data["original_message_count"] == 11
        assert data["compressed_message_count"] == 5
        assert data["messages_removed"] == 6
        assert data["compressed_messages"][0] == msgs[0]
        assert data["compressed_messages"][1] == {"role": "system", "content": "SUMMARY"}
        assert data["compressed_messages"][2:] == msgs[-3:]

    @pytest.mark.asyncio
    async def test_adapter_built_from_arguments(self):
        """Verify the adapter receives key, model and sampling settings."""
        adapter_cls = _mock_adapter_cls()
        with patch("slimcontext_mcp.tools.compression.summarize.OpenAIChatAdapter", adapter_cls):
            await _call_tool(_make_server(), "summarize_messages", {
                "messages": _long_conversation(),
                "max_model_tokens": 500,
                "openai_api_key": "sk-explicit",
                "openai_model": "gpt-4.1-mini",
                "custom_prompt": "Just the facts.",
            })
        kwargs = adapter_cls.call_args.kwargs
        assert kwargs["api_key"] == "sk-explicit"
        assert kwargs["model"] == "gpt-4.1-mini"
        assert kwargs["temperature"] == settings.SUMMARY_TEMPERATURE
        assert kwargs["max_tokens"] == settings.SUMMARY_MAX_TOKENS
        sent = adapter_cls.return_value.generate.await_args.args[0]
        assert sent[0].content == "Just the facts."

    @pytest.mark.asyncio
    async def test_api_key_from_settings(self):
        """Verify the OPENAI_API_KEY setting is the fallback key."""
        adapter_cls = _mock_adapter_cls()
        with patch("slimcontext_mcp.tools.compression.summarize.OpenAIChatAdapter", adapter_cls), \
             patch.object(settings, "OPENAI_API_KEY", "sk-from-env"):
            await _call_tool(_make_server(), "summarize_messages", {"messages": _long_conversation()})
        assert adapter_cls.call_args.kwargs["api_key"] == "sk-from-env"

    @pytest.mark.asyncio
    async def test_missing_api_key(self):
        """Verify a missing key is a configuration failure, not an adapter one."""
        adapter_cls = _mock_adapter_cls()
        with patch("slimcontext_mcp.tools.compression.summarize.OpenAIChatAdapter", adapter_cls), \
             patch.object(settings, "OPENAI_API_KEY", ""):
            data = await _call_tool(_make_server(), "summarize_messages", {"messages": _long_conversation()})
        assert data["success"] is False
        assert data["error_type"] == "ConfigurationError"
        assert data["error_kind"] == "validation"
        assert "API key is required" in data["error"]
        adapter_cls.assert_not_called()

    @pytest.mark.asyncio
    async def test_under_budget_skips_model(self):
        """Verify no model call is made when compression is not needed."""
        adapter_cls = _mock_adapter_cls()
        msgs = [{"role": "user", "content": "hi"}]
        with patch("slimcontext_mcp.tools.compression.summarize.OpenAIChatAdapter", adapter_cls):
            data = await _call_tool(_make_server(), "summarize_messages", {"messages": msgs})
        assert data["success"] is True
        assert data["summary_generated"] is False
        assert data["compressed_messages"] == msgs
        adapter_cls.return_value.generate.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_adapter_failure(self):
        """Verify an adapter failure fails the call with an adapter report."""
        adapter_cls = _mock_adapter_cls(side_effect=OpenAIError("No content returned from OpenAI API"))
        with patch("slimcontext_mcp.tools.compression.summarize.OpenAIChatAdapter", adapter_cls):
            data = await _call_tool(_make_server(), "summarize_messages", {
                "messages": _long_conversation(),
                "max_model_tokens": 500,
            })
        assert data == {
            "success": False,
            "error": "No content returned from OpenAI API",
            "error_type": "OpenAIError",
            "error_kind": "adapter",
        }

    @pytest.mark.asyncio
    async def test_validation_error(self):
        """Verify malformed arguments are rejected before any model call."""
        adapter_cls = _mock_adapter_cls()
        with patch("slimcontext_mcp.tools.compression.summarize.OpenAIChatAdapter", adapter_cls):
            data = await _call_tool(_make_server(), "summarize_messages", {
                "messages": _long_conversation(),
                "threshold_percent": 2,
            })
        assert data["error_type"] == "ValidationError"
        adapter_cls.assert_not_called()


# ---------------------------------------------------------------------------
# Report helpers
# ---------------------------------------------------------------------------


class TestReportHelpers:
    """Tests for error_report and configured_estimator."""

    def test_error_report_empty_message(self):
        """Verify an exception without a message gets a generic one."""
        data = json.loads(error_report("trim_messages", RuntimeError()))
        assert data["error"] == "Unknown error occurred"

    def test_heuristic_estimator_by_default(self):
        """Verify the default setting defers to the engine heuristic."""
        with patch.object(settings, "TOKEN_ESTIMATOR", "heuristic"):
            assert configured_estimator() is None

    def test_tiktoken_estimator(self):
        """Verify TOKEN_ESTIMATOR=tiktoken builds an exact estimator."""
        with patch.object(settings, "TOKEN_ESTIMATOR", "tiktoken"), \
             patch("slimcontext_mcp.tools.compression.report.make_tiktoken_estimator") as factory:
            estimator = configured_estimator()
        factory.assert_called_once_with(settings.TIKTOKEN_MODEL)
        assert estimator is factory.return_value
