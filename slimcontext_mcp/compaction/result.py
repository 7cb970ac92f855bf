# Copyright (c) 2026 Heureum AI. All rights reserved.

"""Result contract shared by both compression strategies."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from slimcontext_mcp.models import Message, messages_to_dicts


@dataclass(frozen=True)
class CompressionResult:
    """Outcome of one compression call.

    Attributes:
        messages (List[Message]): Compressed conversation, oldest first.
        original_count (int): Number of messages in the input.
        summary (Optional[Message]): Synthetic system message inserted by
            the summarize strategy, if one was generated.
    """

    messages: List[Message]
    original_count: int
    summary: Optional[Message] = None

    @property
    def compressed_count(self) -> int:
        return len(self.messages)

    @property
    def removed_count(self) -> int:
        return self.original_count - self.compressed_count

    @property
    def compression_ratio(self) -> float:
        """``compressed_count / original_count`` (1.0 for an empty input)."""
        if not self.original_count:
            return 1.0
        return self.compressed_count / self.original_count

    @property
    def summary_generated(self) -> bool:
        return self.summary is not None

    def to_report(self, include_summary_flag: bool = False) -> Dict[str, Any]:
        """Serialize to the success report returned by the MCP tools.

        Args:
            include_summary_flag (bool): Add ``summary_generated`` to the
                report. Defaults to ``False``.

        Returns:
            Dict[str, Any]: JSON-serializable report.
        """
        report: Dict[str, Any] = {
            "success": True,
            "original_message_count": self.original_count,
            "compressed_message_count": self.compressed_count,
            "messages_removed": self.removed_count,
        }
        if include_summary_flag:
            report["summary_generated"] = self.summary_generated
        report["compression_ratio"] = self.compression_ratio
        report["compressed_messages"] = messages_to_dicts(self.messages)
        return report
