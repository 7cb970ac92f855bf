# Copyright (c) 2026 Heureum AI. All rights reserved.

"""JSON reports and shared helpers for the compression tools."""
import json
import logging
from typing import Any, Dict, Optional

from pydantic import ValidationError

from slimcontext_mcp.compaction.settings import TokenEstimator
from slimcontext_mcp.compaction.tokens import make_tiktoken_estimator
from slimcontext_mcp.config import settings
from slimcontext_mcp.errors import SlimContextError

logger = logging.getLogger(__name__)


def success_report(report: Dict[str, Any]) -> str:
    """Serialize a success report."""
    return json.dumps(report, ensure_ascii=False, indent=2)


def error_report(tool: str, error: Exception) -> str:
    """Serialize a failure report.

    ``error_type`` names the failure class and ``error_kind`` groups it as
    validation, adapter, engine or unknown, so operators can tell a model
    outage from a misconfiguration.

    Args:
        tool (str): Name of the failing tool, for logging.
        error (Exception): The exception raised while handling the call.

    Returns:
        str: JSON string with ``success: false``.
    """
    if isinstance(error, ValidationError):
        error_type, error_kind = "ValidationError", "validation"
    elif isinstance(error, SlimContextError):
        error_type, error_kind = type(error).__name__, error.kind
    else:
        error_type, error_kind = "UnknownError", "unknown"

    logger.error("%s failed (%s): %s", tool, error_type, error)
    return json.dumps({
        "success": False,
        "error": str(error) or "Unknown error occurred",
        "error_type": error_type,
        "error_kind": error_kind,
    }, ensure_ascii=False, indent=2)


def configured_estimator() -> Optional[TokenEstimator]:
    """Token estimator selected by ``TOKEN_ESTIMATOR``.

    Returns:
        Optional[TokenEstimator]: A tiktoken estimator, or ``None`` to use
            the engine's default heuristic.
    """
    if settings.TOKEN_ESTIMATOR == "tiktoken":
        return make_tiktoken_estimator(settings.TIKTOKEN_MODEL)
    return None
