# Copyright (c) 2026 Heureum AI. All rights reserved.

"""Error taxonomy for the compression engine.

Three kinds of failure are distinguished so that callers can tell an external
service problem from a misconfiguration:

  validation: input or configuration outside its declared domain
  adapter: the text-generation capability produced no usable content
  engine: an internal invariant was violated (e.g. a negative token cost)
"""

from typing import Optional


class SlimContextError(Exception):
    """Base class for all compression errors.

    Attributes:
        kind (str): Failure category reported to callers.
        cause (Optional[BaseException]): Underlying exception, if any.
    """

    kind = "engine"

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.cause = cause


class ConfigurationError(SlimContextError, ValueError):
    """A configuration field or argument is outside its declared domain."""

    kind = "validation"


class AdapterError(SlimContextError):
    """The text-generation adapter failed to return usable content."""

    kind = "adapter"


class OpenAIError(AdapterError):
    """The OpenAI chat completions call failed or returned no content."""


class EngineError(SlimContextError):
    """An internal invariant of the engine was violated."""

    kind = "engine"


class EstimatorError(EngineError):
    """A token estimator returned something other than a non-negative int."""
