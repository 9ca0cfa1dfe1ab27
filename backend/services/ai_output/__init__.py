"""Turning free-form model text into validated data."""

from services.ai_output.errors import (
    AIInvocationError,
    AIOutputError,
    ParseError,
    RetryExhaustedError,
    ValidationError,
)
from services.ai_output.retry import TextGenerator, run_with_retry
from services.ai_output.shapes import ShapeDescriptor, ValidationOutcome, validate
from services.ai_output.stripper import normalize_and_parse, strip_fences_and_boundaries

__all__ = [
    "AIInvocationError",
    "AIOutputError",
    "ParseError",
    "RetryExhaustedError",
    "ValidationError",
    "TextGenerator",
    "run_with_retry",
    "ShapeDescriptor",
    "ValidationOutcome",
    "validate",
    "normalize_and_parse",
    "strip_fences_and_boundaries",
]
