"""Error taxonomy for AI output handling.

Only ``RetryExhaustedError`` is meant to reach the HTTP layer for features that
go through the retry loop; the others are absorbed attempt by attempt.
"""


class AIOutputError(Exception):
    """Base class for everything raised by the AI output pipeline."""


class AIInvocationError(AIOutputError):
    """The generative call itself failed (config, HTTP status, transport)."""

    def __init__(self, message: str, kind: str = "network") -> None:
        super().__init__(message)
        self.kind = kind  # configuration | client | server | network


class ParseError(AIOutputError):
    """Normalized model text could not be decoded as JSON."""

    def __init__(self, message: str, raw_snippet: str = "") -> None:
        super().__init__(message)
        self.raw_snippet = raw_snippet


class ValidationError(AIOutputError):
    """Decoded JSON did not satisfy the feature's shape descriptor."""

    def __init__(self, reason: str, missing: list[str] | None = None) -> None:
        super().__init__(reason)
        self.reason = reason
        self.missing = missing or []


class RetryExhaustedError(AIOutputError):
    """Terminal failure after the attempt budget was spent."""

    def __init__(self, attempts: int, last_error: Exception | None, raw_snippet: str = "") -> None:
        detail = str(last_error) if last_error else "no attempts succeeded"
        super().__init__(f"AI output still invalid after {attempts} attempt(s): {detail}")
        self.attempts = attempts
        self.last_error = last_error
        self.raw_snippet = raw_snippet

    @property
    def cause(self) -> str:
        """``"invocation"`` when the AI call failed, ``"content"`` when it returned bad text."""
        if isinstance(self.last_error, AIInvocationError):
            return "invocation"
        return "content"
