"""Exception types raised by the rules engines."""

from __future__ import annotations

from dataclasses import dataclass

from rules.errors import RulesError


@dataclass
class ErrorDetails:
    """Structured metadata associated with an exception."""

    code: str
    message: str


class RulesEngineError(RulesError):
    """Base class for errors raised by an engine pass."""

    error_code = "ERR_RULES_ENGINE"

    def __init__(self, message: str, *, details: ErrorDetails | None = None) -> None:
        super().__init__(message)
        self.details = details or ErrorDetails(code=self.error_code, message=message)

    @property
    def code(self) -> str:
        return self.details.code


class InvalidInvocationError(RulesEngineError, ValueError):
    """Raised when ``fire`` or ``check`` is called without rules or facts."""

    error_code = "ERR_INVALID_INVOCATION"


class InferenceLimitExceeded(RulesEngineError):
    """Raised when an inference pass runs more cycles than allowed."""

    error_code = "ERR_INFERENCE_LIMIT"

    def __init__(self, max_cycles: int) -> None:
        super().__init__(f"Inference did not settle after {max_cycles} cycles")
        self.max_cycles = max_cycles


__all__ = [
    "ErrorDetails",
    "InferenceLimitExceeded",
    "InvalidInvocationError",
    "RulesEngineError",
]
