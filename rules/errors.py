"""Custom exceptions raised by the rules API."""

from __future__ import annotations


class RulesError(Exception):
    """Base class for every error raised by the rules packages."""


class InvalidRuleError(ValueError, RulesError):
    """Raised when a rule cannot be registered in a rule set."""


class InvalidFactError(ValueError, RulesError):
    """Raised when a fact is created or stored with an invalid name."""

    def __init__(self, message: str, *, name: object = None) -> None:
        super().__init__(message)
        self.name = name


class InvalidParametersError(ValueError, RulesError):
    """Raised when engine parameters cannot be built from a payload."""


class InvalidRuleGroupError(ValueError, RulesError):
    """Raised when a composite rule is inconsistent."""

    def __init__(self, group_name: str, message: str) -> None:
        super().__init__(f"Rule group '{group_name}': {message}")
        self.group_name = group_name


__all__ = [
    "InvalidFactError",
    "InvalidParametersError",
    "InvalidRuleError",
    "InvalidRuleGroupError",
    "RulesError",
]
