"""Ordered, name-unique collection of rules."""

from __future__ import annotations

import logging
from typing import Dict, Iterator, List, Optional, Union

from .errors import InvalidRuleError
from .rule import Rule, validate_priority

LOGGER = logging.getLogger(__name__)


class Rules:
    """Set of rules iterated in ascending priority, ties in insertion order.

    Registering a rule whose name is already present replaces the previous
    rule; the replacement keeps the insertion slot of the rule it replaced.
    """

    def __init__(self, *rules: Rule) -> None:
        self._rules: Dict[str, Rule] = {}
        self.register(*rules)

    # --------------------------------------------------------------- mutation
    def register(self, *rules: Rule) -> None:
        for rule in rules:
            if rule is None:
                raise InvalidRuleError("Rule must not be None")
            validate_priority(rule.name, rule.priority)
            try:
                hash(rule)
            except TypeError as exc:
                raise InvalidRuleError(f"Rule '{rule.name}' must be hashable") from exc
            if rule.name in self._rules:
                LOGGER.debug("Rule '%s' replaces a previously registered rule", rule.name)
            self._rules[rule.name] = rule

    def unregister(self, *rules: Union[Rule, str]) -> None:
        for rule in rules:
            if rule is None:
                raise InvalidRuleError("Rule must not be None")
            name = rule if isinstance(rule, str) else rule.name
            self._rules.pop(name, None)

    def clear(self) -> None:
        self._rules.clear()

    # ----------------------------------------------------------------- access
    def get(self, name: str) -> Optional[Rule]:
        return self._rules.get(name)

    def is_empty(self) -> bool:
        return not self._rules

    def size(self) -> int:
        return len(self._rules)

    def ordered(self) -> List[Rule]:
        """Return the rules in firing order."""

        # sorted() is stable, so equal priorities keep dict insertion order.
        return sorted(self._rules.values(), key=lambda rule: rule.priority)

    def __iter__(self) -> Iterator[Rule]:
        return iter(self.ordered())

    def __len__(self) -> int:
        return len(self._rules)

    def __contains__(self, rule: object) -> bool:
        if isinstance(rule, str):
            return rule in self._rules
        name = getattr(rule, "name", None)
        return name is not None and self._rules.get(name) is rule

    def __repr__(self) -> str:
        return f"Rules({[rule.name for rule in self.ordered()]!r})"


__all__ = ["Rules"]
