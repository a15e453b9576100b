"""Fluent builder for :class:`~rules.rule.DefaultRule`."""

from __future__ import annotations

from typing import List

from .rule import (
    DEFAULT_DESCRIPTION,
    DEFAULT_NAME,
    DEFAULT_PRIORITY,
    Action,
    Condition,
    DefaultRule,
    always_false,
)


class RuleBuilder:
    """Collects rule attributes and builds a :class:`DefaultRule`.

    Every setter returns the builder so calls can be chained::

        rule = (
            RuleBuilder()
            .name("weather")
            .when(lambda facts: facts.get("rain") is True)
            .then(lambda facts: facts.put("umbrella", True))
            .build()
        )
    """

    def __init__(self) -> None:
        self._name = DEFAULT_NAME
        self._description = DEFAULT_DESCRIPTION
        self._priority = DEFAULT_PRIORITY
        self._condition: Condition = always_false
        self._actions: List[Action] = []

    def name(self, name: str) -> "RuleBuilder":
        self._name = name
        return self

    def description(self, description: str) -> "RuleBuilder":
        self._description = description
        return self

    def priority(self, priority: int) -> "RuleBuilder":
        self._priority = priority
        return self

    def when(self, condition: Condition) -> "RuleBuilder":
        self._condition = condition
        return self

    def then(self, action: Action) -> "RuleBuilder":
        self._actions.append(action)
        return self

    def build(self) -> DefaultRule:
        return DefaultRule(
            name=self._name,
            description=self._description,
            priority=self._priority,
            condition=self._condition,
            actions=self._actions,
        )


__all__ = ["RuleBuilder"]
