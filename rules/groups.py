"""Composite rules that group several rules behind a single rule interface."""

from __future__ import annotations

from typing import List, Optional, Union

from .errors import InvalidRuleGroupError
from .facts import Facts
from .rule import DEFAULT_DESCRIPTION, DEFAULT_PRIORITY, BasicRule, Rule
from .rule_set import Rules


class CompositeRule(BasicRule):
    """Base class for rule groups; members iterate in priority order."""

    def __init__(
        self,
        name: str,
        description: str = DEFAULT_DESCRIPTION,
        priority: int = DEFAULT_PRIORITY,
    ) -> None:
        super().__init__(name, description, priority)
        self._members = Rules()

    def add_rule(self, rule: Rule) -> None:
        self._members.register(rule)

    def remove_rule(self, rule: Union[Rule, str]) -> None:
        self._members.unregister(rule)

    @property
    def members(self) -> List[Rule]:
        return self._members.ordered()


class UnitRuleGroup(CompositeRule):
    """All or nothing: applies only when every member evaluates to ``True``."""

    def evaluate(self, facts: Facts) -> bool:
        members = self.members
        if not members:
            return False
        return all(rule.evaluate(facts) for rule in members)

    def execute(self, facts: Facts) -> None:
        for rule in self.members:
            rule.execute(facts)


class ActivationRuleGroup(CompositeRule):
    """XOR group: the first member evaluating to ``True`` is the only one executed."""

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._selected: Optional[Rule] = None

    def evaluate(self, facts: Facts) -> bool:
        self._selected = None
        for rule in self.members:
            if rule.evaluate(facts):
                self._selected = rule
                return True
        return False

    def execute(self, facts: Facts) -> None:
        if self._selected is not None:
            self._selected.execute(facts)


class ConditionalRuleGroup(CompositeRule):
    """The highest precedence member gates the others.

    When the gating rule evaluates to ``True``, every other member that also
    evaluates to ``True`` is selected and executed after it.
    """

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._selected: List[Rule] = []

    def evaluate(self, facts: Facts) -> bool:
        self._selected = []
        conditional = self._conditional_rule()
        if not conditional.evaluate(facts):
            return False
        self._selected = [
            rule for rule in self.members if rule is not conditional and rule.evaluate(facts)
        ]
        return True

    def execute(self, facts: Facts) -> None:
        self._conditional_rule().execute(facts)
        for rule in self._selected:
            rule.execute(facts)

    def _conditional_rule(self) -> Rule:
        members = self.members
        if not members:
            raise InvalidRuleGroupError(self.name, "group has no rules")
        head = members[0]
        if len(members) > 1 and members[1].priority == head.priority:
            raise InvalidRuleGroupError(
                self.name,
                f"rules '{head.name}' and '{members[1].name}' share the highest priority {head.priority}",
            )
        return head


__all__ = [
    "ActivationRuleGroup",
    "CompositeRule",
    "ConditionalRuleGroup",
    "UnitRuleGroup",
]
