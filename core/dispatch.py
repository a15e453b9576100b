"""Ordered listener chains owned by a single engine instance.

Listeners are called synchronously in registration order. Nothing is caught
here: an exception raised by a listener aborts the remaining dispatch and
propagates to whoever triggered the chain.
"""

from __future__ import annotations

from typing import Generic, Iterable, Iterator, List, TypeVar

from rules.facts import Facts
from rules.listeners import RuleListener, RulesEngineListener
from rules.rule import Rule
from rules.rule_set import Rules

ListenerT = TypeVar("ListenerT")


class _ListenerChain(Generic[ListenerT]):
    def __init__(self) -> None:
        self._listeners: List[ListenerT] = []

    def add(self, listener: ListenerT) -> None:
        if listener is None:
            raise ValueError("Listener must not be None")
        self._listeners.append(listener)

    def extend(self, listeners: Iterable[ListenerT]) -> None:
        for listener in listeners:
            self.add(listener)

    @property
    def listeners(self) -> List[ListenerT]:
        return list(self._listeners)

    def __iter__(self) -> Iterator[ListenerT]:
        return iter(self._listeners)

    def __len__(self) -> int:
        return len(self._listeners)


class RuleListenerChain(_ListenerChain[RuleListener]):
    """Dispatches the per-rule callbacks."""

    def before_evaluate(self, rule: Rule, facts: Facts) -> bool:
        # all() stops at the first listener vetoing the rule.
        return all(listener.before_evaluate(rule, facts) for listener in self._listeners)

    def after_evaluate(self, rule: Rule, facts: Facts, evaluation_result: bool) -> None:
        for listener in self._listeners:
            listener.after_evaluate(rule, facts, evaluation_result)

    def on_evaluation_error(self, rule: Rule, facts: Facts, exception: Exception) -> None:
        for listener in self._listeners:
            listener.on_evaluation_error(rule, facts, exception)

    def before_execute(self, rule: Rule, facts: Facts) -> None:
        for listener in self._listeners:
            listener.before_execute(rule, facts)

    def on_success(self, rule: Rule, facts: Facts) -> None:
        for listener in self._listeners:
            listener.on_success(rule, facts)

    def on_failure(self, rule: Rule, facts: Facts, exception: Exception) -> None:
        for listener in self._listeners:
            listener.on_failure(rule, facts, exception)


class RulesEngineListenerChain(_ListenerChain[RulesEngineListener]):
    """Dispatches the callbacks wrapping a whole pass."""

    def before_evaluate(self, rules: Rules, facts: Facts) -> None:
        for listener in self._listeners:
            listener.before_evaluate(rules, facts)

    def after_execute(self, rules: Rules, facts: Facts) -> None:
        for listener in self._listeners:
            listener.after_execute(rules, facts)


__all__ = ["RuleListenerChain", "RulesEngineListenerChain"]
