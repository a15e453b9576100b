"""Forward-chaining engine: keeps firing applicable rules until none applies."""

from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Optional

from rules.facts import Facts
from rules.listeners import RuleListener
from rules.parameters import RulesEngineParameters
from rules.rule import Rule
from rules.rule_set import Rules

from .base import RulesEngine
from .default_engine import DefaultRulesEngine
from .errors import InferenceLimitExceeded

LOGGER = logging.getLogger(__name__)


class InferenceRulesEngine(RulesEngine):
    """Selects candidate rules on each cycle and fires them with a default engine.

    A cycle evaluates every rule against the current facts; the rules that
    apply are fired as a new rule set. Inference stops on the first cycle
    without candidates, so rule actions must eventually change the facts in
    a way that makes their conditions false. ``max_cycles`` bounds the number
    of cycles when that is not guaranteed.
    """

    def __init__(
        self,
        parameters: Optional[RulesEngineParameters] = None,
        *,
        max_cycles: Optional[int] = None,
    ) -> None:
        super().__init__(parameters)
        if max_cycles is not None and max_cycles < 1:
            raise ValueError("max_cycles must be a positive integer")
        self._max_cycles = max_cycles
        self._delegate = DefaultRulesEngine(self._parameters)

    @property
    def max_cycles(self) -> Optional[int]:
        return self._max_cycles

    def add_rule_listener(self, listener: RuleListener) -> None:
        super().add_rule_listener(listener)
        self._delegate.add_rule_listener(listener)

    def add_rule_listeners(self, listeners: Iterable[RuleListener]) -> None:
        for listener in listeners:
            self.add_rule_listener(listener)

    def fire(self, rules: Rules, facts: Facts) -> None:
        self._require_arguments(rules, facts)
        self._rules_engine_listeners.before_evaluate(rules, facts)
        cycles = 0
        while True:
            LOGGER.debug("Selecting candidate rules based on the following facts: %s", facts)
            candidates = self._select_candidates(rules, facts)
            if not candidates:
                LOGGER.debug("No candidate rules found for facts: %s", facts)
                break
            if self._max_cycles is not None and cycles >= self._max_cycles:
                raise InferenceLimitExceeded(self._max_cycles)
            cycles += 1
            self._delegate.fire(Rules(*candidates), facts)
        LOGGER.debug("Inference finished after %d cycle(s)", cycles)
        self._rules_engine_listeners.after_execute(rules, facts)

    def check(self, rules: Rules, facts: Facts) -> Dict[Rule, bool]:
        self._require_arguments(rules, facts)
        self._rules_engine_listeners.before_evaluate(rules, facts)
        result = self._delegate.check(rules, facts)
        self._rules_engine_listeners.after_execute(rules, facts)
        return result

    @staticmethod
    def _select_candidates(rules: Rules, facts: Facts) -> List[Rule]:
        return [rule for rule in rules if rule.evaluate(facts)]


__all__ = ["InferenceRulesEngine"]
