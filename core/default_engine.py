"""Default rules engine: a single linear pass over a priority-ordered rule set.

Each rule goes through the same gates in order: priority threshold, listener
veto, evaluation, then execution when triggered. The three skip parameters
and the threshold can end the pass early; partial progress is expected.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Optional

from rules.facts import Facts
from rules.rule import Rule
from rules.rule_set import Rules

from .base import RulesEngine

LOGGER = logging.getLogger(__name__)


@dataclass(slots=True)
class EvaluationOutcome:
    """Result of calling ``rule.evaluate``: either a value or the raised error."""

    value: bool = False
    error: Optional[Exception] = None

    @property
    def failed(self) -> bool:
        return self.error is not None


@dataclass(slots=True)
class ExecutionOutcome:
    """Result of calling ``rule.execute``."""

    error: Optional[Exception] = None

    @property
    def failed(self) -> bool:
        return self.error is not None


def evaluate_rule(rule: Rule, facts: Facts) -> EvaluationOutcome:
    try:
        return EvaluationOutcome(value=bool(rule.evaluate(facts)))
    except Exception as exc:
        return EvaluationOutcome(error=exc)


def execute_rule(rule: Rule, facts: Facts) -> ExecutionOutcome:
    try:
        rule.execute(facts)
    except Exception as exc:
        return ExecutionOutcome(error=exc)
    return ExecutionOutcome()


class DefaultRulesEngine(RulesEngine):
    """Fires rules in their natural order, which is ascending priority."""

    def fire(self, rules: Rules, facts: Facts) -> None:
        self._require_arguments(rules, facts)
        self._rules_engine_listeners.before_evaluate(rules, facts)
        self._do_fire(rules, facts)
        self._rules_engine_listeners.after_execute(rules, facts)

    def check(self, rules: Rules, facts: Facts) -> Dict[Rule, bool]:
        self._require_arguments(rules, facts)
        self._rules_engine_listeners.before_evaluate(rules, facts)
        result = self._do_check(rules, facts)
        self._rules_engine_listeners.after_execute(rules, facts)
        return result

    # ----------------------------------------------------------------- internals
    def _do_fire(self, rules: Rules, facts: Facts) -> None:
        if rules.is_empty():
            LOGGER.warning("No rules registered! Nothing to apply")
            return
        parameters = self._parameters
        self._log_pass(rules, facts)
        LOGGER.debug("Rules evaluation started")
        for rule in rules:
            name = rule.name
            priority = rule.priority
            if priority > parameters.priority_threshold:
                LOGGER.debug(
                    "Rule priority threshold (%s) exceeded at rule '%s' with priority=%s, next rules will be skipped",
                    parameters.priority_threshold,
                    name,
                    priority,
                )
                break
            if not self._rule_listeners.before_evaluate(rule, facts):
                LOGGER.debug("Rule '%s' has been skipped before being evaluated", name)
                continue

            evaluation = evaluate_rule(rule, facts)
            if evaluation.failed:
                LOGGER.error("Rule '%s' evaluated with error", name, exc_info=evaluation.error)
                self._rule_listeners.on_evaluation_error(rule, facts, evaluation.error)
                if parameters.skip_on_first_non_triggered_rule:
                    LOGGER.debug("Next rules will be skipped since parameter skip_on_first_non_triggered_rule is set")
                    break
                continue

            if not evaluation.value:
                LOGGER.debug("Rule '%s' has been evaluated to false, it has not been executed", name)
                self._rule_listeners.after_evaluate(rule, facts, False)
                if parameters.skip_on_first_non_triggered_rule:
                    LOGGER.debug("Next rules will be skipped since parameter skip_on_first_non_triggered_rule is set")
                    break
                continue

            LOGGER.debug("Rule '%s' triggered", name)
            self._rule_listeners.after_evaluate(rule, facts, True)
            self._rule_listeners.before_execute(rule, facts)
            execution = execute_rule(rule, facts)
            if execution.failed:
                LOGGER.error("Rule '%s' performed with error", name, exc_info=execution.error)
                self._rule_listeners.on_failure(rule, facts, execution.error)
                if parameters.skip_on_first_failed_rule:
                    LOGGER.debug("Next rules will be skipped since parameter skip_on_first_failed_rule is set")
                    break
                continue

            LOGGER.debug("Rule '%s' performed successfully", name)
            self._rule_listeners.on_success(rule, facts)
            if parameters.skip_on_first_applied_rule:
                LOGGER.debug("Next rules will be skipped since parameter skip_on_first_applied_rule is set")
                break

    def _do_check(self, rules: Rules, facts: Facts) -> Dict[Rule, bool]:
        LOGGER.debug("Checking rules")
        result: Dict[Rule, bool] = {}
        for rule in rules:
            if self._rule_listeners.before_evaluate(rule, facts):
                # Evaluation errors are not contained here, unlike fire().
                result[rule] = bool(rule.evaluate(facts))
        return result

    def _log_pass(self, rules: Rules, facts: Facts) -> None:
        if not LOGGER.isEnabledFor(logging.DEBUG):
            return
        lines = [f"Engine parameters: {self._parameters}", "Registered rules:"]
        for rule in rules:
            lines.append(
                f"Rule {{ name = '{rule.name}', description = '{rule.description}', priority = '{rule.priority}'}}"
            )
        lines.append("Known facts:")
        lines.extend(str(fact) for fact in facts)
        LOGGER.debug("\n".join(lines))


__all__ = [
    "DefaultRulesEngine",
    "EvaluationOutcome",
    "ExecutionOutcome",
    "evaluate_rule",
    "execute_rule",
]
