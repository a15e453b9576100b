"""Observer interfaces notified by the engines during a firing pass.

Both listener kinds ship no-op defaults so implementations only override the
callbacks they care about.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .facts import Facts

if TYPE_CHECKING:  # pragma: no cover - typing only
    from .rule import Rule
    from .rule_set import Rules


class RuleListener:
    """Callbacks invoked around the evaluation and execution of each rule."""

    def before_evaluate(self, rule: "Rule", facts: Facts) -> bool:
        """Return ``False`` to skip ``rule`` for the current pass."""

        return True

    def after_evaluate(self, rule: "Rule", facts: Facts, evaluation_result: bool) -> None:
        pass

    def on_evaluation_error(self, rule: "Rule", facts: Facts, exception: Exception) -> None:
        pass

    def before_execute(self, rule: "Rule", facts: Facts) -> None:
        pass

    def on_success(self, rule: "Rule", facts: Facts) -> None:
        pass

    def on_failure(self, rule: "Rule", facts: Facts, exception: Exception) -> None:
        pass


class RulesEngineListener:
    """Callbacks invoked once around a whole firing or checking pass."""

    def before_evaluate(self, rules: "Rules", facts: Facts) -> None:
        pass

    def after_execute(self, rules: "Rules", facts: Facts) -> None:
        pass


__all__ = ["RuleListener", "RulesEngineListener"]
