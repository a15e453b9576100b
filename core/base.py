"""Base class shared by the rules engine implementations."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Dict, Iterable, List, Optional

from rules.facts import Facts
from rules.listeners import RuleListener, RulesEngineListener
from rules.parameters import RulesEngineParameters
from rules.rule import Rule
from rules.rule_set import Rules

from .dispatch import RuleListenerChain, RulesEngineListenerChain
from .errors import InvalidInvocationError


class RulesEngine(ABC):
    """Holds the parameters and listener chains of one engine instance.

    Listener registration is append-only and meant to happen outside of an
    in-flight pass. Engines perform no locking; share an instance across
    threads only with external synchronisation.
    """

    def __init__(self, parameters: Optional[RulesEngineParameters] = None) -> None:
        self._parameters = parameters if parameters is not None else RulesEngineParameters()
        self._rule_listeners = RuleListenerChain()
        self._rules_engine_listeners = RulesEngineListenerChain()

    @property
    def parameters(self) -> RulesEngineParameters:
        return self._parameters

    @property
    def rule_listeners(self) -> List[RuleListener]:
        return self._rule_listeners.listeners

    @property
    def rules_engine_listeners(self) -> List[RulesEngineListener]:
        return self._rules_engine_listeners.listeners

    # ------------------------------------------------------------ registration
    def add_rule_listener(self, listener: RuleListener) -> None:
        self._rule_listeners.add(listener)

    def add_rule_listeners(self, listeners: Iterable[RuleListener]) -> None:
        self._rule_listeners.extend(listeners)

    def add_rules_engine_listener(self, listener: RulesEngineListener) -> None:
        self._rules_engine_listeners.add(listener)

    def add_rules_engine_listeners(self, listeners: Iterable[RulesEngineListener]) -> None:
        self._rules_engine_listeners.extend(listeners)

    # -------------------------------------------------------------- operations
    @abstractmethod
    def fire(self, rules: Rules, facts: Facts) -> None:
        """Evaluate ``rules`` against ``facts`` and execute those that apply."""

    def check(self, rules: Rules, facts: Facts) -> Dict[Rule, bool]:
        """Evaluate ``rules`` without executing them."""

        raise NotImplementedError(f"{type(self).__name__} does not support check()")

    @staticmethod
    def _require_arguments(rules: Optional[Rules], facts: Optional[Facts]) -> None:
        if rules is None:
            raise InvalidInvocationError("Rules are not allowed to be None.")
        if facts is None:
            raise InvalidInvocationError("Facts are not allowed to be None.")


__all__ = ["RulesEngine"]
