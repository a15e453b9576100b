"""Public package interface for rules, facts, parameters and listeners."""

from .builder import RuleBuilder
from .errors import (
    InvalidFactError,
    InvalidParametersError,
    InvalidRuleError,
    InvalidRuleGroupError,
    RulesError,
)
from .facts import Fact, Facts
from .groups import ActivationRuleGroup, CompositeRule, ConditionalRuleGroup, UnitRuleGroup
from .listeners import RuleListener, RulesEngineListener
from .parameters import RulesEngineParameters, load_parameters
from .rule import (
    DEFAULT_DESCRIPTION,
    DEFAULT_NAME,
    DEFAULT_PRIORITY,
    MAX_PRIORITY,
    MIN_PRIORITY,
    Action,
    BasicRule,
    Condition,
    DefaultRule,
    Rule,
    always_false,
    always_true,
)
from .rule_set import Rules

__all__ = [
    "Action",
    "ActivationRuleGroup",
    "BasicRule",
    "CompositeRule",
    "Condition",
    "ConditionalRuleGroup",
    "DEFAULT_DESCRIPTION",
    "DEFAULT_NAME",
    "DEFAULT_PRIORITY",
    "DefaultRule",
    "Fact",
    "Facts",
    "InvalidFactError",
    "InvalidParametersError",
    "InvalidRuleError",
    "InvalidRuleGroupError",
    "MAX_PRIORITY",
    "MIN_PRIORITY",
    "Rule",
    "RuleBuilder",
    "RuleListener",
    "Rules",
    "RulesEngineListener",
    "RulesEngineParameters",
    "RulesError",
    "UnitRuleGroup",
    "always_false",
    "always_true",
    "load_parameters",
]
