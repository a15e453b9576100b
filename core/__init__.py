"""Rules engine implementations."""

from .base import RulesEngine
from .default_engine import DefaultRulesEngine, EvaluationOutcome, ExecutionOutcome
from .dispatch import RuleListenerChain, RulesEngineListenerChain
from .errors import ErrorDetails, InferenceLimitExceeded, InvalidInvocationError, RulesEngineError
from .inference_engine import InferenceRulesEngine
from .logging_config import setup_logging

__all__ = [
    "DefaultRulesEngine",
    "ErrorDetails",
    "EvaluationOutcome",
    "ExecutionOutcome",
    "InferenceLimitExceeded",
    "InferenceRulesEngine",
    "InvalidInvocationError",
    "RuleListenerChain",
    "RulesEngine",
    "RulesEngineError",
    "RulesEngineListenerChain",
    "setup_logging",
]
