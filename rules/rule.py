"""Rule protocol and the basic rule implementations."""

from __future__ import annotations

from typing import Callable, Iterable, List, Optional, Protocol, runtime_checkable

from .errors import InvalidRuleError
from .facts import Facts

DEFAULT_NAME = "rule"
DEFAULT_DESCRIPTION = "description"
#: Priorities are signed 32-bit integers; the maximum is also the default threshold.
MIN_PRIORITY = -(2**31)
MAX_PRIORITY = 2**31 - 1
DEFAULT_PRIORITY = MAX_PRIORITY - 1

Condition = Callable[[Facts], bool]
Action = Callable[[Facts], None]


@runtime_checkable
class Rule(Protocol):
    """Interface every rule registered in a :class:`~rules.rule_set.Rules` must follow.

    Rules must be hashable, since ``check`` returns a mapping keyed by rule,
    and their priority must lie between ``MIN_PRIORITY`` and ``MAX_PRIORITY``.
    """

    @property
    def name(self) -> str:  # pragma: no cover - protocol
        ...

    @property
    def description(self) -> str:  # pragma: no cover - protocol
        ...

    @property
    def priority(self) -> int:  # pragma: no cover - protocol
        ...

    def evaluate(self, facts: Facts) -> bool:  # pragma: no cover - protocol
        """Return ``True`` when the rule should be applied to ``facts``."""
        ...

    def execute(self, facts: Facts) -> None:  # pragma: no cover - protocol
        """Apply the rule's effect. May raise."""
        ...


def always_true(facts: Facts) -> bool:
    return True


def always_false(facts: Facts) -> bool:
    return False


def validate_priority(name: str, priority: int) -> int:
    if isinstance(priority, bool) or not isinstance(priority, int):
        raise InvalidRuleError(f"Rule '{name}' priority must be an integer, got {priority!r}")
    if not MIN_PRIORITY <= priority <= MAX_PRIORITY:
        raise InvalidRuleError(
            f"Rule '{name}' priority {priority} is outside [{MIN_PRIORITY}, {MAX_PRIORITY}]"
        )
    return priority


class BasicRule:
    """Rule with identity fields only; subclasses override ``evaluate``/``execute``."""

    def __init__(
        self,
        name: str = DEFAULT_NAME,
        description: str = DEFAULT_DESCRIPTION,
        priority: int = DEFAULT_PRIORITY,
    ) -> None:
        self._name = name
        self._description = description
        self._priority = validate_priority(name, priority)

    @property
    def name(self) -> str:
        return self._name

    @property
    def description(self) -> str:
        return self._description

    @property
    def priority(self) -> int:
        return self._priority

    def evaluate(self, facts: Facts) -> bool:
        return False

    def execute(self, facts: Facts) -> None:
        return None

    def _key(self) -> tuple:
        return (self._name, self._description, self._priority)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BasicRule):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __lt__(self, other: "BasicRule") -> bool:
        if self.priority != other.priority:
            return self.priority < other.priority
        return self.name < other.name

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self._name!r}, priority={self._priority})"


class DefaultRule(BasicRule):
    """Rule built from a condition callable and an ordered list of actions."""

    def __init__(
        self,
        name: str = DEFAULT_NAME,
        description: str = DEFAULT_DESCRIPTION,
        priority: int = DEFAULT_PRIORITY,
        condition: Optional[Condition] = None,
        actions: Optional[Iterable[Action]] = None,
    ) -> None:
        super().__init__(name, description, priority)
        self._condition: Condition = condition or always_false
        self._actions: List[Action] = list(actions or [])

    @property
    def actions(self) -> List[Action]:
        return list(self._actions)

    def evaluate(self, facts: Facts) -> bool:
        return bool(self._condition(facts))

    def execute(self, facts: Facts) -> None:
        for action in self._actions:
            action(facts)


__all__ = [
    "Action",
    "BasicRule",
    "Condition",
    "DEFAULT_DESCRIPTION",
    "DEFAULT_NAME",
    "DEFAULT_PRIORITY",
    "DefaultRule",
    "MAX_PRIORITY",
    "MIN_PRIORITY",
    "Rule",
    "always_false",
    "always_true",
    "validate_priority",
]
