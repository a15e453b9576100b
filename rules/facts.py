"""Named facts shared by every rule during a firing pass."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Iterator, Optional, Union

from .errors import InvalidFactError


@dataclass(frozen=True)
class Fact:
    """A single named value."""

    name: str
    value: Any

    def __post_init__(self) -> None:
        if self.name is None or self.name == "":
            raise InvalidFactError("Fact name must not be empty", name=self.name)

    def __str__(self) -> str:
        return f"Fact{{name='{self.name}', value={self.value!r}}}"


class Facts:
    """Ordered set of facts, unique by name.

    Overwriting an existing fact keeps its original position, so iteration
    always follows the order in which names were first seen.
    """

    def __init__(self, initial: Optional[Dict[str, Any]] = None) -> None:
        self._facts: Dict[str, Fact] = {}
        for name, value in (initial or {}).items():
            self.put(name, value)

    def put(self, name: str, value: Any) -> None:
        self.add(Fact(name, value))

    def add(self, fact: Fact) -> None:
        if fact is None:
            raise InvalidFactError("Fact must not be None")
        self._facts[fact.name] = fact

    def remove(self, fact: Union[str, Fact]) -> None:
        name = fact.name if isinstance(fact, Fact) else fact
        self._facts.pop(name, None)

    def get(self, name: str, default: Any = None) -> Any:
        fact = self._facts.get(name)
        return default if fact is None else fact.value

    def get_fact(self, name: str) -> Optional[Fact]:
        return self._facts.get(name)

    def as_dict(self) -> Dict[str, Any]:
        """Return a shallow ``{name: value}`` copy of the facts."""

        return {name: fact.value for name, fact in self._facts.items()}

    def clear(self) -> None:
        self._facts.clear()

    def __iter__(self) -> Iterator[Fact]:
        return iter(list(self._facts.values()))

    def __len__(self) -> int:
        return len(self._facts)

    def __contains__(self, name: object) -> bool:
        if isinstance(name, Fact):
            name = name.name
        return name in self._facts

    def __str__(self) -> str:
        return "[" + ", ".join(str(fact) for fact in self._facts.values()) + "]"

    def __repr__(self) -> str:
        return f"Facts({self.as_dict()!r})"


__all__ = ["Fact", "Facts"]
