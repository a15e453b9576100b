"""Pydantic model holding the parameters of a rules engine."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict, Field

from .errors import InvalidParametersError
from .rule import MAX_PRIORITY


class RulesEngineParameters(BaseModel):
    """Loop termination policies and the priority threshold.

    Instances are frozen; use the ``with_*`` helpers to derive a modified copy.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    priority_threshold: int = Field(
        default=MAX_PRIORITY,
        description="Rules with a priority strictly greater than this stop the pass",
    )
    skip_on_first_applied_rule: bool = False
    skip_on_first_failed_rule: bool = False
    skip_on_first_non_triggered_rule: bool = False

    # ------------------------------------------------------------- fluent copies
    def with_priority_threshold(self, priority_threshold: int) -> "RulesEngineParameters":
        return self._replace(priority_threshold=priority_threshold)

    def with_skip_on_first_applied_rule(self, flag: bool = True) -> "RulesEngineParameters":
        return self._replace(skip_on_first_applied_rule=flag)

    def with_skip_on_first_failed_rule(self, flag: bool = True) -> "RulesEngineParameters":
        return self._replace(skip_on_first_failed_rule=flag)

    def with_skip_on_first_non_triggered_rule(self, flag: bool = True) -> "RulesEngineParameters":
        return self._replace(skip_on_first_non_triggered_rule=flag)

    def _replace(self, **changes: Any) -> "RulesEngineParameters":
        # model_copy skips validation, so rebuild through the validator instead.
        return type(self).model_validate({**self.model_dump(), **changes})

    # ------------------------------------------------------------------ loading
    @classmethod
    def from_mapping(cls, payload: Any) -> "RulesEngineParameters":
        if not isinstance(payload, Mapping):
            raise InvalidParametersError(
                f"Engine parameters must be a mapping, got {type(payload).__name__}"
            )
        if "parameters" in payload:
            extra = sorted(str(key) for key in payload if key != "parameters")
            if extra:
                raise InvalidParametersError(
                    f"Unexpected keys next to 'parameters': {', '.join(extra)}"
                )
            payload = payload["parameters"]
            if not isinstance(payload, Mapping):
                raise InvalidParametersError(
                    f"Engine parameters must be a mapping, got {type(payload).__name__}"
                )
        return cls.model_validate(dict(payload))

    def __str__(self) -> str:
        return (
            "Engine parameters { "
            f"priority_threshold = {self.priority_threshold}, "
            f"skip_on_first_applied_rule = {self.skip_on_first_applied_rule}, "
            f"skip_on_first_failed_rule = {self.skip_on_first_failed_rule}, "
            f"skip_on_first_non_triggered_rule = {self.skip_on_first_non_triggered_rule} }}"
        )


def load_parameters(path: Path) -> RulesEngineParameters:
    """Read engine parameters from a JSON file on disk."""

    payload = json.loads(Path(path).read_text())
    return RulesEngineParameters.from_mapping(payload)


__all__ = ["RulesEngineParameters", "load_parameters"]
