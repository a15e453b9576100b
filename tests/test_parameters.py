import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from rules.errors import InvalidParametersError
from rules.parameters import RulesEngineParameters, load_parameters
from rules.rule import MAX_PRIORITY


def test_defaults() -> None:
    parameters = RulesEngineParameters()

    assert parameters.priority_threshold == MAX_PRIORITY
    assert parameters.skip_on_first_applied_rule is False
    assert parameters.skip_on_first_failed_rule is False
    assert parameters.skip_on_first_non_triggered_rule is False


def test_parameters_are_frozen() -> None:
    parameters = RulesEngineParameters()

    with pytest.raises(ValidationError):
        parameters.priority_threshold = 3  # type: ignore[misc]


def test_fluent_copies_leave_original_untouched() -> None:
    base = RulesEngineParameters()
    derived = (
        base.with_priority_threshold(10)
        .with_skip_on_first_applied_rule()
        .with_skip_on_first_failed_rule(True)
        .with_skip_on_first_non_triggered_rule(False)
    )

    assert base == RulesEngineParameters()
    assert derived.priority_threshold == 10
    assert derived.skip_on_first_applied_rule is True
    assert derived.skip_on_first_failed_rule is True
    assert derived.skip_on_first_non_triggered_rule is False


def test_unknown_keys_are_rejected() -> None:
    with pytest.raises(ValidationError):
        RulesEngineParameters.from_mapping({"skip_everything": True})


def test_from_mapping_requires_a_mapping() -> None:
    with pytest.raises(InvalidParametersError):
        RulesEngineParameters.from_mapping(["not", "a", "mapping"])


def test_load_parameters_from_json(tmp_path: Path) -> None:
    path = tmp_path / "engine.json"
    path.write_text(json.dumps({"parameters": {"priority_threshold": 5, "skip_on_first_failed_rule": True}}))

    parameters = load_parameters(path)

    assert parameters.priority_threshold == 5
    assert parameters.skip_on_first_failed_rule is True
    assert parameters.skip_on_first_applied_rule is False


def test_string_rendering_mentions_every_field() -> None:
    rendered = str(RulesEngineParameters(priority_threshold=4))

    assert "priority_threshold = 4" in rendered
    assert "skip_on_first_applied_rule = False" in rendered
    assert "skip_on_first_failed_rule = False" in rendered
    assert "skip_on_first_non_triggered_rule = False" in rendered


def test_keys_next_to_parameters_are_rejected() -> None:
    with pytest.raises(InvalidParametersError, match="threshold"):
        RulesEngineParameters.from_mapping({"parameters": {}, "threshold": 3})


def test_nested_parameters_key_is_not_followed() -> None:
    with pytest.raises(ValidationError):
        RulesEngineParameters.from_mapping({"parameters": {"parameters": {"priority_threshold": 1}}})


def test_parameters_value_must_be_a_mapping() -> None:
    with pytest.raises(InvalidParametersError):
        RulesEngineParameters.from_mapping({"parameters": [1, 2]})
