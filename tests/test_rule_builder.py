import pytest

from rules.builder import RuleBuilder
from rules.facts import Facts
from rules.rule import (
    DEFAULT_DESCRIPTION,
    DEFAULT_NAME,
    DEFAULT_PRIORITY,
    MAX_PRIORITY,
    BasicRule,
    DefaultRule,
    Rule,
    always_true,
)


def test_builder_defaults() -> None:
    rule = RuleBuilder().build()

    assert rule.name == DEFAULT_NAME
    assert rule.description == DEFAULT_DESCRIPTION
    assert rule.priority == DEFAULT_PRIORITY == MAX_PRIORITY - 1
    assert rule.evaluate(Facts()) is False
    assert rule.actions == []


def test_builder_runs_actions_in_order() -> None:
    calls: list[str] = []
    rule = (
        RuleBuilder()
        .name("r")
        .description("desc")
        .priority(3)
        .when(lambda facts: facts.get("go") is True)
        .then(lambda facts: calls.append("first"))
        .then(lambda facts: calls.append("second"))
        .build()
    )
    facts = Facts({"go": True})

    assert isinstance(rule, DefaultRule)
    assert rule.evaluate(facts) is True
    rule.execute(facts)
    assert calls == ["first", "second"]


def test_failing_action_stops_remaining_actions() -> None:
    calls: list[str] = []

    def explode(facts: Facts) -> None:
        raise RuntimeError("boom")

    rule = DefaultRule("r", condition=always_true, actions=[explode, lambda facts: calls.append("never")])

    with pytest.raises(RuntimeError):
        rule.execute(Facts())
    assert calls == []


def test_basic_rule_identity_and_ordering() -> None:
    a = BasicRule("a", "d", 1)

    assert a == BasicRule("a", "d", 1)
    assert hash(a) == hash(BasicRule("a", "d", 1))
    assert a != BasicRule("a", "d", 2)
    assert sorted([BasicRule("b", priority=1), BasicRule("c", priority=0), a]) == [
        BasicRule("c", priority=0),
        a,
        BasicRule("b", priority=1),
    ]


def test_user_objects_satisfy_the_rule_protocol() -> None:
    class PlainRule:
        name = "plain"
        description = "plain rule"
        priority = 1

        def evaluate(self, facts: Facts) -> bool:
            return True

        def execute(self, facts: Facts) -> None:
            facts.put("plain", True)

    assert isinstance(PlainRule(), Rule)
    assert isinstance(BasicRule(), Rule)
