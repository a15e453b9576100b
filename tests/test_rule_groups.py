import pytest

from rules.builder import RuleBuilder
from rules.errors import InvalidRuleGroupError
from rules.facts import Facts
from rules.groups import ActivationRuleGroup, ConditionalRuleGroup, UnitRuleGroup


def make_rule(name: str, priority: int, applies: bool, log: list[str]):
    return (
        RuleBuilder()
        .name(name)
        .priority(priority)
        .when(lambda facts: applies)
        .then(lambda facts: log.append(name))
        .build()
    )


def test_unit_group_requires_every_member() -> None:
    log: list[str] = []
    group = UnitRuleGroup("unit")
    group.add_rule(make_rule("b", 2, True, log))
    group.add_rule(make_rule("a", 1, True, log))
    facts = Facts()

    assert group.evaluate(facts) is True
    group.execute(facts)
    assert log == ["a", "b"]

    group.add_rule(make_rule("c", 3, False, log))
    assert group.evaluate(facts) is False


def test_empty_unit_group_does_not_apply() -> None:
    assert UnitRuleGroup("unit").evaluate(Facts()) is False


def test_activation_group_executes_first_applicable_member() -> None:
    log: list[str] = []
    group = ActivationRuleGroup("xor")
    group.add_rule(make_rule("skipped", 1, False, log))
    group.add_rule(make_rule("selected", 2, True, log))
    group.add_rule(make_rule("also", 3, True, log))
    facts = Facts()

    assert group.evaluate(facts) is True
    group.execute(facts)
    assert log == ["selected"]


def test_activation_group_without_match() -> None:
    log: list[str] = []
    group = ActivationRuleGroup("xor")
    group.add_rule(make_rule("a", 1, False, log))

    assert group.evaluate(Facts()) is False
    group.execute(Facts())
    assert log == []


def test_conditional_group_gates_other_members() -> None:
    log: list[str] = []
    group = ConditionalRuleGroup("conditional")
    group.add_rule(make_rule("gate", 0, True, log))
    group.add_rule(make_rule("later", 5, True, log))
    group.add_rule(make_rule("off", 3, False, log))
    group.add_rule(make_rule("sooner", 2, True, log))
    facts = Facts()

    assert group.evaluate(facts) is True
    group.execute(facts)
    assert log == ["gate", "sooner", "later"]


def test_conditional_group_closed_gate() -> None:
    log: list[str] = []
    group = ConditionalRuleGroup("conditional")
    group.add_rule(make_rule("gate", 0, False, log))
    group.add_rule(make_rule("member", 1, True, log))

    assert group.evaluate(Facts()) is False


def test_conditional_group_rejects_ambiguous_gate() -> None:
    log: list[str] = []
    group = ConditionalRuleGroup("conditional")
    group.add_rule(make_rule("a", 0, True, log))
    group.add_rule(make_rule("b", 0, True, log))

    with pytest.raises(InvalidRuleGroupError):
        group.evaluate(Facts())


def test_members_can_be_removed() -> None:
    log: list[str] = []
    group = UnitRuleGroup("unit")
    group.add_rule(make_rule("a", 1, True, log))
    group.add_rule(make_rule("b", 2, False, log))
    group.remove_rule("b")

    assert [rule.name for rule in group.members] == ["a"]
    assert group.evaluate(Facts()) is True
