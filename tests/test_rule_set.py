"""Tests for rule ordering and rule sets."""

import itertools

import pytest

from validation_rules.domain.entities import RuleSet, ValidateRule, group_rules, sort_rules
from validation_rules.domain.errors import AmbiguousRuleScopeError


def _rule(rule_id, sort_order, field=None, type_name="Order"):
    return ValidateRule(id=rule_id, type=type_name, field=field, sort_order=sort_order)


def test_sort_rules_orders_by_sort_order_then_id():
    rules = [_rule(4, 10), _rule(2, 0), _rule(3, 5), _rule(1, 5)]

    assert [rule.id for rule in sort_rules(rules)] == [2, 1, 3, 4]


def test_sort_order_is_total_for_any_input_order():
    rules = [_rule(1, 1), _rule(2, 1), _rule(3, 0), _rule(4, -1)]
    expected = [4, 3, 1, 2]

    for permutation in itertools.permutations(rules):
        assert [rule.id for rule in sort_rules(permutation)] == expected


def test_rule_set_iterates_in_resolution_order():
    rule_set = RuleSet("Order", "Total", [_rule(9, 2, "Total"), _rule(3, 2, "Total"), _rule(5, 1, "Total")])

    assert [rule.id for rule in rule_set] == [5, 3, 9]
    assert len(rule_set) == 3
    assert rule_set.key == ("Order", "Total")
    assert not rule_set.is_type_level


def test_empty_rule_set_is_type_level():
    rule_set = RuleSet("Order", "")

    assert rule_set.field is None
    assert rule_set.is_type_level
    assert list(rule_set) == []


@pytest.mark.parametrize(
    "rule",
    [
        _rule(1, 0, "Total"),
        _rule(1, 0, None, type_name="Customer"),
    ],
)
def test_rule_set_rejects_rules_of_another_scope(rule):
    rule_set = RuleSet("Order")

    with pytest.raises(AmbiguousRuleScopeError):
        rule_set.add(rule)


def test_group_rules_keys_by_type_and_field():
    rules = [
        _rule(1, 10, "Total"),
        _rule(2, 0),
        _rule(3, 5, "Total"),
        _rule(4, 1, "Email", type_name="Customer"),
    ]

    groups = group_rules(rules)

    assert list(groups) == [("Order", ""), ("Customer", "Email"), ("Order", "Total")]
    assert [rule.id for rule in groups[("Order", "Total")]] == [3, 1]
