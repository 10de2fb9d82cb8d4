"""Tests for the validation rule use cases."""

import pytest

from validation_rules.application.use_cases.validate_rules import (
    delete_validation_rules,
    get_validation_rules,
    get_validation_rules_by_ids,
    resolve_validation_rules,
    save_validation_rules,
    seed_declared_rules,
)
from validation_rules.application.use_cases.validate_rules.validators import (
    normalize_rule_ids,
)
from validation_rules.domain.entities import Validate, ValidateRequest, ValidateRule
from validation_rules.domain.registry import ValidationRuleRegistry


@pytest.fixture()
def registry():
    registry = ValidationRuleRegistry()
    registry.register_type("Order", ValidateRequest(all_conditions=["dto.total > 0", "dto.items"]))
    registry.register_field("Order", "email", Validate("Email"))
    return registry


def test_normalize_rule_ids():
    assert normalize_rule_ids([3, 1, 3, 2]) == [3, 1, 2]
    for invalid in ([0], [-1], [True], ["1"]):
        with pytest.raises(ValueError):
            normalize_rule_ids(invalid)


def test_save_get_and_delete(session):
    saved = save_validation_rules(
        session,
        [ValidateRule("B", type="Order", sort_order=2), ValidateRule("A", type="Order", sort_order=1)],
    )

    assert [rule.validator for _, rule in get_validation_rules(session, "Order")] == ["A", "B"]
    assert [rule.validator for rule in get_validation_rules_by_ids(session, [saved[0].id])] == ["B"]

    assert delete_validation_rules(session, [saved[0].id, saved[0].id]) == 1
    assert [rule.validator for _, rule in get_validation_rules(session, "Order")] == ["A"]


def test_resolve_includes_declared_rules_first(session, registry):
    save_validation_rules(session, [ValidateRule("Stored", type="Order", sort_order=-10)])

    entries = resolve_validation_rules(session, "Order", registry=registry)

    assert [(field, rule.validator) for field, rule in entries] == [
        ("", ""),
        ("email", "Email"),
        ("", "Stored"),
    ]
    assert entries[0][1].condition == "(dto.total > 0) && (dto.items)"
    assert len(resolve_validation_rules(session, "Order")) == 1


def test_seed_declared_rules_only_once(session, registry):
    seeded = seed_declared_rules(session, registry, "Order")

    assert [(rule.id, rule.field, rule.sort_order) for rule in seeded] == [
        (1, None, 0),
        (2, "email", 10),
    ]
    assert seed_declared_rules(session, registry, "Order") == []
    assert len(get_validation_rules(session, "Order")) == 2
