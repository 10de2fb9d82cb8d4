"""Ordered collections of persisted rules sharing a type and field."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from validation_rules.domain.entities.validate_rule import ValidateRule
from validation_rules.domain.errors import AmbiguousRuleScopeError


def sort_rules(rules: Iterable[ValidateRule]) -> list[ValidateRule]:
    """Return ``rules`` in resolution order: ``sort_order`` then ``id``."""

    return sorted(rules, key=lambda rule: rule.sort_key)


class RuleSet:
    """Rules scoped to one ``(type, field)`` pair, iterated in resolution order."""

    def __init__(
        self, type_name: str, field: str | None = None, rules: Iterable[ValidateRule] = ()
    ) -> None:
        self.type_name = type_name
        self.field = field or None
        self._rules: list[ValidateRule] = []
        for rule in rules:
            self.add(rule)

    @property
    def key(self) -> tuple[str, str]:
        return (self.type_name, self.field or "")

    @property
    def is_type_level(self) -> bool:
        return self.field is None

    def add(self, rule: ValidateRule) -> None:
        if rule.type != self.type_name or rule.field_key != (self.field or ""):
            msg = (
                f"Rule for {rule.type}.{rule.field_key or '*'} does not belong to "
                f"rule set {self.type_name}.{self.field or '*'}"
            )
            raise AmbiguousRuleScopeError(msg)
        self._rules.append(rule)

    def __iter__(self) -> Iterator[ValidateRule]:
        return iter(sort_rules(self._rules))

    def __len__(self) -> int:
        return len(self._rules)

    def __repr__(self) -> str:
        return f"RuleSet({self.type_name!r}, {self.field!r}, rules={len(self)})"


def group_rules(rules: Iterable[ValidateRule]) -> dict[tuple[str, str], RuleSet]:
    """Group ``rules`` into rule sets keyed by ``(type, field-or-"")``.

    Groups appear in the resolution order of their first rule.
    """

    groups: dict[tuple[str, str], RuleSet] = {}
    for rule in sort_rules(rules):
        key = (rule.type, rule.field_key)
        if key not in groups:
            groups[key] = RuleSet(rule.type, rule.field)
        groups[key].add(rule)
    return groups


__all__ = ["RuleSet", "group_rules", "sort_rules"]
