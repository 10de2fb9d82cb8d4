"""Read and write contracts between rule storage and the evaluator."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol, runtime_checkable

from validation_rules.domain.entities import ValidateRule, ValidateRuleBase
from validation_rules.domain.type_keys import TypeIdentifier

RuleEntry = tuple[str, ValidateRuleBase]


@runtime_checkable
class ValidationSource(Protocol):
    """Provide the rules that apply to a type.

    Implementations return ``(field, rule)`` pairs where ``field`` is ``""`` for
    type-level rules. Stored rules come back ordered by ``sort_order`` then
    ``id``. The returned rules are private copies valid for one validation
    pass, and a type without rules yields an empty list.
    """

    def get_validation_rules(self, type_: TypeIdentifier) -> list[RuleEntry]:
        ...


@runtime_checkable
class ValidationSourceWriter(Protocol):
    """Persist batches of validation rules.

    A rule with ``id == 0`` is inserted and assigned a new id; any other id
    replaces the stored rule with that identity. The batch is applied
    completely or not at all.
    """

    def save_validation_rules(
        self, rules: Sequence[ValidateRule]
    ) -> list[ValidateRule]:
        ...


class ChainedValidationSource:
    """Concatenate the rules of several sources in the order given."""

    def __init__(self, *sources: ValidationSource) -> None:
        self.sources = list(sources)

    def get_validation_rules(self, type_: TypeIdentifier) -> list[RuleEntry]:
        entries: list[RuleEntry] = []
        for source in self.sources:
            entries.extend(source.get_validation_rules(type_))
        return entries


__all__ = [
    "ChainedValidationSource",
    "RuleEntry",
    "ValidationSource",
    "ValidationSourceWriter",
]
