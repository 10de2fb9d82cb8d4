"""Use cases for reading the validation rules of a type."""

from sqlalchemy.orm import Session

from validation_rules.domain.registry import ValidationRuleRegistry
from validation_rules.domain.sources import ChainedValidationSource, RuleEntry
from validation_rules.domain.type_keys import TypeIdentifier
from validation_rules.infrastructure.repositories import ValidateRuleRepository


def get_validation_rules(session: Session, type_: TypeIdentifier) -> list[RuleEntry]:
    """Return the stored ``(field, rule)`` pairs for ``type_`` in resolution order."""

    repository = ValidateRuleRepository(session)
    return repository.get_validation_rules(type_)


def resolve_validation_rules(
    session: Session,
    type_: TypeIdentifier,
    *,
    registry: ValidationRuleRegistry | None = None,
) -> list[RuleEntry]:
    """Return declared rules of ``type_`` followed by its stored rules."""

    repository = ValidateRuleRepository(session)
    if registry is None:
        return repository.get_validation_rules(type_)
    return ChainedValidationSource(registry, repository).get_validation_rules(type_)


__all__ = ["get_validation_rules", "resolve_validation_rules"]
