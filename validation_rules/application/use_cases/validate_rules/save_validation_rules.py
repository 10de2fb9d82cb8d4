"""Use cases for writing validation rules."""

import logging
from collections.abc import Sequence

from sqlalchemy.orm import Session

from validation_rules.domain.entities import ValidateRule
from validation_rules.domain.registry import ValidationRuleRegistry
from validation_rules.domain.type_keys import TypeIdentifier, resolve_type_name
from validation_rules.infrastructure.repositories import ValidateRuleRepository

logger = logging.getLogger(__name__)


def save_validation_rules(
    session: Session, rules: Sequence[ValidateRule]
) -> list[ValidateRule]:
    """Insert or replace ``rules`` as one batch and return the stored copies."""

    repository = ValidateRuleRepository(session)
    return repository.save_validation_rules(rules)


def seed_declared_rules(
    session: Session,
    registry: ValidationRuleRegistry,
    type_: TypeIdentifier,
) -> list[ValidateRule]:
    """Store the declared rules of ``type_`` unless the type already has stored rules."""

    repository = ValidateRuleRepository(session)
    type_name = resolve_type_name(type_)
    if repository.get_all_validation_rules(type_name):
        logger.info("Validation rules for %s already stored; skipping seed", type_name)
        return []
    return repository.save_validation_rules(registry.to_persisted_rules(type_))


__all__ = ["save_validation_rules", "seed_declared_rules"]
