"""Use case for deleting validation rules."""

from collections.abc import Iterable

from sqlalchemy.orm import Session

from validation_rules.infrastructure.repositories import ValidateRuleRepository
from .validators import normalize_rule_ids


def delete_validation_rules(session: Session, ids: Iterable[int]) -> int:
    """Delete the rules identified by ``ids`` and return how many were removed."""

    repository = ValidateRuleRepository(session)
    return repository.delete_validation_rules(normalize_rule_ids(ids))


__all__ = ["delete_validation_rules"]
