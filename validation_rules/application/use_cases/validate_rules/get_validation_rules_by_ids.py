"""Use case for retrieving validation rules by id."""

from collections.abc import Iterable, Sequence

from sqlalchemy.orm import Session

from validation_rules.domain.entities import ValidateRule
from validation_rules.infrastructure.repositories import ValidateRuleRepository
from .validators import normalize_rule_ids


def get_validation_rules_by_ids(
    session: Session, ids: Iterable[int]
) -> Sequence[ValidateRule]:
    """Return the stored rules among ``ids``, ordered by id."""

    repository = ValidateRuleRepository(session)
    return repository.get_validation_rules_by_ids(normalize_rule_ids(ids))


__all__ = ["get_validation_rules_by_ids"]
