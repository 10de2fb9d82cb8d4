"""Persistence layer for validation rules."""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterable, Sequence

from sqlalchemy import asc
from sqlalchemy.orm import Session

from validation_rules.domain.entities import ValidateRule
from validation_rules.domain.errors import RuleNotFoundError, ValidationRuleError
from validation_rules.domain.sources import RuleEntry
from validation_rules.domain.type_keys import (
    TypeIdentifier,
    ensure_valid_batch,
    resolve_type_name,
)
from validation_rules.infrastructure.models import ValidateRuleModel

logger = logging.getLogger(__name__)

# Shared by every repository instance so concurrent batches never interleave.
_write_lock = threading.Lock()


class ValidateRuleRepository:
    """SQL-backed validation source and writer."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get_validation_rules(self, type_: TypeIdentifier) -> list[RuleEntry]:
        """Return ``(field, rule)`` pairs for ``type_`` in resolution order."""

        rules = self.get_all_validation_rules(resolve_type_name(type_))
        return [(rule.field_key, rule) for rule in rules]

    def get_all_validation_rules(self, type_name: str) -> Sequence[ValidateRule]:
        query = (
            self.session.query(ValidateRuleModel)
            .filter(ValidateRuleModel.type == type_name)
            .order_by(asc(ValidateRuleModel.sort_order), asc(ValidateRuleModel.id))
        )
        rules = [self._to_entity(model) for model in query.all()]
        logger.debug("Loaded %d validation rule(s) for %s", len(rules), type_name)
        return rules

    def get_validation_rules_by_ids(self, ids: Iterable[int]) -> Sequence[ValidateRule]:
        id_list = list(ids)
        if not id_list:
            return []
        query = (
            self.session.query(ValidateRuleModel)
            .filter(ValidateRuleModel.id.in_(id_list))
            .order_by(asc(ValidateRuleModel.id))
        )
        return [self._to_entity(model) for model in query.all()]

    def get(self, rule_id: int) -> ValidateRule | None:
        model = self.session.get(ValidateRuleModel, rule_id)
        return self._to_entity(model) if model else None

    def save_validation_rules(
        self, rules: Sequence[ValidateRule]
    ) -> list[ValidateRule]:
        """Insert or replace ``rules`` in a single transaction.

        The whole batch is validated before anything is written; any failure
        rolls the transaction back so no rule of the batch is stored.
        """

        try:
            batch = ensure_valid_batch(rules)
        except ValidationRuleError as exc:
            logger.warning("Rejected validation rule batch: %s", exc)
            raise

        with _write_lock:
            models: list[ValidateRuleModel] = []
            try:
                for rule in batch:
                    if rule.id:
                        model = self.session.get(ValidateRuleModel, rule.id)
                        if model is None:
                            raise RuleNotFoundError(rule.id)
                    else:
                        model = ValidateRuleModel()
                        self.session.add(model)
                    self._apply_entity_to_model(model, rule)
                    models.append(model)
                self.session.flush()
                saved = [self._to_entity(model) for model in models]
                self.session.commit()
            except Exception:
                self.session.rollback()
                logger.warning(
                    "Rolled back validation rule batch of %d rule(s)", len(batch)
                )
                raise

        logger.info("Saved %d validation rule(s)", len(saved))
        return saved

    def delete_validation_rules(self, ids: Iterable[int]) -> int:
        """Delete the rules identified by ``ids``; unknown ids are ignored."""

        id_list = list(ids)
        if not id_list:
            return 0
        with _write_lock:
            try:
                deleted = (
                    self.session.query(ValidateRuleModel)
                    .filter(ValidateRuleModel.id.in_(id_list))
                    .delete(synchronize_session=False)
                )
                self.session.commit()
            except Exception:
                self.session.rollback()
                raise
        logger.info("Deleted %d validation rule(s)", deleted)
        return deleted

    @staticmethod
    def _to_entity(model: ValidateRuleModel) -> ValidateRule:
        return ValidateRule(
            id=model.id,
            type=model.type,
            field=model.field or None,
            sort_order=model.sort_order or 0,
            validator=model.validator or "",
            condition=model.condition or "",
            error_code=model.error_code or "",
            message=model.message or "",
        )

    @staticmethod
    def _apply_entity_to_model(model: ValidateRuleModel, rule: ValidateRule) -> None:
        model.type = rule.type
        model.field = rule.field or None
        model.sort_order = rule.sort_order
        model.validator = rule.validator or ""
        model.condition = rule.condition or ""
        model.error_code = rule.error_code or ""
        model.message = rule.message or ""


__all__ = ["ValidateRuleRepository"]
