"""In-process validation source and writer."""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterable, Sequence
from dataclasses import replace

from validation_rules.domain.entities import (
    RuleSet,
    ValidateRule,
    group_rules,
    sort_rules,
)
from validation_rules.domain.errors import RuleNotFoundError, ValidationRuleError
from validation_rules.domain.sources import RuleEntry
from validation_rules.domain.type_keys import (
    TypeIdentifier,
    ensure_valid_batch,
    resolve_type_name,
)

logger = logging.getLogger(__name__)


class MemoryValidationSource:
    """Keep validation rules in memory.

    Writers build a new snapshot under a lock and publish it with a single
    assignment, so readers never lock and never observe a partial batch. The
    snapshot holds the rules by id and their rule sets keyed by
    ``(type, field)``.
    Ids grow monotonically and are not reused after deletion.
    """

    def __init__(self, rules: Iterable[ValidateRule] = ()) -> None:
        self._snapshot: tuple[
            dict[int, ValidateRule], dict[tuple[str, str], RuleSet]
        ] = ({}, {})
        self._next_id = 1
        self._lock = threading.Lock()
        initial = list(rules)
        if initial:
            self.save_validation_rules(initial)

    def get_validation_rules(self, type_: TypeIdentifier) -> list[RuleEntry]:
        return [
            (rule.field_key, rule)
            for rule in self.get_all_validation_rules(resolve_type_name(type_))
        ]

    def get_all_validation_rules(self, type_name: str) -> list[ValidateRule]:
        _, rule_sets = self._snapshot
        matching = [
            rule
            for (rule_type, _), rule_set in rule_sets.items()
            if rule_type == type_name
            for rule in rule_set
        ]
        return [replace(rule) for rule in sort_rules(matching)]

    def get_rule_set(self, type_name: str, field: str | None = None) -> RuleSet:
        """Return the rules stored for one ``(type, field)`` pair."""

        _, rule_sets = self._snapshot
        stored = rule_sets.get((type_name, field or ""))
        return RuleSet(type_name, field, [replace(rule) for rule in stored or ()])

    def get_validation_rules_by_ids(self, ids: Iterable[int]) -> list[ValidateRule]:
        snapshot, _ = self._snapshot
        return [
            replace(snapshot[rule_id])
            for rule_id in sorted(set(ids))
            if rule_id in snapshot
        ]

    def save_validation_rules(
        self, rules: Sequence[ValidateRule]
    ) -> list[ValidateRule]:
        try:
            batch = ensure_valid_batch(rules)
        except ValidationRuleError as exc:
            logger.warning("Rejected validation rule batch: %s", exc)
            raise

        with self._lock:
            staged = dict(self._snapshot[0])
            next_id = self._next_id
            saved: list[ValidateRule] = []
            for rule in batch:
                if rule.id:
                    if rule.id not in staged:
                        raise RuleNotFoundError(rule.id)
                    stored = replace(rule, field=rule.field or None)
                else:
                    stored = replace(rule, id=next_id, field=rule.field or None)
                    next_id += 1
                staged[stored.id] = stored
                saved.append(replace(stored))
            self._publish(staged)
            self._next_id = next_id

        logger.info("Saved %d validation rule(s)", len(saved))
        return saved

    def delete_validation_rules(self, ids: Iterable[int]) -> int:
        id_set = set(ids)
        with self._lock:
            current, _ = self._snapshot
            staged = {
                rule_id: rule for rule_id, rule in current.items() if rule_id not in id_set
            }
            deleted = len(current) - len(staged)
            self._publish(staged)
        logger.info("Deleted %d validation rule(s)", deleted)
        return deleted

    def _publish(self, rules: dict[int, ValidateRule]) -> None:
        self._snapshot = (rules, group_rules(rules.values()))


__all__ = ["MemoryValidationSource"]
