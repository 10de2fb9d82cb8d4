"""Validation helpers for validation rule use cases."""

from collections.abc import Iterable


def normalize_rule_ids(ids: Iterable[int]) -> list[int]:
    """Return ``ids`` without duplicates, keeping their first-seen order."""

    unique_ids: list[int] = []
    seen: set[int] = set()
    for rule_id in ids:
        if isinstance(rule_id, bool) or not isinstance(rule_id, int) or rule_id <= 0:
            raise ValueError(f"Invalid validation rule id {rule_id!r}")
        if rule_id not in seen:
            seen.add(rule_id)
            unique_ids.append(rule_id)
    return unique_ids


__all__ = ["normalize_rule_ids"]
