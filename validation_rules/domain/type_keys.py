"""Resolve the ``(type, field)`` keys rules are stored and looked up under."""

from __future__ import annotations

import dataclasses
import inspect
from collections.abc import Iterable, Sequence

from validation_rules.domain.entities import ValidateRule
from validation_rules.domain.errors import (
    AmbiguousRuleScopeError,
    MissingRuleTypeError,
    UnknownFieldError,
    ValidationRuleError,
)

TypeIdentifier = type | str


def resolve_type_name(type_or_name: TypeIdentifier) -> str:
    """Return the name rules for ``type_or_name`` are stored under.

    Classes resolve to their ``__name__``; strings are used as given once
    surrounding whitespace is removed.
    """

    if isinstance(type_or_name, type):
        return type_or_name.__name__
    if isinstance(type_or_name, str):
        name = type_or_name.strip()
        if not name:
            raise MissingRuleTypeError("A validation rule type name cannot be empty")
        return name
    msg = f"Expected a class or a type name, got {type(type_or_name).__name__}"
    raise TypeError(msg)


def declared_fields(cls: type) -> list[str] | None:
    """Return the field names ``cls`` declares, or ``None`` when unknown.

    Dataclass fields and pydantic ``model_fields`` are used when present,
    otherwise the class annotations along the MRO.
    """

    names: list[str] = []

    def add(name: str) -> None:
        if name not in names:
            names.append(name)

    if dataclasses.is_dataclass(cls):
        for item in dataclasses.fields(cls):
            add(item.name)

    model_fields = getattr(cls, "model_fields", None)
    if isinstance(model_fields, dict):
        for name in model_fields:
            add(name)

    if names:
        return names

    for klass in reversed(cls.__mro__):
        if klass is object:
            continue
        for name in inspect.get_annotations(klass):
            if not name.startswith("_"):
                add(name)

    return names or None


def resolve_field_name(owner: TypeIdentifier, field: str | None) -> str | None:
    """Return the normalized field key, ``None`` meaning a type-level rule."""

    if field is None or field == "":
        return None
    if not isinstance(field, str) or not field.strip() or field != field.strip():
        raise AmbiguousRuleScopeError(f"Invalid field name {field!r}")
    if isinstance(owner, type):
        declared = declared_fields(owner)
        if declared is not None and field not in declared:
            msg = f"{owner.__name__} does not declare a field named '{field}'"
            raise UnknownFieldError(msg)
    return field


def ensure_rule_keys(rule: ValidateRule) -> None:
    """Validate the storage keys of ``rule`` without repairing them."""

    if not isinstance(rule.type, str) or not rule.type.strip():
        raise MissingRuleTypeError("Validation rule type is required")
    if rule.type != rule.type.strip():
        raise AmbiguousRuleScopeError(f"Invalid validation rule type {rule.type!r}")
    if rule.field is None or rule.field == "":
        return
    if not isinstance(rule.field, str) or not rule.field.strip() or (
        rule.field != rule.field.strip()
    ):
        msg = f"Rule for {rule.type} has an ambiguous field {rule.field!r}"
        raise AmbiguousRuleScopeError(msg)


def ensure_valid_batch(rules: Iterable[ValidateRule]) -> Sequence[ValidateRule]:
    """Validate a whole batch before any of it is written.

    Raises on the first invalid rule so the caller can reject the batch.
    """

    batch = list(rules)
    seen_ids: set[int] = set()
    for rule in batch:
        ensure_rule_keys(rule)
        if isinstance(rule.id, bool) or not isinstance(rule.id, int) or rule.id < 0:
            raise ValidationRuleError(f"Invalid validation rule id {rule.id!r}")
        if rule.id:
            if rule.id in seen_ids:
                msg = f"Validation rule id {rule.id} appears more than once in the batch"
                raise ValidationRuleError(msg)
            seen_ids.add(rule.id)
    return batch


__all__ = [
    "TypeIdentifier",
    "declared_fields",
    "ensure_rule_keys",
    "ensure_valid_batch",
    "resolve_field_name",
    "resolve_type_name",
]
