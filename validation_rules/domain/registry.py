"""Explicit registry attaching declared rules to types and their fields."""

from __future__ import annotations

import copy
import logging
import threading
from collections.abc import Callable, Sequence
from typing import TypeVar

from validation_rules.domain.entities import Validate, ValidateRequest, ValidateRule
from validation_rules.domain.sources import RuleEntry
from validation_rules.domain.type_keys import (
    TypeIdentifier,
    resolve_field_name,
    resolve_type_name,
)

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=type)


class ValidationRuleRegistry:
    """Rules declared in code, keyed by ``(type name, field name)``.

    The registry is a :class:`~validation_rules.domain.sources.ValidationSource`:
    type-level rules are returned first, followed by field rules in the order
    their fields were registered. Declaration order is kept within each key.
    """

    def __init__(self) -> None:
        self._type_rules: dict[str, list[ValidateRequest]] = {}
        self._field_rules: dict[str, dict[str, list[Validate]]] = {}
        self._lock = threading.Lock()

    def register_type(self, type_: TypeIdentifier, *rules: ValidateRequest) -> None:
        """Attach type-level ``rules`` to ``type_``."""

        for rule in rules:
            if not isinstance(rule, ValidateRequest):
                msg = f"Type-level rules must be ValidateRequest, got {type(rule).__name__}"
                raise TypeError(msg)
        type_name = resolve_type_name(type_)
        with self._lock:
            self._type_rules.setdefault(type_name, []).extend(rules)
        logger.debug("Registered %d type rule(s) for %s", len(rules), type_name)

    def register_field(
        self, type_: TypeIdentifier, field: str, *rules: Validate
    ) -> None:
        """Attach field-level ``rules`` to ``field`` of ``type_``."""

        for rule in rules:
            if not isinstance(rule, Validate):
                msg = f"Field-level rules must be Validate, got {type(rule).__name__}"
                raise TypeError(msg)
        type_name = resolve_type_name(type_)
        field_name = resolve_field_name(type_, field)
        if field_name is None:
            raise ValueError("Field-level rules need a field name")
        with self._lock:
            fields = self._field_rules.setdefault(type_name, {})
            fields.setdefault(field_name, []).extend(rules)
        logger.debug(
            "Registered %d field rule(s) for %s.%s", len(rules), type_name, field_name
        )

    def declare(
        self,
        *type_rules: ValidateRequest,
        **field_rules: Validate | Sequence[Validate],
    ) -> Callable[[T], T]:
        """Class decorator registering rules for the decorated class.

        Example::

            @registry.declare(
                ValidateRequest(condition="dto.total > 0", status_code=400),
                email=Validate("Email"),
            )
            @dataclass
            class Order:
                email: str
                total: int
        """

        def decorator(cls: T) -> T:
            if type_rules:
                self.register_type(cls, *type_rules)
            for field_name, rules in field_rules.items():
                if isinstance(rules, Validate):
                    rules = [rules]
                self.register_field(cls, field_name, *rules)
            return cls

        return decorator

    def get_validation_rules(self, type_: TypeIdentifier) -> list[RuleEntry]:
        type_name = resolve_type_name(type_)
        with self._lock:
            type_rules = list(self._type_rules.get(type_name, ()))
            field_rules = [
                (field_name, list(rules))
                for field_name, rules in self._field_rules.get(type_name, {}).items()
            ]
        entries: list[RuleEntry] = [("", copy.copy(rule)) for rule in type_rules]
        for field_name, rules in field_rules:
            entries.extend((field_name, copy.copy(rule)) for rule in rules)
        return entries

    def to_persisted_rules(
        self, type_: TypeIdentifier, *, sort_order_step: int = 10
    ) -> list[ValidateRule]:
        """Export the declared rules of ``type_`` as unsaved persisted rules.

        ``sort_order`` is assigned in steps so the stored rules keep the
        declaration order and leave room for rules inserted later.
        """

        type_name = resolve_type_name(type_)
        return [
            ValidateRule.from_rule(
                rule,
                type=type_name,
                field=field_name or None,
                sort_order=index * sort_order_step,
            )
            for index, (field_name, rule) in enumerate(self.get_validation_rules(type_))
        ]

    def clear(self, type_: TypeIdentifier | None = None) -> None:
        with self._lock:
            if type_ is None:
                self._type_rules.clear()
                self._field_rules.clear()
                return
            type_name = resolve_type_name(type_)
            self._type_rules.pop(type_name, None)
            self._field_rules.pop(type_name, None)


__all__ = ["ValidationRuleRegistry"]
