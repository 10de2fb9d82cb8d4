"""Domain entities describing validation rules."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from validation_rules.domain.conditions import ConditionOperator, combine
from validation_rules.domain.errors import UnsupportedReadError


@dataclass
class ValidateRuleBase:
    """Core attributes shared by declared and persisted validation rules.

    ``validator`` names a registered validator, ``condition`` is a boolean
    expression evaluated against ``Request``, ``dto``, ``field`` and ``it``.
    ``message`` may reference ``{PropertyName}`` and ``{PropertyValue}``.
    Empty strings mean "not set".
    """

    validator: str = ""
    condition: str = ""
    error_code: str = ""
    message: str = ""


@dataclass
class ValidateRule(ValidateRuleBase):
    """Persisted validation rule.

    ``id`` is ``0`` until the rule is stored. ``field`` is ``None`` for rules
    that validate the whole type. Rules of the same type resolve in ascending
    ``sort_order`` and then ascending ``id``.
    """

    id: int = 0
    type: str = ""
    field: str | None = None
    sort_order: int = 0

    @property
    def is_type_rule(self) -> bool:
        return not self.field

    @property
    def is_field_rule(self) -> bool:
        return not self.is_type_rule

    @property
    def field_key(self) -> str:
        """Key used by validation sources: the field name or ``""``."""

        return self.field or ""

    @property
    def sort_key(self) -> tuple[int, int]:
        return (self.sort_order, self.id)

    @classmethod
    def from_rule(
        cls,
        rule: ValidateRuleBase,
        *,
        type: str,
        field: str | None = None,
        sort_order: int = 0,
    ) -> "ValidateRule":
        """Build an unsaved persisted rule from a declared ``rule``."""

        return cls(
            validator=rule.validator,
            condition=rule.condition,
            error_code=rule.error_code,
            message=rule.message,
            type=type,
            field=field or None,
            sort_order=sort_order,
        )


def _write_only_conditions(name: str, operator: ConditionOperator) -> property:
    def getter(self: ValidateRuleBase) -> Sequence[str]:
        raise UnsupportedReadError(name)

    def setter(self: ValidateRuleBase, conditions: Sequence[str | None]) -> None:
        self.condition = combine(operator, conditions)

    return property(
        getter,
        setter,
        doc=f"Write-only: assigning combines the conditions with '{operator.value}'.",
    )


def _single_condition_source(**candidates: object) -> None:
    supplied = [
        name for name, value in candidates.items() if value is not None and value != ""
    ]
    if len(supplied) > 1:
        msg = "Only one of %s may be provided" % ", ".join(supplied)
        raise ValueError(msg)


@dataclass(init=False)
class Validate(ValidateRuleBase):
    """Field-level rule declaration."""

    all_conditions = _write_only_conditions("all_conditions", ConditionOperator.AND)
    any_conditions = _write_only_conditions("any_conditions", ConditionOperator.OR)

    def __init__(
        self,
        validator: str = "",
        *,
        condition: str | None = None,
        all_conditions: Sequence[str | None] | None = None,
        any_conditions: Sequence[str | None] | None = None,
        error_code: str = "",
        message: str = "",
    ) -> None:
        _single_condition_source(
            condition=condition,
            all_conditions=all_conditions,
            any_conditions=any_conditions,
        )
        super().__init__(
            validator=validator,
            condition=condition or "",
            error_code=error_code,
            message=message,
        )
        if all_conditions is not None:
            self.all_conditions = all_conditions
        if any_conditions is not None:
            self.any_conditions = any_conditions


@dataclass(init=False)
class ValidateRequest(ValidateRuleBase):
    """Type-level rule declaration asserted before field rules are evaluated."""

    status_code: int = 0

    all_conditions = _write_only_conditions("all_conditions", ConditionOperator.AND)
    any_conditions = _write_only_conditions("any_conditions", ConditionOperator.OR)

    def __init__(
        self,
        validator: str = "",
        *,
        condition: str | None = None,
        conditions: Sequence[str | None] | None = None,
        all_conditions: Sequence[str | None] | None = None,
        any_conditions: Sequence[str | None] | None = None,
        error_code: str = "",
        message: str = "",
        status_code: int = 0,
    ) -> None:
        _single_condition_source(
            condition=condition,
            conditions=conditions,
            all_conditions=all_conditions,
            any_conditions=any_conditions,
        )
        super().__init__(
            validator=validator,
            condition=condition or "",
            error_code=error_code,
            message=message,
        )
        self.status_code = status_code
        if conditions is not None:
            self.conditions = conditions
        if all_conditions is not None:
            self.all_conditions = all_conditions
        if any_conditions is not None:
            self.any_conditions = any_conditions

    @property
    def conditions(self) -> list[str]:
        """The combined condition; assigning AND-combines the given conditions."""

        return [self.condition]

    @conditions.setter
    def conditions(self, conditions: Sequence[str | None]) -> None:
        self.condition = combine(ConditionOperator.AND, conditions)


__all__ = ["Validate", "ValidateRequest", "ValidateRule", "ValidateRuleBase"]
