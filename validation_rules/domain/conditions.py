"""Combine boolean condition expressions into a single expression."""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum


class ConditionOperator(str, Enum):
    """Boolean operators understood by the condition expression engine."""

    AND = "&&"
    OR = "||"


def combine(
    operator: ConditionOperator | str, conditions: Iterable[str | None]
) -> str:
    """Join ``conditions`` with ``operator``, parenthesising every operand.

    Empty and ``None`` entries are skipped. No remaining operand yields ``"()"``,
    a single operand yields ``"(cond)"`` and several operands yield
    ``"(a) && (b)"``. Input order is preserved, and because every operand is
    wrapped the result can be passed back into :func:`combine` safely.
    """

    comparand = ConditionOperator(operator).value
    joiner = f") {comparand} ("
    operands = [condition for condition in conditions if condition]
    return "(" + joiner.join(operands) + ")"


def combine_all(conditions: Iterable[str | None]) -> str:
    """Return an expression that holds when every condition holds."""

    return combine(ConditionOperator.AND, conditions)


def combine_any(conditions: Iterable[str | None]) -> str:
    """Return an expression that holds when at least one condition holds."""

    return combine(ConditionOperator.OR, conditions)


__all__ = ["ConditionOperator", "combine", "combine_all", "combine_any"]
