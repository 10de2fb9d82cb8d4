"""Errors raised while authoring, storing or resolving validation rules."""


class ValidationRuleError(ValueError):
    """Base class for invalid rule data."""


class MissingRuleTypeError(ValidationRuleError):
    """A persisted rule does not name the type it validates."""


class AmbiguousRuleScopeError(ValidationRuleError):
    """A rule is neither clearly type-level nor field-level."""


class RuleNotFoundError(ValidationRuleError):
    """A save or lookup referenced a rule id that is not stored."""

    def __init__(self, rule_id: int) -> None:
        super().__init__(f"Validation rule with id {rule_id} not found")
        self.rule_id = rule_id


class UnknownFieldError(ValidationRuleError):
    """A field-level rule targets a field the type does not declare."""


class UnsupportedReadError(Exception):
    """Raised when reading a write-only rule attribute."""

    def __init__(self, attribute: str) -> None:
        super().__init__(f"{attribute} is write-only and cannot be read")
        self.attribute = attribute


__all__ = [
    "AmbiguousRuleScopeError",
    "MissingRuleTypeError",
    "RuleNotFoundError",
    "UnknownFieldError",
    "UnsupportedReadError",
    "ValidationRuleError",
]
