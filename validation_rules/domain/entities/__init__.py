"""Domain entities exposed by the application."""

from .rule_set import RuleSet, group_rules, sort_rules
from .validate_rule import Validate, ValidateRequest, ValidateRule, ValidateRuleBase

__all__ = [
    "RuleSet",
    "Validate",
    "ValidateRequest",
    "ValidateRule",
    "ValidateRuleBase",
    "group_rules",
    "sort_rules",
]
