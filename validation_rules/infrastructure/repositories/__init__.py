"""Repository implementations for infrastructure layer."""

from .validate_rule_repository import ValidateRuleRepository

__all__ = ["ValidateRuleRepository"]
