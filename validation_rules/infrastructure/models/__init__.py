"""ORM models used by the application infrastructure."""

from .validate_rule import ValidateRuleModel

__all__ = ["ValidateRuleModel"]
