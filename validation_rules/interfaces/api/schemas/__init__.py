from .validate_rule import ValidateRuleBatch, ValidateRuleRead, ValidateRuleWrite

__all__ = ["ValidateRuleBatch", "ValidateRuleRead", "ValidateRuleWrite"]
