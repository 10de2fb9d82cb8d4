"""Use cases for managing stored validation rules."""

from .delete_validation_rules import delete_validation_rules
from .get_validation_rules import get_validation_rules, resolve_validation_rules
from .get_validation_rules_by_ids import get_validation_rules_by_ids
from .save_validation_rules import save_validation_rules, seed_declared_rules

__all__ = [
    "delete_validation_rules",
    "get_validation_rules",
    "get_validation_rules_by_ids",
    "resolve_validation_rules",
    "save_validation_rules",
    "seed_declared_rules",
]
