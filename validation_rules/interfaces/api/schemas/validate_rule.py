"""Schemas for validation rule endpoints."""

from pydantic import BaseModel, ConfigDict, Field, model_validator

from validation_rules.domain.conditions import combine_all, combine_any
from validation_rules.domain.entities import ValidateRule


class ValidateRuleFields(BaseModel):
    type: str
    field: str | None = None
    sort_order: int = 0
    validator: str = ""
    condition: str = ""
    error_code: str = ""
    message: str = ""


class ValidateRuleWrite(ValidateRuleFields):
    """Rule submitted for saving; ``id`` 0 inserts a new rule."""

    model_config = ConfigDict(extra="forbid")

    id: int = Field(default=0, ge=0)
    all_conditions: list[str] | None = Field(
        default=None, description="Conditions that must all hold; replaces condition"
    )
    any_conditions: list[str] | None = Field(
        default=None, description="Conditions of which one must hold; replaces condition"
    )

    @model_validator(mode="after")
    def _single_condition_source(self) -> "ValidateRuleWrite":
        supplied = [
            name
            for name, value in (
                ("condition", self.condition or None),
                ("all_conditions", self.all_conditions),
                ("any_conditions", self.any_conditions),
            )
            if value is not None
        ]
        if len(supplied) > 1:
            raise ValueError("Only one of %s may be provided" % ", ".join(supplied))
        return self

    def to_entity(self) -> ValidateRule:
        condition = self.condition
        if self.all_conditions is not None:
            condition = combine_all(self.all_conditions)
        elif self.any_conditions is not None:
            condition = combine_any(self.any_conditions)
        return ValidateRule(
            id=self.id,
            type=self.type,
            field=self.field,
            sort_order=self.sort_order,
            validator=self.validator,
            condition=condition,
            error_code=self.error_code,
            message=self.message,
        )


class ValidateRuleBatch(BaseModel):
    """Batch of rules saved as one unit."""

    model_config = ConfigDict(extra="forbid")

    rules: list[ValidateRuleWrite]


class ValidateRuleRead(ValidateRuleFields):
    model_config = ConfigDict(from_attributes=True)

    id: int
