"""SQLAlchemy model for persisted validation rules."""

from sqlalchemy import CheckConstraint, Column, Index, Integer, String, Text

from validation_rules.infrastructure.database import Base


class ValidateRuleModel(Base):
    """Database representation of a validation rule row."""

    __tablename__ = "validate_rule"
    __table_args__ = (
        CheckConstraint("length(type) > 0", name="ck_validate_rule_type_not_empty"),
        Index("ix_validate_rule_type_sort", "type", "sort_order", "id"),
        {"sqlite_autoincrement": True},
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    type = Column(String(255), nullable=False)
    field = Column(String(255), nullable=True)
    sort_order = Column(Integer, nullable=False, default=0, server_default="0")
    validator = Column(Text, nullable=False, default="")
    condition = Column(Text, nullable=False, default="")
    error_code = Column(Text, nullable=False, default="")
    message = Column(Text, nullable=False, default="")


__all__ = ["ValidateRuleModel"]
