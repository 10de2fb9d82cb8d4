"""Routes for managing stored validation rules."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from sqlalchemy.orm import Session

from validation_rules.application.use_cases.validate_rules import (
    delete_validation_rules as delete_validation_rules_uc,
    get_validation_rules as get_validation_rules_uc,
    get_validation_rules_by_ids as get_validation_rules_by_ids_uc,
    save_validation_rules as save_validation_rules_uc,
)
from validation_rules.domain.entities import ValidateRule
from validation_rules.domain.errors import RuleNotFoundError
from validation_rules.infrastructure.database import get_db
from validation_rules.interfaces.api.schemas import ValidateRuleBatch, ValidateRuleRead

router = APIRouter(prefix="/validation-rules", tags=["validation-rules"])

logger = logging.getLogger(__name__)


def _to_read_model(rule: ValidateRule) -> ValidateRuleRead:
    return ValidateRuleRead.model_validate(rule)


@router.get("/types/{type_name}", response_model=list[ValidateRuleRead])
def list_type_rules(
    type_name: str,
    db: Session = Depends(get_db),
) -> list[ValidateRuleRead]:
    """Return the rules of ``type_name``, type-level and field-level, in resolution order."""

    try:
        entries = get_validation_rules_uc(db, type_name)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    return [_to_read_model(rule) for _, rule in entries]


@router.get("/", response_model=list[ValidateRuleRead])
def list_rules_by_ids(
    ids: list[int] = Query(..., description="Ids of the rules to return"),
    db: Session = Depends(get_db),
) -> list[ValidateRuleRead]:
    """Return the stored rules among ``ids``."""

    try:
        rules = get_validation_rules_by_ids_uc(db, ids)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    return [_to_read_model(rule) for rule in rules]


@router.post("/", response_model=list[ValidateRuleRead])
def save_rules(
    batch: ValidateRuleBatch,
    db: Session = Depends(get_db),
) -> list[ValidateRuleRead]:
    """Save a batch of rules; either every rule is stored or none is."""

    try:
        saved = save_validation_rules_uc(db, [rule.to_entity() for rule in batch.rules])
    except RuleNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    except ValueError as exc:
        logger.info("Validation rule batch rejected: %s", exc)
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    return [_to_read_model(rule) for rule in saved]


@router.delete("/", status_code=status.HTTP_204_NO_CONTENT)
def delete_rules(
    ids: list[int] = Query(..., description="Ids of the rules to delete"),
    db: Session = Depends(get_db),
) -> Response:
    """Delete the rules identified by ``ids``."""

    try:
        delete_validation_rules_uc(db, ids)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    return Response(status_code=status.HTTP_204_NO_CONTENT)
