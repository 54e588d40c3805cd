"""Result contract v1: the stable JSON shape of a successful computation.

These schemas validate the *serialised* payload (camelCase keys, ISO date
strings), so they catch drift between the engine's models and what clients
actually receive. Unknown keys are rejected.
"""

from __future__ import annotations

import logging
from typing import Annotated, Any, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError
from pydantic.alias_generators import to_camel

from .errors import ContractViolationError

logger = logging.getLogger(__name__)

ISODate = Annotated[str, Field(pattern=r"^\d{4}-\d{2}-\d{2}$")]
NonEmptyStr = Annotated[str, Field(min_length=1)]
DeliveryMethodV1 = Literal["PERSONAL", "MAIL", "POSTING_MAIL"]


class _ContractModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, extra="forbid", strict=True)


class EligibilityReasonV1(_ContractModel):
    code: NonEmptyStr
    message: NonEmptyStr


class EligibilityV1(_ContractModel):
    eligible: bool
    reasons: List[EligibilityReasonV1]


class AuditEntryV1(_ContractModel):
    step: NonEmptyStr
    value: Optional[Union[bool, int, float, str]]
    rule_id: NonEmptyStr


class CitationV1(_ContractModel):
    id: NonEmptyStr
    authority: NonEmptyStr
    section: NonEmptyStr
    effective_from: Optional[ISODate]
    url: NonEmptyStr
    summary: NonEmptyStr


class RequiredClauseV1(_ContractModel):
    id: NonEmptyStr
    text: NonEmptyStr


class NoticeComputeResultV1(_ContractModel):
    jurisdiction_id: NonEmptyStr
    notice_type: NonEmptyStr

    service_date: ISODate
    occupancy_date: ISODate
    delivery_method: DeliveryMethodV1

    owner_is_natural_person: bool
    ownership_percent: float

    notice_period_days: Annotated[int, Field(gt=0)]

    effective_service_date: Optional[ISODate]
    earliest_termination_date: Optional[ISODate]

    required_clauses: List[RequiredClauseV1]
    eligibility: EligibilityV1
    audit: List[AuditEntryV1]
    citations: List[CitationV1]


class NoticeComputeResponseV1(_ContractModel):
    ok: Literal[True]
    result: NoticeComputeResultV1


def validation_issues(exc: ValidationError) -> List[Dict[str, Any]]:
    return [
        {
            "path": ".".join(str(part) for part in err["loc"]),
            "message": err["msg"],
        }
        for err in exc.errors()
    ]


def check_contract(payload: Dict[str, Any]) -> List[Dict[str, Any]]:
    """Validate a serialised `{ok: true, result}` envelope; return issues (empty when valid)."""
    try:
        NoticeComputeResponseV1.model_validate(payload)
    except ValidationError as exc:
        return validation_issues(exc)
    return []


def enforce_contract(payload: Dict[str, Any]) -> Dict[str, Any]:
    issues = check_contract(payload)
    if issues:
        logger.error("Result contract mismatch: %s", issues)
        raise ContractViolationError(issues)
    return payload
