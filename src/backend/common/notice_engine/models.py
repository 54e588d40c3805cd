from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import List, Literal, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class DeliveryMethod(str, Enum):
    PERSONAL = "PERSONAL"
    MAIL = "MAIL"
    POSTING_MAIL = "POSTING_MAIL"


class GateStatus(str, Enum):
    PASS = "PASS"
    FAIL = "FAIL"


class WireModel(BaseModel):
    # snake_case in Python, camelCase on the wire.
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_wire(self) -> dict:
        return self.model_dump(mode="json", by_alias=True)


class CaseFacts(WireModel):
    model_config = ConfigDict(frozen=True)

    jurisdiction_id: str
    notice_type: str
    service_date: date
    occupancy_date: date
    delivery_method: DeliveryMethod
    owner_is_natural_person: bool
    ownership_percent: float


class Authority(WireModel):
    model_config = ConfigDict(frozen=True)

    id: str
    authority: str
    section: str
    effective_from: Optional[date] = None
    url: str = ""
    summary: str = ""

    def label(self) -> str:
        text = f"{self.authority} {self.section}"
        if self.effective_from is not None:
            text += f" (effective {self.effective_from.isoformat()})"
        return text


class EligibilityReason(WireModel):
    code: str
    message: str


class Eligibility(WireModel):
    eligible: bool
    reasons: List[EligibilityReason] = Field(default_factory=list)


class RequiredClause(WireModel):
    model_config = ConfigDict(frozen=True)

    id: str
    text: str


AuditValue = Optional[Union[bool, int, str]]


class AuditEntry(WireModel):
    step: str
    value: AuditValue = None
    rule_id: str


@dataclass(frozen=True)
class EffectiveServiceMeta:
    effective_service_date: Optional[str]
    rule_id: str
    authority_ids: Tuple[str, ...] = ()


class NoticeComputeResult(WireModel):
    jurisdiction_id: str
    notice_type: str

    service_date: date
    occupancy_date: date
    # Echoed as given; the closed set is enforced at the boundary and by the result contract.
    delivery_method: str
    owner_is_natural_person: bool
    ownership_percent: float

    notice_period_days: int
    effective_service_date: Optional[date] = None
    earliest_termination_date: Optional[date] = None

    required_clauses: List[RequiredClause] = Field(default_factory=list)
    eligibility: Eligibility
    audit: List[AuditEntry] = Field(default_factory=list)
    citations: List[Authority] = Field(default_factory=list)


class NoticeComputeSuccess(WireModel):
    ok: Literal[True] = True
    result: NoticeComputeResult


class NoticeComputeFailure(WireModel):
    ok: Literal[False] = False
    error: str