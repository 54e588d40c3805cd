"""Request validation run before a case reaches the engine.

Shape checks are pydantic; the temporal checks need the parsed dates and
run afterwards, mirroring how the engine assumes them to already hold.
"""

from __future__ import annotations

import re
from datetime import date
from typing import Any, Dict, List, Literal, Optional

from pydantic import StrictBool, ValidationError, field_validator

from .contracts import validation_issues
from .errors import RequestValidationFailed
from .models import CaseFacts

_ISO_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


class NoticeRequest(CaseFacts):
    jurisdiction_id: Literal["CA-SACRAMENTO"]
    notice_type: Literal["OWNER_MOVE_IN_120_DAY"]
    owner_is_natural_person: StrictBool

    @field_validator("service_date", "occupancy_date", mode="before")
    @classmethod
    def iso_calendar_date(cls, v: Any) -> Any:
        if isinstance(v, date):
            return v
        if not isinstance(v, str) or not _ISO_DATE_RE.match(v):
            raise ValueError("Must be YYYY-MM-DD")
        return v

    @field_validator("ownership_percent", mode="before")
    @classmethod
    def numeric_percent(cls, v: Any) -> Any:
        if isinstance(v, bool) or not isinstance(v, (int, float)):
            raise ValueError("ownershipPercent must be a number")
        return v

    @field_validator("ownership_percent")
    @classmethod
    def percent_in_range(cls, v: float) -> float:
        if not v >= 0:
            raise ValueError("ownershipPercent must be >= 0")
        if v > 100:
            raise ValueError("ownershipPercent must be <= 100")
        return v


def temporal_issues(request: NoticeRequest, *, today: date) -> List[Dict[str, Any]]:
    issues: List[Dict[str, Any]] = []
    if request.service_date > request.occupancy_date:
        issues.append({"path": "occupancyDate", "message": "occupancyDate must be on or after serviceDate"})
    if request.service_date > today:
        issues.append({"path": "serviceDate", "message": "serviceDate cannot be in the future"})
    return issues


def validate_notice_request(payload: Any, *, today: Optional[date] = None) -> NoticeRequest:
    """Parse and check a raw request body; raise `RequestValidationFailed` with every issue found."""
    try:
        request = NoticeRequest.model_validate(payload)
    except ValidationError as exc:
        raise RequestValidationFailed(validation_issues(exc)) from exc

    issues = temporal_issues(request, today=today or date.today())
    if issues:
        raise RequestValidationFailed(issues)
    return request
