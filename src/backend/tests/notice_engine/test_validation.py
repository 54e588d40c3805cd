from datetime import date

import pytest

from common.notice_engine.errors import RequestValidationFailed
from common.notice_engine.models import DeliveryMethod
from common.notice_engine.validation import NoticeRequest, validate_notice_request

TODAY = date(2026, 3, 1)


@pytest.fixture
def body():
    return {
        "jurisdictionId": "CA-SACRAMENTO",
        "noticeType": "OWNER_MOVE_IN_120_DAY",
        "serviceDate": "2026-01-10",
        "occupancyDate": "2026-06-01",
        "deliveryMethod": "MAIL",
        "ownerIsNaturalPerson": True,
        "ownershipPercent": 60,
    }


def _issues(payload):
    with pytest.raises(RequestValidationFailed) as excinfo:
        validate_notice_request(payload, today=TODAY)
    return excinfo.value.issues


def test_valid_request_parses(body):
    req = validate_notice_request(body, today=TODAY)
    assert isinstance(req, NoticeRequest)
    assert req.service_date == date(2026, 1, 10)
    assert req.delivery_method is DeliveryMethod.MAIL
    assert req.ownership_percent == 60


def test_unknown_keys_are_ignored(body):
    body["notes"] = "free text"
    assert validate_notice_request(body, today=TODAY).jurisdiction_id == "CA-SACRAMENTO"


def test_unknown_delivery_method_rejected(body):
    body["deliveryMethod"] = "CARRIER_PIGEON"
    assert [i["path"] for i in _issues(body)] == ["deliveryMethod"]


def test_unsupported_jurisdiction_rejected(body):
    body["jurisdictionId"] = "CA-LOSANGELES"
    assert [i["path"] for i in _issues(body)] == ["jurisdictionId"]


@pytest.mark.parametrize("value", ["2026/01/10", "01-10-2026", "2026-1-10", 20260110, None])
def test_service_date_format(body, value):
    body["serviceDate"] = value
    issues = _issues(body)
    assert issues[0]["path"] == "serviceDate"


def test_impossible_calendar_date_rejected(body):
    body["occupancyDate"] = "2026-02-30"
    assert [i["path"] for i in _issues(body)] == ["occupancyDate"]


@pytest.mark.parametrize("value,fragment", [(-1, ">= 0"), (100.5, "<= 100"), ("60", "number"), (True, "number")])
def test_ownership_percent_range_and_type(body, value, fragment):
    body["ownershipPercent"] = value
    issues = _issues(body)
    assert issues[0]["path"] == "ownershipPercent"
    assert fragment in issues[0]["message"]


def test_ownership_percent_bounds_inclusive(body):
    for value in (0, 100, 51.5):
        body["ownershipPercent"] = value
        assert validate_notice_request(body, today=TODAY).ownership_percent == value


def test_owner_flag_must_be_boolean(body):
    body["ownerIsNaturalPerson"] = "yes"
    assert [i["path"] for i in _issues(body)] == ["ownerIsNaturalPerson"]


def test_missing_fields_reported(body):
    del body["serviceDate"]
    del body["deliveryMethod"]
    assert sorted(i["path"] for i in _issues(body)) == ["deliveryMethod", "serviceDate"]


def test_occupancy_before_service_rejected(body):
    body["occupancyDate"] = "2026-01-09"
    assert _issues(body) == [{"path": "occupancyDate", "message": "occupancyDate must be on or after serviceDate"}]


def test_same_day_occupancy_allowed(body):
    body["occupancyDate"] = body["serviceDate"]
    validate_notice_request(body, today=TODAY)


def test_future_service_date_rejected(body):
    body["serviceDate"] = "2026-03-02"
    body["occupancyDate"] = "2026-08-01"
    assert _issues(body) == [{"path": "serviceDate", "message": "serviceDate cannot be in the future"}]


def test_both_temporal_issues_reported(body):
    body["serviceDate"] = "2026-04-01"
    body["occupancyDate"] = "2026-03-15"
    assert [i["path"] for i in _issues(body)] == ["occupancyDate", "serviceDate"]


def test_service_today_allowed(body):
    body["serviceDate"] = TODAY.isoformat()
    validate_notice_request(body, today=TODAY)
