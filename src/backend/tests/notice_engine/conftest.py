from datetime import date

import pytest

from common.notice_engine.config import NoticeRulesConfig
from common.notice_engine.models import CaseFacts, DeliveryMethod


@pytest.fixture
def service_date() -> date:
    return date(2026, 1, 10)


@pytest.fixture
def make_facts(service_date):
    def _make(
        *,
        delivery_method=DeliveryMethod.PERSONAL,
        owner_is_natural_person: bool = True,
        ownership_percent: float = 100,
        occupancy_date: date | None = None,
        jurisdiction_id: str = "CA-SACRAMENTO",
        notice_type: str = "OWNER_MOVE_IN_120_DAY",
        service_date_override: date | None = None,
    ) -> CaseFacts:
        return CaseFacts(
            jurisdiction_id=jurisdiction_id,
            notice_type=notice_type,
            service_date=service_date_override or service_date,
            occupancy_date=occupancy_date or date(2026, 6, 1),
            delivery_method=delivery_method,
            owner_is_natural_person=owner_is_natural_person,
            ownership_percent=ownership_percent,
        )

    return _make


@pytest.fixture
def make_rules_config():
    def _make(**owner_move_in) -> NoticeRulesConfig:
        return NoticeRulesConfig(rules={"CA-SACRAMENTO-OWNER-MOVE-IN-120-DAY": owner_move_in})

    return _make
