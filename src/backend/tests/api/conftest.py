from datetime import date, timedelta

import pytest
from fastapi.testclient import TestClient

from api.app import create_app
from common.notice_engine.settings import EngineSettings


@pytest.fixture
def make_client():
    def _make(**settings) -> TestClient:
        return TestClient(create_app(EngineSettings(**settings)))

    return _make


@pytest.fixture
def client(make_client) -> TestClient:
    return make_client()


@pytest.fixture
def body():
    return {
        "jurisdictionId": "CA-SACRAMENTO",
        "noticeType": "OWNER_MOVE_IN_120_DAY",
        "serviceDate": "2026-01-10",
        "occupancyDate": "2026-06-01",
        "deliveryMethod": "PERSONAL",
        "ownerIsNaturalPerson": True,
        "ownershipPercent": 100,
    }


@pytest.fixture
def tomorrow() -> str:
    return (date.today() + timedelta(days=1)).isoformat()
