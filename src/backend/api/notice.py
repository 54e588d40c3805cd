from __future__ import annotations

import json
import logging

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from common.notice_engine.config import NoticeRulesConfig
from common.notice_engine.contracts import check_contract
from common.notice_engine.errors import RequestValidationFailed
from common.notice_engine.models import NoticeComputeFailure
from common.notice_engine.runner import compute_notice
from common.notice_engine.settings import EngineSettings
from common.notice_engine.validation import validate_notice_request

logger = logging.getLogger(__name__)

router = APIRouter(tags=["notice"])

SERVICE_NAME = "notice-timeline"


def _settings(request: Request) -> EngineSettings:
    return getattr(request.app.state, "settings", None) or EngineSettings()


def _rules_config(request: Request) -> NoticeRulesConfig:
    return getattr(request.app.state, "rules_config", None) or NoticeRulesConfig()


@router.get("/health")
def health():
    return {"ok": True, "service": SERVICE_NAME}


@router.post("/v1/notice/compute")
async def compute_notice_route(request: Request):
    raw = await request.body()
    try:
        body = json.loads(raw) if raw else {}
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        return JSONResponse(
            status_code=400,
            content={"ok": False, "error": "Invalid JSON (JavaScript Object Notation)", "detail": str(exc)},
        )

    try:
        facts = validate_notice_request(body)
    except RequestValidationFailed as exc:
        return JSONResponse(
            status_code=422,
            content={"ok": False, "error": "Validation failed", "issues": exc.issues},
        )

    try:
        outcome = compute_notice(facts, rules_config=_rules_config(request))
    except Exception as exc:
        logger.exception("Notice computation failed for %s/%s", facts.jurisdiction_id, facts.notice_type)
        return JSONResponse(
            status_code=500,
            content={"ok": False, "error": "Computation failed", "detail": str(exc)},
        )

    if isinstance(outcome, NoticeComputeFailure):
        return JSONResponse(status_code=422, content=outcome.to_wire())

    payload = outcome.to_wire()
    if _settings(request).enforce_contract:
        issues = check_contract(payload)
        if issues:
            logger.error("Internal contract mismatch: %s", issues)
            return JSONResponse(
                status_code=500,
                content={"ok": False, "error": "Internal contract mismatch", "issues": issues},
            )

    return JSONResponse(status_code=200, content=payload)
