from __future__ import annotations

import logging
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from common.notice_engine.log_setup import configure_logging
from common.notice_engine.settings import EngineSettings, get_engine_settings

from .notice import router as notice_router

logger = logging.getLogger(__name__)


def create_app(settings: Optional[EngineSettings] = None) -> FastAPI:
    settings = settings or get_engine_settings()
    configure_logging(settings.log_level)

    app = FastAPI(title="Notice Timeline", version="1.0.0")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Content-Type"],
    )
    app.state.settings = settings
    app.state.rules_config = settings.load_rules_config()
    app.include_router(notice_router)

    logger.info("Notice API ready (enforce_contract=%s)", settings.enforce_contract)
    return app
