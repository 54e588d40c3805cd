from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from .config import NoticeRulesConfig


load_dotenv()

_TRUTHY = ("1", "true", "yes", "on")


@dataclass(frozen=True)
class EngineSettings:
    enforce_contract: bool = False
    log_level: str = "INFO"
    rules_config_path: Optional[Path] = None

    def load_rules_config(self) -> NoticeRulesConfig:
        if self.rules_config_path is None:
            return NoticeRulesConfig()
        return NoticeRulesConfig.from_file(self.rules_config_path)


def get_engine_settings() -> EngineSettings:
    """
    Load engine settings from environment variables (and `.env`).

    Reads:
      ENFORCE_CONTRACT, LOG_LEVEL, NOTICE_RULES_CONFIG
    """
    rules_config = os.getenv("NOTICE_RULES_CONFIG", "").strip()
    return EngineSettings(
        enforce_contract=os.getenv("ENFORCE_CONTRACT", "").strip().lower() in _TRUTHY,
        log_level=os.getenv("LOG_LEVEL", "INFO").strip().upper() or "INFO",
        rules_config_path=Path(rules_config) if rules_config else None,
    )
