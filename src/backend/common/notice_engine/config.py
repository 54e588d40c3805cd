from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Optional, Type, TypeVar

import yaml
from pydantic import BaseModel, Field

T = TypeVar("T", bound=BaseModel)


class RuleConfigBase(BaseModel):
    # A disabled rule module is reported as unsupported by the runner.
    enabled: bool = True


class OwnerMoveInRuleConfig(RuleConfigBase):
    # NOTE: both constants are pending legal review against the full city and state text.
    # They are configuration, not settled law; keep `pending_legal_review` set until they are confirmed.
    ownership_threshold_percent: float = Field(default=51, ge=0, le=100)
    notice_period_days: int = Field(default=120, gt=0)
    pending_legal_review: bool = True


class NoticeRulesConfig(BaseModel):
    """Deployment-specific configuration for all rule modules.

    Keyed by rule id; rule modules pull their typed config via `get_rule_config`.
    """

    rules: Dict[str, Dict[str, Any]] = Field(default_factory=dict)

    def get_rule_config(
        self,
        rule_id: str,
        model: Type[T],
        default: Optional[T] = None,
    ) -> T:
        if rule_id not in self.rules:
            if default is not None:
                return default
            return model()  # type: ignore[call-arg]
        raw = self.rules.get(rule_id, {})
        return model.model_validate(raw)

    @classmethod
    def from_file(cls, path: Path) -> "NoticeRulesConfig":
        text = path.read_text()
        if path.suffix.lower() in (".yaml", ".yml"):
            raw = yaml.safe_load(text) or {}
        else:
            raw = json.loads(text)
        if "rules" not in raw:
            raw = {"rules": raw}
        return cls.model_validate(raw)
