from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional, Type

from pydantic import BaseModel

from .authority import AuthorityRegistry
from .config import NoticeRulesConfig, RuleConfigBase
from .models import CaseFacts, NoticeComputeResult


class NoticeRule(ABC):
    """One jurisdiction x notice type computation.

    Implementations must be pure: no I/O and no state kept between calls.
    """

    rule_id: str
    rule_title: str
    jurisdiction_id: str
    notice_type: str
    authorities: AuthorityRegistry
    config_model: Type[BaseModel] = RuleConfigBase

    def __init__(self):
        if not getattr(self, "rule_id", None):
            raise ValueError("Rule must define rule_id")

    def get_config(self, rules_config: Optional[NoticeRulesConfig]):
        cfg = rules_config or NoticeRulesConfig()
        return cfg.get_rule_config(self.rule_id, self.config_model)

    def is_enabled(self, rules_config: Optional[NoticeRulesConfig] = None) -> bool:
        return bool(getattr(self.get_config(rules_config), "enabled", True))

    @abstractmethod
    def compute(
        self,
        facts: CaseFacts,
        rules_config: Optional[NoticeRulesConfig] = None,
    ) -> NoticeComputeResult:  # pragma: no cover
        raise NotImplementedError
