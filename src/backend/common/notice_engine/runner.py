from __future__ import annotations

import logging
from typing import Optional, Union

from .config import NoticeRulesConfig
from .models import CaseFacts, NoticeComputeFailure, NoticeComputeSuccess
from .registry import RuleRegistry, registry

logger = logging.getLogger(__name__)

UNSUPPORTED_COMBINATION = "Unsupported jurisdictionId/noticeType combination"

NoticeComputeOutcome = Union[NoticeComputeSuccess, NoticeComputeFailure]


class NoticeRunner:
    def __init__(
        self,
        rules_config: Optional[NoticeRulesConfig] = None,
        *,
        rule_registry: Optional[RuleRegistry] = None,
    ):
        self._rules_config = rules_config or NoticeRulesConfig()
        self._registry = rule_registry or registry

    def run(self, facts: CaseFacts) -> NoticeComputeOutcome:
        rule = self._registry.lookup(facts.jurisdiction_id, facts.notice_type)
        if rule is None or not rule.is_enabled(self._rules_config):
            logger.warning(
                "No enabled rule module for %s/%s",
                facts.jurisdiction_id,
                facts.notice_type,
            )
            return NoticeComputeFailure(error=UNSUPPORTED_COMBINATION)

        # UnknownAuthorityError is a rule/registry drift and propagates.
        result = rule.compute(facts, self._rules_config)
        return NoticeComputeSuccess(result=result)


def compute_notice(
    facts: CaseFacts,
    *,
    rules_config: Optional[NoticeRulesConfig] = None,
) -> NoticeComputeOutcome:
    return NoticeRunner(rules_config).run(facts)
