from __future__ import annotations

from typing import Dict, Iterable, Optional, Tuple, Type

from .rule import NoticeRule

RuleKey = Tuple[str, str]


class RuleRegistry:
    def __init__(self):
        self._rules: Dict[RuleKey, Type[NoticeRule]] = {}

    def register(self, rule_cls: Type[NoticeRule]) -> None:
        rule_id = getattr(rule_cls, "rule_id", None)
        if not rule_id:
            raise ValueError("Rule class missing rule_id")
        jurisdiction_id = getattr(rule_cls, "jurisdiction_id", None)
        notice_type = getattr(rule_cls, "notice_type", None)
        if not jurisdiction_id or not notice_type:
            raise ValueError(f"Rule class {rule_id} missing jurisdiction_id/notice_type")
        key = (jurisdiction_id, notice_type)
        if key in self._rules:
            raise ValueError(f"Duplicate rule registered for {jurisdiction_id}/{notice_type}")
        if any(cls.rule_id == rule_id for cls in self._rules.values()):
            raise ValueError(f"Duplicate rule_id registered: {rule_id}")
        self._rules[key] = rule_cls

    def lookup(self, jurisdiction_id: str, notice_type: str) -> Optional[NoticeRule]:
        rule_cls = self._rules.get((jurisdiction_id, notice_type))
        if rule_cls is None:
            return None
        return rule_cls()

    def get(self, key: RuleKey) -> Type[NoticeRule]:
        return self._rules[key]

    def keys(self) -> Iterable[RuleKey]:
        return self._rules.keys()


registry = RuleRegistry()


def register_rule(rule_cls: Type[NoticeRule]) -> Type[NoticeRule]:
    registry.register(rule_cls)
    return rule_cls


def lookup(jurisdiction_id: str, notice_type: str) -> Optional[NoticeRule]:
    return registry.lookup(jurisdiction_id, notice_type)
