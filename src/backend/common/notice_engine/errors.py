from __future__ import annotations

from typing import Any, Dict, List


class NoticeEngineError(Exception):
    """Base for notice engine errors."""


class UnknownAuthorityError(NoticeEngineError):
    # A rule module cited an id the authority registry does not hold.
    def __init__(self, authority_id: str):
        self.authority_id = authority_id
        super().__init__(f"Unknown authorityId: {authority_id}")


class ContractViolationError(NoticeEngineError):
    def __init__(self, issues: List[Dict[str, Any]]):
        self.issues = issues
        super().__init__(f"Result contract violated ({len(issues)} issue(s))")


class RequestValidationFailed(NoticeEngineError):
    def __init__(self, issues: List[Dict[str, Any]]):
        self.issues = issues
        super().__init__("Validation failed")
