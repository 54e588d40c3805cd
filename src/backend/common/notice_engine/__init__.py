"""Jurisdictional notice computation engine.

This package contains only domain logic:
- Inputs are validated case facts + optional rule configuration.
- No HTTP, file, or network access lives here.
"""

from .authority import AuthorityRegistry
from .config import NoticeRulesConfig, OwnerMoveInRuleConfig
from .dates import add_calendar_days
from .errors import (
    ContractViolationError,
    NoticeEngineError,
    RequestValidationFailed,
    UnknownAuthorityError,
)
from .models import (
    Authority,
    AuditEntry,
    CaseFacts,
    DeliveryMethod,
    Eligibility,
    EligibilityReason,
    NoticeComputeFailure,
    NoticeComputeResult,
    NoticeComputeSuccess,
    RequiredClause,
)
from .registry import lookup, registry
from .runner import NoticeRunner, compute_notice

# Import built-in rule modules so they self-register with the global registry.
from . import rules as _builtin_rules  # noqa: F401
