from __future__ import annotations

import logging
import math
from datetime import date
from typing import List, Optional

from ..audit import AUTHORITY_SUMMARY_RULE_ID, AUTHORITY_SUMMARY_STEP, build_authority_summary
from ..authorities import AUTHORITIES_OMI_120_SAC
from ..config import NoticeRulesConfig, OwnerMoveInRuleConfig
from ..dates import add_calendar_days
from ..models import (
    Authority,
    AuditEntry,
    CaseFacts,
    DeliveryMethod,
    EffectiveServiceMeta,
    Eligibility,
    EligibilityReason,
    GateStatus,
    NoticeComputeResult,
    RequiredClause,
)
from ..registry import register_rule
from ..rule import NoticeRule

logger = logging.getLogger(__name__)

# CCP § 1013: five calendar days added for service by mail within California.
MAIL_EXTENSION_DAYS = 5

# Always cited for this notice type, regardless of eligibility or delivery method.
BASELINE_AUTHORITY_IDS = ("SAC_CODE_5_156_090", "CA_CIV_1946_2")

# TODO: replace with the final notice text once counsel signs off on the Sacramento clause wording.
REQUIRED_CLAUSES = (
    RequiredClause(
        id="CLAUSE_OMI_INTENT",
        text="Owner intends to occupy the unit as a primary residence. (Placeholder clause text)",
    ),
)


def _iso(value) -> str:
    return value.isoformat() if isinstance(value, date) else str(value)


def _method_value(method) -> str:
    return method.value if isinstance(method, DeliveryMethod) else str(method)


def compute_effective_service_meta(service_date_iso: str, delivery_method) -> EffectiveServiceMeta:
    """Effective service date per delivery method.

    - PERSONAL: same day (CCP § 1162(a)(1))
    - MAIL: +5 calendar days (CCP § 1013)
    - POSTING_MAIL: same day (CCP § 1162(a)(3), Walters v. Meyers)
    """
    method = _method_value(delivery_method)

    if method == DeliveryMethod.PERSONAL.value:
        return EffectiveServiceMeta(
            effective_service_date=service_date_iso,
            rule_id="RULE_EFFECTIVE_PERSONAL_CCP_1162_A1",
            authority_ids=("CA_CCP_1162",),
        )

    if method == DeliveryMethod.MAIL.value:
        return EffectiveServiceMeta(
            effective_service_date=add_calendar_days(service_date_iso, MAIL_EXTENSION_DAYS),
            rule_id="RULE_EFFECTIVE_MAIL_CCP_1013_A_PLUS_5_CALENDAR_DAYS",
            authority_ids=("CA_CCP_1013",),
        )

    if method == DeliveryMethod.POSTING_MAIL.value:
        return EffectiveServiceMeta(
            effective_service_date=service_date_iso,
            rule_id="RULE_EFFECTIVE_POSTING_MAIL_CCP_1162_A3_WALTERS_V_MEYERS",
            authority_ids=("CA_CCP_1162", "CASE_WALTERS_V_MEYERS_1990"),
        )

    # Unreachable when facts come through request validation.
    logger.warning(
        "Invariant violation: delivery method %r is outside the closed set; using service date as-is",
        method,
    )
    return EffectiveServiceMeta(
        effective_service_date=service_date_iso,
        rule_id="RULE_EFFECTIVE_UNKNOWN_FALLBACK",
        authority_ids=(),
    )


def skipped_service_meta(delivery_method) -> EffectiveServiceMeta:
    return EffectiveServiceMeta(
        effective_service_date=None,
        rule_id=f"RULE_EFFECTIVE_{_method_value(delivery_method)}_SKIPPED_NOT_ELIGIBLE",
        authority_ids=(),
    )


def build_audit(
    *,
    service_date_iso: str,
    occupancy_date_iso: str,
    delivery_method: str,
    owner_natural_person_pass: bool,
    ownership_threshold_pass: bool,
    effective_service_date: Optional[str],
    effective_service_rule_id: str,
    notice_period_days: int,
    earliest_termination_date: Optional[str],
    citations: List[Authority],
) -> List[AuditEntry]:
    def gate(passed: bool) -> str:
        return (GateStatus.PASS if passed else GateStatus.FAIL).value

    return [
        AuditEntry(step="SERVICE_DATE_INPUT", value=service_date_iso, rule_id="RULE_SERVICE_DATE_USER_INPUT"),
        AuditEntry(step="OCCUPANCY_DATE_INPUT", value=occupancy_date_iso, rule_id="RULE_OCCUPANCY_DATE_USER_INPUT"),
        AuditEntry(step="DELIVERY_METHOD_INPUT", value=delivery_method, rule_id="RULE_DELIVERY_METHOD_USER_INPUT"),
        AuditEntry(
            step="ELIGIBILITY_OWNER_NATURAL_PERSON",
            value=gate(owner_natural_person_pass),
            rule_id="RULE_OWNER_NATURAL_PERSON_GATE",
        ),
        AuditEntry(
            step="ELIGIBILITY_OWNERSHIP_THRESHOLD",
            value=gate(ownership_threshold_pass),
            rule_id="RULE_OWNERSHIP_THRESHOLD_GATE",
        ),
        AuditEntry(step="EFFECTIVE_SERVICE_DATE", value=effective_service_date, rule_id=effective_service_rule_id),
        AuditEntry(
            step="NOTICE_PERIOD_DAYS",
            value=notice_period_days,
            rule_id=f"RULE_NOTICE_PERIOD_{notice_period_days}_PLACEHOLDER",
        ),
        AuditEntry(
            step="EARLIEST_TERMINATION_DATE",
            value=earliest_termination_date,
            rule_id="RULE_ADD_DAYS_CALENDAR_UTC",
        ),
        # Always last, and derived from the finished citation list.
        AuditEntry(
            step=AUTHORITY_SUMMARY_STEP,
            value=build_authority_summary(citations),
            rule_id=AUTHORITY_SUMMARY_RULE_ID,
        ),
    ]


@register_rule
class CA_SACRAMENTO_OWNER_MOVE_IN_120_DAY(NoticeRule):
    rule_id = "CA-SACRAMENTO-OWNER-MOVE-IN-120-DAY"
    rule_title = "Sacramento owner move-in termination (120-day notice)"
    jurisdiction_id = "CA-SACRAMENTO"
    notice_type = "OWNER_MOVE_IN_120_DAY"
    authorities = AUTHORITIES_OMI_120_SAC
    config_model = OwnerMoveInRuleConfig

    def compute(
        self,
        facts: CaseFacts,
        rules_config: Optional[NoticeRulesConfig] = None,
    ) -> NoticeComputeResult:
        cfg: OwnerMoveInRuleConfig = self.get_config(rules_config)

        service_date_iso = _iso(facts.service_date)
        occupancy_date_iso = _iso(facts.occupancy_date)
        delivery_method = _method_value(facts.delivery_method)
        notice_period_days = cfg.notice_period_days

        # Gates are evaluated independently so every failure surfaces.
        owner_natural_person_pass = facts.owner_is_natural_person is True
        pct = facts.ownership_percent
        ownership_threshold_pass = (
            isinstance(pct, (int, float))
            and not isinstance(pct, bool)
            and math.isfinite(pct)
            and pct >= cfg.ownership_threshold_percent
        )

        reasons: List[EligibilityReason] = []
        if not owner_natural_person_pass:
            reasons.append(
                EligibilityReason(code="OWNER_NOT_NATURAL_PERSON", message="Owner must be a natural person.")
            )
        if not ownership_threshold_pass:
            reasons.append(
                EligibilityReason(
                    code="OWNERSHIP_BELOW_THRESHOLD",
                    message="Ownership percent must meet the threshold for Owner Move-In.",
                )
            )
        eligible = not reasons

        if eligible:
            meta = compute_effective_service_meta(service_date_iso, facts.delivery_method)
            earliest_termination_date = add_calendar_days(meta.effective_service_date, notice_period_days)
            required_clauses = list(REQUIRED_CLAUSES)
        else:
            meta = skipped_service_meta(facts.delivery_method)
            earliest_termination_date = None
            required_clauses = []

        citations = self.authorities.resolve(BASELINE_AUTHORITY_IDS + meta.authority_ids)

        audit = build_audit(
            service_date_iso=service_date_iso,
            occupancy_date_iso=occupancy_date_iso,
            delivery_method=delivery_method,
            owner_natural_person_pass=owner_natural_person_pass,
            ownership_threshold_pass=ownership_threshold_pass,
            effective_service_date=meta.effective_service_date,
            effective_service_rule_id=meta.rule_id,
            notice_period_days=notice_period_days,
            earliest_termination_date=earliest_termination_date,
            citations=citations,
        )

        logger.debug(
            "Computed %s: eligible=%s method=%s effective=%s termination=%s",
            self.rule_id,
            eligible,
            delivery_method,
            meta.effective_service_date,
            earliest_termination_date,
        )

        return NoticeComputeResult(
            jurisdiction_id=facts.jurisdiction_id,
            notice_type=facts.notice_type,
            service_date=facts.service_date,
            occupancy_date=facts.occupancy_date,
            delivery_method=delivery_method,
            owner_is_natural_person=facts.owner_is_natural_person,
            ownership_percent=facts.ownership_percent,
            notice_period_days=notice_period_days,
            effective_service_date=meta.effective_service_date,
            earliest_termination_date=earliest_termination_date,
            required_clauses=required_clauses,
            eligibility=Eligibility(eligible=eligible, reasons=reasons),
            audit=audit,
            citations=citations,
        )
