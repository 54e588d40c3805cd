"""Authorities for CA-SACRAMENTO / OWNER_MOVE_IN_120_DAY.

Scope is limited to notice validity and timing. Effective dates and URLs
point at the official code publishers.
"""

from __future__ import annotations

from datetime import date

from ..authority import AuthorityRegistry
from ..models import Authority

AUTHORITIES_OMI_120_SAC = AuthorityRegistry(
    [
        # Sacramento Tenant Protection and Relief Act, owner move-in provisions.
        Authority(
            id="SAC_CODE_5_156_090",
            authority="Sacramento City Code",
            section="§ 5.156.090",
            effective_from=date(2019, 9, 12),
            url="https://codelibrary.amlegal.com/codes/sacramentoca/latest/sacramento_ca/0-0-0-16268",
            summary=(
                "Sacramento Tenant Protection and Relief Act provision governing owner move-in evictions, "
                "including minimum 120 days' written notice, ownership thresholds, and natural-person requirements."
            ),
        ),
        # Tenant Protection Act (just cause): owner or owner-relative occupancy.
        Authority(
            id="CA_CIV_1946_2",
            authority="California Civil Code",
            section="§ 1946.2",
            effective_from=date(2024, 4, 1),
            url="https://leginfo.legislature.ca.gov/faces/codes_displaySection.xhtml?lawCode=CIV&sectionNum=1946.2",
            summary=(
                "Statewide just-cause termination framework requiring a lawful no-fault reason for eviction after "
                "12 months' tenancy, including owner occupancy as a primary residence."
            ),
        ),
        Authority(
            id="CA_CCP_1162",
            authority="California Code of Civil Procedure",
            section="§ 1162",
            effective_from=date(2011, 1, 1),
            url="https://leginfo.legislature.ca.gov/faces/codes_displaySection.xhtml?lawCode=CCP&sectionNum=1162",
            summary=(
                "Authorizes personal service, substituted service with mailing, and posting plus mailing for "
                "service of notices in unlawful detainer proceedings."
            ),
        ),
        Authority(
            id="CA_CCP_1013",
            authority="California Code of Civil Procedure",
            section="§ 1013",
            effective_from=date(1969, 7, 1),
            url="https://leginfo.legislature.ca.gov/faces/codes_displaySection.xhtml?lawCode=CCP&sectionNum=1013",
            summary="Extends prescribed periods by five calendar days when service is made by mail within California.",
        ),
        Authority(
            id="CASE_WALTERS_V_MEYERS_1990",
            authority="California Court of Appeal (case law)",
            section="Walters v. Meyers (1990) 226 Cal.App.3d Supp. 15",
            effective_from=date(1990, 1, 1),
            url="https://law.justia.com/cases/california/court-of-appeal/3d/226/supp15.html",
            summary=(
                "Holds that service by posting and mailing is effective on the date the notice is posted and "
                "mailed, not five days later."
            ),
        ),
    ]
)
