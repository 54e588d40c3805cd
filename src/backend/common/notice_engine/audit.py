from __future__ import annotations

from typing import Optional, Sequence

from .models import Authority

AUTHORITY_SUMMARY_STEP = "LEGAL_AUTHORITY_SUMMARY"
AUTHORITY_SUMMARY_RULE_ID = "RULE_AUTHORITY_COMPOSITE_DERIVED"


def sort_citations(citations: Sequence[Authority]) -> list[Authority]:
    # Stable, reproducible ordering: authority name, then section.
    return sorted(citations, key=lambda c: (c.authority, c.section))


def build_authority_summary(citations: Sequence[Authority]) -> Optional[str]:
    """Sentence naming every resolved citation, or None when there are none.

    Must be derived from the final citation list so the sentence can never
    name an authority the result does not cite.
    """
    if not citations:
        return None
    parts = [c.label() for c in sort_citations(citations)]
    return "This calculation is lawful because " + ", ".join(parts) + " collectively authorize it."
