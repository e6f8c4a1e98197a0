"""Join-route check: can a visitor start a membership from this page?"""

from typing import List, Optional

from gym_audit.config import AuditThresholds, default_thresholds
from gym_audit.constants import (
    JOIN_HREF_PATTERN,
    JOIN_TEXT_TERMS,
    MEMBERSHIP_OPTIONS_PATTERN,
    ONLINE_SIGNAL_PATTERN,
)
from gym_audit.models import JoinRoute
from gym_audit.page_parser import Control, ParsedPage

PRESENT_EVIDENCE = "Membership options/join route detected."
MISSING_EVIDENCE = "No clear membership options/join route found on this page."


class JoinRouteEvaluator:
    """Looks for a membership-options link or an early online join CTA.

    Control indexes run across links and buttons in document order; a CTA
    with an index below ``top_cta_window`` stands in for "above the fold".
    """

    def __init__(self, thresholds: Optional[AuditThresholds] = None):
        self.thresholds = thresholds or default_thresholds

    @staticmethod
    def is_cta(control: Control) -> bool:
        text = control.text.lower()
        if any(term in text for term in JOIN_TEXT_TERMS):
            return True
        return bool(JOIN_HREF_PATTERN.search(control.href.lower()))

    def cta_candidates(self, page: ParsedPage) -> List[Control]:
        return [c for c in page.controls if self.is_cta(c)]

    def evaluate(self, page: ParsedPage) -> JoinRoute:
        candidates = self.cta_candidates(page)
        has_membership_options = any(
            MEMBERSHIP_OPTIONS_PATTERN.search(a.text) for a in page.anchors
        )
        has_online_signal = any(
            ONLINE_SIGNAL_PATTERN.search(c.href.lower()) for c in candidates
        )
        has_top_cta = any(c.index < self.thresholds.top_cta_window for c in candidates)

        present = has_membership_options or (has_online_signal and has_top_cta)
        return JoinRoute(
            present=present,
            evidence=PRESENT_EVIDENCE if present else MISSING_EVIDENCE,
            candidate_count=len(candidates),
        )
