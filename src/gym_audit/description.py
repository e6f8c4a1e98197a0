"""Tone assessment of the club's headline and meta description."""

from typing import Optional

from gym_audit.config import AuditThresholds, default_thresholds
from gym_audit.constants import APPEAL_TERMS, BENEFIT_TERMS
from gym_audit.models import ClubDescription, TONE_APPEALING, TONE_NEEDS_IMPROVEMENT
from gym_audit.page_parser import ParsedPage

APPEALING_TEXT = (
    "The club description is appealing. It communicates clear benefits and uses "
    "persuasive language about the experience."
)

NEEDS_IMPROVEMENT_TEXT = (
    "The club description is not very compelling yet. Improve it by adding clearer "
    "member benefits, more distinctive language about the experience, and one strong "
    "value proposition in the opening paragraph."
)


class DescriptionToneEvaluator:
    """Counts appeal and benefit vocabulary across the snippet and body."""

    def __init__(self, thresholds: Optional[AuditThresholds] = None):
        self.thresholds = thresholds or default_thresholds

    @staticmethod
    def snippet(page: ParsedPage) -> str:
        return f"{page.h1}. {page.meta_description}".strip()

    @staticmethod
    def count_hits(terms, *texts: str) -> int:
        return sum(1 for term in terms if any(term in text for text in texts))

    def evaluate(self, page: ParsedPage) -> ClubDescription:
        snippet = self.snippet(page)
        lower_snippet = snippet.lower()
        lower_body = page.lower_body_text

        appeal_hits = self.count_hits(APPEAL_TERMS, lower_snippet, lower_body)
        benefit_hits = self.count_hits(BENEFIT_TERMS, lower_snippet, lower_body)

        t = self.thresholds
        appealing = (
            len(snippet) >= t.min_description_length
            and appeal_hits >= t.min_appeal_hits
            and benefit_hits >= t.min_benefit_hits
        )
        if appealing:
            return ClubDescription(tone=TONE_APPEALING, text=APPEALING_TEXT)
        return ClubDescription(tone=TONE_NEEDS_IMPROVEMENT, text=NEEDS_IMPROVEMENT_TEXT)
