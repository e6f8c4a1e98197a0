"""Decides whether a fetched page is a club landing page at all."""

from typing import Optional

from gym_audit.config import AuditThresholds, default_thresholds
from gym_audit.constants import (
    CLOSURE_OR_PROMO_PATTERN,
    GYM_WORDS_PATTERN,
    JOIN_WORDS_PATTERN,
    SUB_NAV_SECTIONS,
)
from gym_audit.page_parser import ParsedPage


def has_sub_navigation(page: ParsedPage, slug: Optional[str]) -> bool:
    """True when the page links to its own timetable, classes or services."""
    page_path = f"/gyms/{slug}" if slug else ""
    return any(
        page.has_link_containing(f"{page_path}/{section}") for section in SUB_NAV_SECTIONS
    )


def is_likely_gym_page(
    page: ParsedPage,
    slug: Optional[str],
    thresholds: Optional[AuditThresholds] = None,
) -> bool:
    """Relevance gate applied before a page is included in the report.

    Closure and promotional pages are rejected even when they otherwise look
    like a club page.
    """
    thresholds = thresholds or default_thresholds
    headline = f"{page.title} {page.h1} {page.meta_description}"

    if CLOSURE_OR_PROMO_PATTERN.search(headline):
        return False

    has_gym_words = bool(GYM_WORDS_PATTERN.search(headline))
    if not has_gym_words:
        return False

    if has_sub_navigation(page, slug):
        return True

    opening = f"{headline} {page.body_text[:thresholds.relevance_body_chars]}"
    return bool(JOIN_WORDS_PATTERN.search(opening))
