"""Turns one page's HTML into an AssessmentResult."""

import logging
from typing import Optional

from gym_audit.config import AuditThresholds, default_thresholds
from gym_audit.description import DescriptionToneEvaluator
from gym_audit.facilities import facilities_evaluator
from gym_audit.imagery import ImageryEvaluator
from gym_audit.join_route import JoinRouteEvaluator
from gym_audit.models import AssessmentResult
from gym_audit.page_parser import ParsedPage
from gym_audit.priority import derive_fix_priority
from gym_audit.relevance import is_likely_gym_page
from gym_audit.text_utils import slug_from_gym_url, titleize_slug

logger = logging.getLogger(__name__)


class PageAssessor:
    """Runs every heuristic against a single parsed page.

    The HTML is parsed once and the same ParsedPage is handed to each
    evaluator. Heuristic misses never raise; only a parser failure
    propagates to the caller.
    """

    def __init__(
        self,
        thresholds: Optional[AuditThresholds] = None,
        facilities_strategy: str = "core",
    ):
        """Initialize the assessor.

        Args:
            thresholds: Heuristic thresholds (defaults when None)
            facilities_strategy: 'core' (closed core set) or 'open' (term list)
        """
        self.thresholds = thresholds or default_thresholds
        self.facilities = facilities_evaluator(facilities_strategy, self.thresholds)
        self.imagery = ImageryEvaluator(self.thresholds)
        self.join_route = JoinRouteEvaluator(self.thresholds)
        self.description = DescriptionToneEvaluator(self.thresholds)

    def assess(self, url: str, html: str) -> AssessmentResult:
        """Assess one page.

        Args:
            url: Page URL (used for the slug and gym name fallback)
            html: Raw HTML

        Returns:
            AssessmentResult with criteria, tone, join route and fix priority
        """
        page = ParsedPage(html)
        slug = slug_from_gym_url(url)

        facilities = self.facilities.evaluate(page)
        imagery = self.imagery.evaluate(page)
        join_route = self.join_route.evaluate(page)

        fix_priority = derive_fix_priority(
            [facilities.passed, imagery.passed], join_route.present
        )

        gym_name = page.h1 or (titleize_slug(slug) if slug else page.title)
        logger.debug(
            f"Assessed {url}: {self.facilities.name}={facilities.result}, "
            f"imagery={imagery.result}, join_route={join_route.present}, "
            f"priority={fix_priority}"
        )

        return AssessmentResult(
            url=url,
            slug=slug,
            gym_name=gym_name,
            title=page.title,
            is_likely_gym_page=is_likely_gym_page(page, slug, self.thresholds),
            criteria={
                self.facilities.name: facilities,
                self.imagery.name: imagery,
            },
            club_description=self.description.evaluate(page),
            join_route_present=join_route.present,
            join_route_evidence=join_route.evidence,
            fix_priority=fix_priority,
        )
