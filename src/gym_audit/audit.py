"""End-to-end audit run: discover, fetch and assess, aggregate."""

import logging
from dataclasses import replace
from typing import List, Optional, Sequence

from gym_audit.assessor import PageAssessor
from gym_audit.config import AuditConfig, AuditThresholds
from gym_audit.discovery import discover_candidates
from gym_audit.fetcher import PageFetcher
from gym_audit.models import (
    AssessmentResult,
    AuditReport,
    PoolFailure,
    PoolResult,
    SkippedPage,
)
from gym_audit.pool import run_pool

logger = logging.getLogger(__name__)


def sort_by_gym_name(gyms: Sequence[AssessmentResult]) -> List[AssessmentResult]:
    """Case-insensitive ascending order by gym name."""
    return sorted(gyms, key=lambda g: (g.gym_name.casefold(), g.gym_name))


def build_report(
    source: str,
    candidates: Sequence[str],
    results: Sequence[PoolResult],
) -> AuditReport:
    """Aggregate pool results into the report.

    Skipped pages, failures and pages rejected by the relevance gate are
    left out of ``gyms``.
    """
    gyms = [
        r for r in results
        if isinstance(r, AssessmentResult) and r.is_likely_gym_page
    ]
    return AuditReport(
        source=source,
        candidate_count=len(candidates),
        gyms=tuple(sort_by_gym_name(gyms)),
        skipped_count=sum(1 for r in results if isinstance(r, SkippedPage)),
        error_count=sum(1 for r in results if isinstance(r, PoolFailure)),
    )


class GymAuditor:
    """Runs the full audit against the configured sitemap."""

    def __init__(
        self,
        config: Optional[AuditConfig] = None,
        thresholds: Optional[AuditThresholds] = None,
        fetcher: Optional[PageFetcher] = None,
    ):
        """Initialize the auditor.

        Args:
            config: Run configuration (defaults when None)
            thresholds: Heuristic thresholds (defaults when None)
            fetcher: Optional pre-built fetcher; it is opened and closed by run()
        """
        self.config = config or AuditConfig()
        self.assessor = PageAssessor(
            thresholds=thresholds,
            facilities_strategy=self.config.facilities_strategy,
        )
        self.fetcher = fetcher or PageFetcher(
            user_agent=self.config.user_agent,
            timeout=self.config.timeout,
        )

    async def _fetch_and_assess(self, url: str, index: int) -> PoolResult:
        page = await self.fetcher.fetch(url)
        if page.status >= 400:
            logger.warning(f"Skipping {url}: HTTP {page.status}")
            return SkippedPage(url=url, status=page.status)

        result = self.assessor.assess(url, page.html)
        return replace(result, status=page.status, index=index + 1)

    async def run(self) -> AuditReport:
        """Discover candidates, assess each page and build the report.

        Raises:
            DiscoveryError: If the sitemap cannot be fetched
        """
        async with self.fetcher:
            candidates = await discover_candidates(self.fetcher, self.config.sitemap_url)
            logger.info(f"Candidates: {len(candidates)}")

            results = await run_pool(
                candidates, self._fetch_and_assess, self.config.concurrency
            )

        report = build_report(self.config.sitemap_url, candidates, results)
        logger.info(
            f"Included gym pages: {report.included_count} "
            f"(skipped {report.skipped_count}, errors {report.error_count})"
        )
        return report
