"""End-to-end tests for the audit pipeline with a mocked site."""

from dataclasses import replace

import httpx
import pytest

from gym_audit.assessor import PageAssessor
from gym_audit.audit import GymAuditor, build_report, sort_by_gym_name
from gym_audit.config import AuditConfig
from gym_audit.discovery import DiscoveryError
from gym_audit.fetcher import PageFetcher
from gym_audit.models import PoolFailure, SkippedPage

from helpers import build_page

BASE = "https://www.nuffieldhealth.com"
SITEMAP_URL = f"{BASE}/sitemap_gyms.xml"


def sitemap(*slugs):
    locs = "".join(f"<url><loc>{BASE}/gyms/{slug}</loc></url>" for slug in slugs)
    return f"<urlset>{locs}</urlset>"


def club_page(name, slug):
    return build_page(
        title=f"{name} Gym | Nuffield Health",
        h1=name,
        links=f'<a href="/gyms/{slug}/timetable">Timetable</a>',
    )


@pytest.fixture
def site():
    """Responses keyed by path; a value of None raises a connection error."""
    return {
        "/sitemap_gyms.xml": (200, sitemap(
            "zeta", "alpha", "broken", "missing", "coming-soon-club", "merton-abbey-gym-closure",
        )),
        "/gyms/zeta": (200, club_page("zeta Club", "zeta")),
        "/gyms/alpha": (200, club_page("Alpha Club", "alpha")),
        "/gyms/broken": None,
        "/gyms/missing": (404, "not found"),
        "/gyms/coming-soon-club": (200, build_page(
            title="New Gym Coming Soon", h1="Coming soon", body="Join our membership list",
        )),
    }


def make_auditor(site, **config):
    def handler(request: httpx.Request) -> httpx.Response:
        entry = site.get(request.url.path, (404, ""))
        if entry is None:
            raise httpx.ConnectError("connection reset", request=request)
        status, body = entry
        return httpx.Response(status, text=body)

    fetcher = PageFetcher(transport=httpx.MockTransport(handler))
    return GymAuditor(config=AuditConfig(sitemap_url=SITEMAP_URL, **config), fetcher=fetcher)


class TestGymAuditor:
    """Test suite for the full audit run."""

    @pytest.mark.asyncio
    async def test_run(self, site):
        report = await make_auditor(site, concurrency=2).run()

        assert report.source == SITEMAP_URL
        assert report.candidate_count == 5
        assert report.skipped_count == 1
        assert report.error_count == 1
        assert [g.gym_name for g in report.gyms] == ["Alpha Club", "zeta Club"]
        assert report.included_count == 2

    @pytest.mark.asyncio
    async def test_results_carry_status_and_position(self, site):
        report = await make_auditor(site).run()
        by_slug = {g.slug: g for g in report.gyms}

        assert by_slug["zeta"].index == 1
        assert by_slug["alpha"].index == 2
        assert by_slug["alpha"].status == 200

    @pytest.mark.asyncio
    async def test_summary(self, site):
        report = await make_auditor(site).run()

        assert report.summary == {
            "total": 2,
            "coreFacilitiesPass": 0,
            "imageryPass": 0,
            "joinRouteMissing": 2,
            "highPriority": 2,
            "descriptionAppealing": 0,
        }

    @pytest.mark.asyncio
    async def test_open_strategy_changes_criterion_name(self, site):
        report = await make_auditor(site, facilities_strategy="open").run()
        assert "facilitiesPass" in report.summary

    @pytest.mark.asyncio
    async def test_sitemap_failure_aborts(self, site):
        site["/sitemap_gyms.xml"] = (500, "")
        with pytest.raises(DiscoveryError):
            await make_auditor(site).run()

    @pytest.mark.asyncio
    async def test_empty_sitemap_still_reports(self, site):
        site["/sitemap_gyms.xml"] = (200, "<urlset></urlset>")
        report = await make_auditor(site).run()

        assert report.candidate_count == 0
        assert report.gyms == ()
        assert report.to_dict()["summary"]["total"] == 0


class TestBuildReport:

    def test_excludes_non_results(self, full_gym_html):
        url = f"{BASE}/gyms/cannon-street"
        result = PageAssessor().assess(url, full_gym_html)
        results = [result, SkippedPage(url="x", status=404), PoolFailure(error="e", item="y")]

        report = build_report(SITEMAP_URL, ["a", "b", "c"], results)

        assert report.gyms == (result,)
        assert report.to_dict()["includedCount"] == 1
        assert report.to_dict()["candidateCount"] == 3

    def test_sort_is_case_insensitive(self, full_gym_html):
        base = PageAssessor().assess(f"{BASE}/gyms/x", full_gym_html)
        gyms = [replace(base, gym_name=n) for n in ["bravo", "Alpha", "charlie", "Bravo"]]

        assert [g.gym_name for g in sort_by_gym_name(gyms)] == ["Alpha", "Bravo", "bravo", "charlie"]
