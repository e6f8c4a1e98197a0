"""Heuristic audit of gym landing pages."""

__version__ = "0.1.0"

from gym_audit.assessor import PageAssessor
from gym_audit.audit import GymAuditor, build_report
from gym_audit.discovery import DiscoveryError, discover_candidates
from gym_audit.fetcher import PageFetcher
from gym_audit.pool import run_pool
from gym_audit.models import (
    AssessmentResult,
    AuditReport,
    ClubDescription,
    Criterion,
    FetchedPage,
    PoolFailure,
    SkippedPage,
)
from gym_audit.config import AuditConfig, AuditThresholds

__all__ = [
    # Core
    "PageAssessor",
    "GymAuditor",
    "build_report",
    "discover_candidates",
    "DiscoveryError",
    "PageFetcher",
    "run_pool",
    # Models
    "AssessmentResult",
    "AuditReport",
    "ClubDescription",
    "Criterion",
    "FetchedPage",
    "PoolFailure",
    "SkippedPage",
    # Config
    "AuditConfig",
    "AuditThresholds",
]
