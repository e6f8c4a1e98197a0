"""Data models for the gym landing page audit."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Optional, Union


PASS = "Pass"
FAIL = "Fail"

TONE_APPEALING = "Appealing"
TONE_NEEDS_IMPROVEMENT = "Needs improvement"

PRIORITY_LOW = "Low"
PRIORITY_MEDIUM = "Medium"
PRIORITY_HIGH = "High"


@dataclass(frozen=True)
class FetchedPage:
    """Result of one HTTP GET."""

    url: str
    status: int
    html: str = ""
    final_url: str = ""


@dataclass(frozen=True)
class SkippedPage:
    """A candidate whose fetch returned an error status."""

    url: str
    status: int


@dataclass(frozen=True)
class PoolFailure:
    """An item whose worker raised; stored at the item's position."""

    error: str
    item: Any


@dataclass(frozen=True)
class Criterion:
    """Pass/Fail verdict for one heuristic plus the evidence behind it."""

    passed: bool
    evidence: str

    @property
    def result(self) -> str:
        return PASS if self.passed else FAIL

    def to_dict(self) -> dict:
        return {"result": self.result, "pass": self.passed, "evidence": self.evidence}

    @classmethod
    def from_dict(cls, data: dict) -> "Criterion":
        return cls(passed=bool(data["pass"]), evidence=data["evidence"])


@dataclass(frozen=True)
class ClubDescription:
    """Tone assessment of the club's headline copy."""

    tone: str
    text: str

    @property
    def appealing(self) -> bool:
        return self.tone == TONE_APPEALING

    def to_dict(self) -> dict:
        return {"tone": self.tone, "text": self.text}

    @classmethod
    def from_dict(cls, data: dict) -> "ClubDescription":
        return cls(tone=data["tone"], text=data["text"])


@dataclass(frozen=True)
class JoinRoute:
    """Outcome of the join-route check."""

    present: bool
    evidence: str
    candidate_count: int = 0


@dataclass(frozen=True)
class AssessmentResult:
    """Verdict for one fetched gym page."""

    url: str
    slug: Optional[str]
    gym_name: str
    title: str
    is_likely_gym_page: bool
    criteria: dict[str, Criterion]
    club_description: ClubDescription
    join_route_present: bool
    join_route_evidence: str
    fix_priority: str
    status: Optional[int] = None
    index: Optional[int] = None

    def to_dict(self) -> dict:
        """Convert to the report's JSON shape."""
        data = {
            "url": self.url,
            "slug": self.slug,
            "gymName": self.gym_name,
            "title": self.title,
            "isLikelyGymPage": self.is_likely_gym_page,
            "criteria": {name: c.to_dict() for name, c in self.criteria.items()},
            "clubDescription": self.club_description.to_dict(),
            "joinRoutePresent": self.join_route_present,
            "joinRouteEvidence": self.join_route_evidence,
            "fixPriority": self.fix_priority,
        }
        if self.status is not None:
            data["status"] = self.status
        if self.index is not None:
            data["index"] = self.index
        return data

    @classmethod
    def from_dict(cls, data: dict) -> "AssessmentResult":
        """Rebuild a result from its JSON shape."""
        return cls(
            url=data["url"],
            slug=data.get("slug"),
            gym_name=data["gymName"],
            title=data.get("title", ""),
            is_likely_gym_page=bool(data["isLikelyGymPage"]),
            criteria={
                name: Criterion.from_dict(c) for name, c in data["criteria"].items()
            },
            club_description=ClubDescription.from_dict(data["clubDescription"]),
            join_route_present=bool(data["joinRoutePresent"]),
            join_route_evidence=data["joinRouteEvidence"],
            fix_priority=data["fixPriority"],
            status=data.get("status"),
            index=data.get("index"),
        )


PoolResult = Union[AssessmentResult, SkippedPage, PoolFailure]


@dataclass(frozen=True)
class AuditReport:
    """Aggregated audit of all in-scope gym pages."""

    source: str
    candidate_count: int
    gyms: tuple[AssessmentResult, ...]
    skipped_count: int = 0
    error_count: int = 0
    generated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def included_count(self) -> int:
        return len(self.gyms)

    @property
    def criterion_names(self) -> list[str]:
        """Criterion keys in first-seen order across all gyms."""
        names: list[str] = []
        for gym in self.gyms:
            for name in gym.criteria:
                if name not in names:
                    names.append(name)
        return names

    @property
    def summary(self) -> dict[str, int]:
        summary = {"total": len(self.gyms)}
        for name in self.criterion_names:
            summary[f"{name}Pass"] = sum(
                1 for g in self.gyms if name in g.criteria and g.criteria[name].passed
            )
        summary["joinRouteMissing"] = sum(1 for g in self.gyms if not g.join_route_present)
        summary["highPriority"] = sum(1 for g in self.gyms if g.fix_priority == PRIORITY_HIGH)
        summary["descriptionAppealing"] = sum(
            1 for g in self.gyms if g.club_description.appealing
        )
        return summary

    def to_dict(self) -> dict:
        return {
            "generatedAt": self.generated_at.isoformat(),
            "source": self.source,
            "candidateCount": self.candidate_count,
            "includedCount": self.included_count,
            "skippedCount": self.skipped_count,
            "errorCount": self.error_count,
            "summary": self.summary,
            "gyms": [g.to_dict() for g in self.gyms],
        }
