"""Facilities criterion: does the page copy describe what the club offers?

Two strategies exist and are kept separate:

- ``core``: a closed set of six core facilities, all of which must appear.
- ``open``: an open vocabulary of facility terms; passing needs a minimum
  number of distinct terms and a facilities/amenities section heading.
"""

import re
from typing import List, Optional, Sequence

from gym_audit.config import AuditThresholds, default_thresholds
from gym_audit.constants import (
    CORE_FACILITIES,
    FACILITIES_HEADING_PATTERN,
    FACILITY_TERMS,
    FacilityTerm,
)
from gym_audit.models import Criterion
from gym_audit.page_parser import ParsedPage


class CoreFacilitiesEvaluator:
    """Checks that every core facility is mentioned in the body text."""

    name = "coreFacilities"

    def __init__(self, facilities: Sequence[FacilityTerm] = CORE_FACILITIES):
        self.facilities = tuple(facilities)

    def found_labels(self, lower_text: str) -> List[str]:
        return [f.label for f in self.facilities if f.pattern.search(lower_text)]

    def evaluate(self, page: ParsedPage) -> Criterion:
        found = self.found_labels(page.lower_body_text)
        passed = len(found) == len(self.facilities)
        return Criterion(passed, self.build_evidence(found, passed))

    def build_evidence(self, found: List[str], passed: bool) -> str:
        required = [f.label for f in self.facilities]
        if passed:
            return f"Core facilities are clearly listed: {', '.join(required)}."

        missing = [label for label in required if label not in found]
        found_part = f": {', '.join(found)}" if found else ""
        return (
            f"Core facilities are incomplete ({len(found)} of {len(required)} found{found_part}). "
            f"Missing from the page copy: {', '.join(missing)}. "
            "Recommended action: add these items explicitly in a dedicated facilities "
            "section near the top of the page."
        )


class OpenFacilitiesEvaluator:
    """Counts distinct facility terms and looks for a facilities heading."""

    name = "facilities"

    def __init__(
        self,
        thresholds: Optional[AuditThresholds] = None,
        terms: Sequence[str] = FACILITY_TERMS,
    ):
        self.thresholds = thresholds or default_thresholds
        self.terms = tuple(terms)
        self._patterns = [
            (term, re.compile(r'\b' + re.escape(term) + r'\b')) for term in self.terms
        ]

    def found_terms(self, lower_text: str) -> List[str]:
        return [term for term, pattern in self._patterns if pattern.search(lower_text)]

    @staticmethod
    def has_facilities_heading(page: ParsedPage) -> bool:
        return any(FACILITIES_HEADING_PATTERN.search(h) for h in page.headings)

    def evaluate(self, page: ParsedPage) -> Criterion:
        found = self.found_terms(page.lower_body_text)
        has_heading = self.has_facilities_heading(page)
        passed = len(found) >= self.thresholds.min_facility_terms and has_heading
        return Criterion(passed, self.build_evidence(found, has_heading, passed))

    def build_evidence(self, found: List[str], has_heading: bool, passed: bool) -> str:
        target = self.thresholds.min_facility_terms
        sample = found[:self.thresholds.facility_sample_size]
        examples = ', '.join(sample) if sample else 'none'
        heading_status = 'present' if has_heading else 'missing'
        summary = (
            f"Facility terms found: {len(found)} (target {target}+). "
            f"Examples: {examples}. Facilities section heading: {heading_status}."
        )

        if passed:
            return f"Facilities are clearly described. {summary}"

        improvements = []
        if len(found) < target:
            improvements.append(
                f"list more of the club's facilities in the page copy "
                f"(currently {len(found)}, target at least {target})"
            )
        if not has_heading:
            improvements.append("add a clearly labelled Facilities section heading")

        return (
            f"Facilities need improvement. {summary} "
            f"Recommended actions: {'; '.join(improvements)}."
        )


def facilities_evaluator(strategy: str = "core", thresholds: Optional[AuditThresholds] = None):
    """Build the facilities evaluator for a configured strategy."""
    if strategy == "core":
        return CoreFacilitiesEvaluator()
    if strategy == "open":
        return OpenFacilitiesEvaluator(thresholds)
    raise ValueError(f"Unknown facilities strategy: {strategy!r}")
