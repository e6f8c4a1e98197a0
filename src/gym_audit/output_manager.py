"""Output manager writing the audit report as JSON, CSV and HTML."""

import csv
import json
import logging
from pathlib import Path
from typing import Dict, List, Optional

from gym_audit.constants import (
    CSV_REPORT_FILENAME,
    DEFAULT_DATA_DIR,
    DEFAULT_DOCS_DIR,
    HTML_REPORT_FILENAME,
    JSON_REPORT_FILENAME,
)
from gym_audit.models import AuditReport
from gym_audit.report_generator import ReportGenerator

logger = logging.getLogger(__name__)


class OutputManager:
    """Manages the report artifacts of one audit run.

    Layout:
        data/
        ├── audit-report.json
        └── audit-report.csv
        docs/
        └── index.html
    """

    def __init__(
        self,
        data_dir: str = DEFAULT_DATA_DIR,
        docs_dir: str = DEFAULT_DOCS_DIR,
        report_generator: Optional[ReportGenerator] = None,
    ):
        """Initialize output manager.

        Args:
            data_dir: Directory for the JSON and CSV exports
            docs_dir: Directory for the static HTML report
            report_generator: Optional HTML renderer
        """
        self.data_dir = Path(data_dir)
        self.docs_dir = Path(docs_dir)
        self.report_generator = report_generator or ReportGenerator()

    def save_report(self, report: AuditReport) -> Dict[str, Path]:
        """Write every artifact and return their paths keyed by format."""
        self.data_dir.mkdir(parents=True, exist_ok=True)
        self.docs_dir.mkdir(parents=True, exist_ok=True)

        paths = {
            "json": self.data_dir / JSON_REPORT_FILENAME,
            "csv": self.data_dir / CSV_REPORT_FILENAME,
            "html": self.docs_dir / HTML_REPORT_FILENAME,
        }
        self._save_json(paths["json"], report.to_dict())
        self._save_csv(paths["csv"], report)
        self.report_generator.generate_report(report, paths["html"])

        for fmt, path in paths.items():
            logger.info(f"Wrote {fmt} report: {path}")
        return paths

    def _save_json(self, filepath: Path, data: dict) -> None:
        """Save data as formatted JSON.

        Args:
            filepath: Path to save to
            data: Data to save
        """
        with open(filepath, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2, ensure_ascii=False)

    def _save_csv(self, filepath: Path, report: AuditReport) -> None:
        with open(filepath, "w", encoding="utf-8", newline="") as f:
            writer = csv.writer(f, quoting=csv.QUOTE_ALL)
            writer.writerow(self.csv_header(report))
            writer.writerows(self.csv_rows(report))

    @staticmethod
    def csv_header(report: AuditReport) -> List[str]:
        names = report.criterion_names
        return (
            ["gymName", "url", "fixPriority"]
            + names
            + ["joinRoute"]
            + [f"{name}Evidence" for name in names]
            + ["clubDescriptionTone", "clubDescriptionAssessment", "joinRouteEvidence"]
        )

    @staticmethod
    def csv_rows(report: AuditReport) -> List[List[str]]:
        names = report.criterion_names
        rows = []
        for g in report.gyms:
            criteria = [g.criteria.get(name) for name in names]
            rows.append(
                [g.gym_name, g.url, g.fix_priority]
                + [c.result if c else "" for c in criteria]
                + ["Present" if g.join_route_present else "Missing"]
                + [c.evidence if c else "" for c in criteria]
                + [g.club_description.tone, g.club_description.text, g.join_route_evidence]
            )
        return rows
