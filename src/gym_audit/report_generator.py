"""Generate the static, filterable HTML audit report."""

import re
from pathlib import Path
from typing import Dict, List, Optional

from jinja2 import Environment, FileSystemLoader, select_autoescape

from gym_audit.models import AuditReport, PRIORITY_HIGH, PRIORITY_MEDIUM

REPORT_TEMPLATE = "report.html"


def criterion_label(name: str) -> str:
    """'coreFacilities' -> 'Core Facilities'."""
    return re.sub(r'(?<!^)(?=[A-Z])', ' ', name).title()


def priority_badge(priority: str) -> str:
    """CSS badge class for a fix priority."""
    if priority == PRIORITY_HIGH:
        return "fail"
    if priority == PRIORITY_MEDIUM:
        return "med"
    return "pass"


class ReportGenerator:
    """Renders an AuditReport to a self-contained HTML page.

    Autoescaping is always on: gym names and every evidence string are
    inserted as text, never as markup.
    """

    def __init__(self, template_dir: Optional[str] = None):
        """Initialize report generator.

        Args:
            template_dir: Directory containing Jinja2 templates
                (defaults to the templates shipped with the package)
        """
        template_path = Path(template_dir) if template_dir else Path(__file__).parent / "templates"

        self.env = Environment(
            loader=FileSystemLoader(str(template_path)),
            autoescape=select_autoescape(["html"]),
        )
        self.env.filters['criterion_label'] = criterion_label
        self.env.filters['priority_badge'] = priority_badge

    def _kpis(self, report: AuditReport) -> List[Dict]:
        summary = report.summary
        total = summary["total"]
        kpis = [{
            "label": "Gym Pages Reviewed",
            "value": total,
            "detail": "Total gym landing pages in scope",
        }]
        for name in report.criterion_names:
            passed = summary[f"{name}Pass"]
            kpis.append({
                "label": criterion_label(name),
                "value": f"{passed} Pass",
                "detail": f"{total - passed} Fail",
            })
        missing = summary["joinRouteMissing"]
        kpis.append({
            "label": "Join Route Coverage",
            "value": f"{total - missing} Present",
            "detail": f"{missing} Missing",
        })
        kpis.append({
            "label": "High Priority Fixes",
            "value": summary["highPriority"],
            "detail": "Pages needing urgent action",
        })
        return kpis

    def render(self, report: AuditReport) -> str:
        template = self.env.get_template(REPORT_TEMPLATE)
        return template.render(
            report=report,
            criterion_names=report.criterion_names,
            kpis=self._kpis(report),
            generated_at=report.generated_at.isoformat(),
        )

    def generate_report(self, report: AuditReport, output_path: Path) -> None:
        """Render the report and write it to output_path.

        Args:
            report: Audit report to render
            output_path: Path to save HTML report
        """
        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(self.render(report), encoding="utf-8")
