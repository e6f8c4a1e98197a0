"""Command-line interface for the gym landing page audit."""

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path

from gym_audit.assessor import PageAssessor
from gym_audit.audit import GymAuditor
from gym_audit.config import (
    AuditConfig,
    FACILITIES_STRATEGIES,
    env_log_level,
    load_thresholds,
)
from gym_audit.discovery import DiscoveryError
from gym_audit.fetcher import PageFetcher
from gym_audit.logging_config import setup_logging
from gym_audit.output_manager import OutputManager

logger = logging.getLogger(__name__)


def _config_from_args(args) -> AuditConfig:
    """Environment defaults overridden by any flags given on the command line."""
    config = AuditConfig.from_env()
    overrides = {
        "sitemap_url": getattr(args, "sitemap", None),
        "concurrency": getattr(args, "concurrency", None),
        "timeout": getattr(args, "timeout", None),
        "facilities_strategy": getattr(args, "facilities_strategy", None),
        "data_dir": getattr(args, "data_dir", None),
        "docs_dir": getattr(args, "docs_dir", None),
    }
    values = {**config.__dict__, **{k: v for k, v in overrides.items() if v is not None}}
    return AuditConfig(**values)


def run_command(args) -> int:
    """Run the full audit and write the JSON, CSV and HTML reports."""
    config = _config_from_args(args)
    try:
        thresholds = load_thresholds(args.thresholds_file)
    except FileNotFoundError as e:
        logger.error(str(e))
        return 1
    auditor = GymAuditor(config=config, thresholds=thresholds)

    try:
        report = asyncio.run(auditor.run())
    except DiscoveryError as e:
        logger.error(str(e))
        return 1

    output = OutputManager(data_dir=config.data_dir, docs_dir=config.docs_dir)
    paths = output.save_report(report)

    print(f"\n✅ Audit complete: {report.included_count} of {report.candidate_count} candidates included")
    print(f"   Report: {paths['html']}")
    return 0


async def _load_html(source: str, config: AuditConfig) -> str:
    path = Path(source)
    if path.exists():
        return path.read_text(encoding="utf-8")

    async with PageFetcher(user_agent=config.user_agent, timeout=config.timeout) as fetcher:
        page = await fetcher.fetch(source)
    if page.status >= 400:
        raise RuntimeError(f"Failed to fetch {source}: HTTP {page.status}")
    return page.html


def assess_command(args) -> int:
    """Assess a single page (URL or saved HTML file) and print the result as JSON."""
    config = _config_from_args(args)
    try:
        thresholds = load_thresholds(args.thresholds_file)
    except FileNotFoundError as e:
        logger.error(str(e))
        return 1
    assessor = PageAssessor(
        thresholds=thresholds,
        facilities_strategy=config.facilities_strategy,
    )

    try:
        html = asyncio.run(_load_html(args.source, config))
    except Exception as e:
        logger.error(f"Could not load {args.source}: {e}")
        return 1

    url = args.url or args.source
    result = assessor.assess(url, html)
    print(json.dumps(result.to_dict(), indent=2, ensure_ascii=False))
    return 0


def _add_assessment_flags(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--facilities-strategy",
        choices=FACILITIES_STRATEGIES,
        help="Facilities check: closed core set or open term list (default: core)",
    )
    parser.add_argument(
        "--thresholds-file",
        help="JSON file overriding heuristic thresholds",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        help="Request timeout in seconds (default: 30)",
    )


def build_parser() -> argparse.ArgumentParser:
    """Argument parser for the run and assess subcommands."""
    parser = argparse.ArgumentParser(
        description="Gym Audit - Score gym landing pages for facilities, imagery and join routes"
    )

    # Global flags (before subcommands)
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=env_log_level(),
        help="Set logging verbosity (default: LOG_LEVEL env var or INFO)",
    )
    parser.add_argument(
        "--log-file",
        help="Write logs to file in addition to console",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    run_parser = subparsers.add_parser(
        "run", help="Audit every gym page listed in the sitemap."
    )
    run_parser.add_argument(
        "--sitemap",
        help="Sitemap URL (default: the Nuffield Health gyms sitemap)",
    )
    run_parser.add_argument(
        "--concurrency",
        type=int,
        help="Number of concurrent page fetches (default: 8)",
    )
    run_parser.add_argument(
        "--data-dir",
        help="Directory for audit-report.json and audit-report.csv (default: data)",
    )
    run_parser.add_argument(
        "--docs-dir",
        help="Directory for the HTML report (default: docs)",
    )
    _add_assessment_flags(run_parser)
    run_parser.set_defaults(func=run_command)

    assess_parser = subparsers.add_parser(
        "assess", help="Assess a single page and print the result as JSON."
    )
    assess_parser.add_argument(
        "source", help="Page URL or path to a saved HTML file"
    )
    assess_parser.add_argument(
        "--url",
        help="URL to attribute to a saved HTML file (used for slug and gym name)",
    )
    _add_assessment_flags(assess_parser)
    assess_parser.set_defaults(func=assess_command)

    return parser


def main():
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args()

    # Configure logging based on flags
    setup_logging(
        level=args.log_level,
        log_file=getattr(args, 'log_file', None),
    )

    if hasattr(args, "func"):
        sys.exit(args.func(args))
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
