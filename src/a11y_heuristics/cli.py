import argparse
import json
import logging
import os
import sys
from typing import Any, Dict

from dotenv import load_dotenv

from a11y_heuristics.core.config import load_config, merge_env_config
from a11y_heuristics.core.logging import setup_logging
from a11y_heuristics.core.severity import (
    enrich_issues,
    get_severity_emoji,
    sort_by_severity,
    summarize_by_severity,
)
from a11y_heuristics.scanner import analyze_html, list_analyzers, run_checks, summarize_issues
from a11y_heuristics.utils import fetch_url, read_source

# Load .env if present
load_dotenv()

logger = logging.getLogger("a11y_heuristics")


def build_report(html: str, exclude_analyzers=None) -> Dict[str, Any]:
    """Run checks and analyzers over markup and assemble the report dict."""
    checks = run_checks(html, exclude=exclude_analyzers)
    issues = sort_by_severity(enrich_issues(analyze_html(html, exclude_analyzers=exclude_analyzers)))
    return {
        "checks": checks,
        "passed": all(checks.values()),
        "issues": issues,
        "summary": summarize_issues(issues),
        "severity": summarize_by_severity(issues),
    }


def _format_pretty(report: Dict[str, Any]) -> str:
    lines = ["Checks:"]
    for name, passed in report["checks"].items():
        lines.append(f"  {'PASS' if passed else 'FAIL'} {name}")
    if report["issues"]:
        lines.append("Issues:")
        for issue in report["issues"]:
            emoji = get_severity_emoji(issue.get("severity", ""))
            wcag = f" [WCAG {issue['wcag']}]" if issue.get("wcag") else ""
            lines.append(f"  {emoji} {issue['code']}{wcag} {issue['message']}")
            lines.append(f"      {issue['context']}")
    for code, count in report["summary"].items():
        lines.append(f"  - {code}: {count}")
    return "\n".join(lines)


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Pattern-based accessibility checks for markup fragments",
        epilog="Examples:\n  a11y-heuristics --file page.html --strict\n  cat page.html | a11y-heuristics --file - --format json",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    group = parser.add_mutually_exclusive_group(required=False)
    group.add_argument("--url", help="URL of the page to check")
    group.add_argument("--file", help="Local markup file to check ('-' reads stdin)")
    parser.add_argument("--config", help="Path to YAML or JSON config file")
    parser.add_argument("--output", help="Write the report to this file (default stdout)")
    parser.add_argument("--format", choices=["json", "pretty"], help="Output format (default pretty)")
    parser.add_argument("--exclude-analyzers", help="Comma-separated list of analyzer names to skip (e.g., 'heading_order,link_text')")
    parser.add_argument("--list-analyzers", action="store_true", help="List available analyzers and exit")
    parser.add_argument("--strict", action="store_true", help="Exit with status 1 when any check fails")
    parser.add_argument("--verbose", action="store_true", help="Verbose logging")
    parser.add_argument("--quiet", action="store_true", help="Only output essential information")
    args = parser.parse_args(argv)

    try:
        config = merge_env_config(load_config(args.config))
    except Exception as e:
        print(f"Failed to load config: {e}", file=sys.stderr)
        return 2

    level = getattr(logging, config.logging.level)
    if args.verbose:
        level = logging.DEBUG
    if args.quiet:
        level = logging.WARNING
    use_rich = config.logging.use_rich and os.environ.get("USE_RICH_LOGGER", "1") not in ("0", "false", "False")
    setup_logging(level=level, use_rich=use_rich)
    logger.setLevel(level)

    if args.list_analyzers:
        analyzers = list_analyzers()
        print("Available analyzers:")
        for name, desc in analyzers.items():
            print(f"  {name}: {desc}")
        return 0

    if not args.url and not args.file:
        parser.error("one of the arguments --url --file is required")

    exclude_analyzers = config.analyzers.exclude
    if args.exclude_analyzers:
        exclude_analyzers = [a.strip() for a in args.exclude_analyzers.split(',') if a.strip()]
    fmt = args.format or config.output.format
    output_path = args.output or config.output.path
    strict = args.strict or config.output.strict

    try:
        if args.url:
            html = fetch_url(args.url)
        else:
            html = read_source(args.file)
    except Exception as e:
        print(f"Failed to load page: {e}", file=sys.stderr)
        return 2

    logger.info("Checking %d characters of markup", len(html))
    report = build_report(html, exclude_analyzers=exclude_analyzers)

    if fmt == "json":
        out = json.dumps(report, indent=2, ensure_ascii=False)
    else:
        out = _format_pretty(report)
    if output_path:
        with open(output_path, "w", encoding="utf-8") as f:
            f.write(out + "\n")
        logger.info("Report written to %s", output_path)
    else:
        print(out)

    if not report["passed"]:
        logger.info("%d check(s) failed", sum(1 for ok in report["checks"].values() if not ok))
        if strict:
            return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
