"""Severity scoring for markup accessibility issues.

Maps issue codes to severity levels and WCAG criteria for prioritization.
"""

from typing import Any, Dict, List, Optional

# Severity levels
CRITICAL = "critical"  # Blocks access for users with disabilities
MINOR = "minor"  # Usability issue, but workarounds exist


SEVERITY_MAP: Dict[str, Dict[str, str]] = {
    "IMG_MISSING_ALT": {
        "level": CRITICAL,
        "wcag": "1.1.1",
        "wcag_name": "Non-text Content",
        "impact": "Screen reader users cannot understand image content",
    },
    "FORM_CONTROL_NO_LABEL": {
        "level": CRITICAL,
        "wcag": "1.3.1",
        "wcag_name": "Info and Relationships",
        "impact": "Screen reader users cannot identify form fields",
    },
    "LINK_NO_TEXT": {
        "level": CRITICAL,
        "wcag": "2.4.4",
        "wcag_name": "Link Purpose (In Context)",
        "impact": "Screen reader users cannot understand link destination",
    },
    "BUTTON_NO_TEXT": {
        "level": CRITICAL,
        "wcag": "4.1.2",
        "wcag_name": "Name, Role, Value",
        "impact": "Screen reader users cannot understand button purpose",
    },
    "HEADING_ORDER": {
        "level": MINOR,
        "wcag": "1.3.1",
        "wcag_name": "Info and Relationships",
        "impact": "May confuse screen reader users navigating by headings",
    },
}

# Critical issues are listed first
SEVERITY_ORDER = {CRITICAL: 0, MINOR: 1}


def _lookup(code: str, key: str) -> Optional[str]:
    return SEVERITY_MAP.get(code, {}).get(key)


def get_severity(code: str) -> str:
    """Severity level for an issue code; codes outside the map count as minor."""
    return _lookup(code, "level") or MINOR


def get_wcag_criterion(code: str) -> Optional[str]:
    """WCAG success criterion number (e.g. '1.1.1') for a code, or None."""
    return _lookup(code, "wcag")


def get_wcag_name(code: str) -> Optional[str]:
    return _lookup(code, "wcag_name")


def get_impact(code: str) -> Optional[str]:
    return _lookup(code, "impact")


def enrich_issue(issue: Dict[str, Any]) -> Dict[str, Any]:
    """Return a copy of an issue carrying severity, wcag, wcag_name and impact.

    Args:
        issue: Issue dict produced by an analyzer (keyed by 'code')
    """
    code = issue.get("code", "")
    enriched = dict(issue)
    enriched.update(
        severity=get_severity(code),
        wcag=get_wcag_criterion(code),
        wcag_name=get_wcag_name(code),
        impact=get_impact(code),
    )
    return enriched


def enrich_issues(issues: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    return [enrich_issue(issue) for issue in issues]


def sort_by_severity(issues: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    """Critical issues first; document order is kept within each level."""
    last = SEVERITY_ORDER[MINOR]
    return sorted(issues, key=lambda issue: SEVERITY_ORDER.get(issue.get("severity"), last))


def summarize_by_severity(issues: List[Dict[str, Any]]) -> Dict[str, int]:
    """Count enriched issues per level; anything not critical is counted as minor."""
    counts = {CRITICAL: 0, MINOR: 0}
    for issue in issues:
        level = CRITICAL if issue.get("severity") == CRITICAL else MINOR
        counts[level] += 1
    return counts


def get_severity_emoji(severity: str) -> str:
    """Marker printed before each issue in the pretty report."""
    return {
        CRITICAL: "🔴",
        MINOR: "🔵",
    }.get(severity, "⚪")
