"""Run the registered markup analyzers and the plain boolean checks."""
import logging
from typing import Callable, List, Dict, Any

from a11y_heuristics.core.analyzer import AnalyzerRegistry, get_registry
from a11y_heuristics.core.checks import (
    check_alt_text,
    check_button_names,
    check_form_labels,
    check_heading_structure,
    check_link_text,
)

logger = logging.getLogger(__name__)

# Boolean checks keyed by the name of the analyzer that reports their issues.
CHECKS: Dict[str, Callable[[str], bool]] = {
    "alt_text": check_alt_text,
    "form_labels": check_form_labels,
    "heading_order": check_heading_structure,
    "button_names": check_button_names,
    "link_text": check_link_text,
}


def _default_registry() -> AnalyzerRegistry:
    from a11y_heuristics.analyzers import init_default_analyzers

    registry = get_registry()
    if not registry.list():
        init_default_analyzers()
    return registry


def _warn_unknown(exclude: List[str], known) -> None:
    for name in exclude:
        if name not in known:
            logger.warning("Unknown analyzer in exclude list: %s", name)


def run_checks(html: str, exclude: List[str] = None) -> Dict[str, bool]:
    """Run every boolean check (except excluded ones) and return name -> passed."""
    exclude = exclude or []
    _warn_unknown(exclude, CHECKS)
    results = {}
    for name, check in CHECKS.items():
        if name in exclude:
            continue
        results[name] = check(html)
        logger.debug("Check %s: %s", name, "pass" if results[name] else "fail")
    return results


def analyze_html(html: str, exclude_analyzers: List[str] = None) -> List[Dict[str, Any]]:
    """Analyze markup using all registered analyzers (except excluded ones).

    Returns a list of issues with keys: code, message, context, analyzer.
    """
    registry = _default_registry()
    exclude_analyzers = exclude_analyzers or []
    issues = registry.analyze_all(html, exclude=exclude_analyzers)
    logger.debug("Found %d issue(s)", len(issues))
    return issues


def summarize_issues(issues: List[Dict[str, Any]]) -> Dict[str, int]:
    """Summarize issues by code."""
    counts: Dict[str, int] = {}
    for it in issues:
        code = it.get("code", "UNKNOWN")
        counts[code] = counts.get(code, 0) + 1
    return counts


def list_analyzers() -> Dict[str, str]:
    """List available analyzers and their descriptions."""
    registry = _default_registry()
    return {name: analyzer.description for name, analyzer in registry.list().items()}
