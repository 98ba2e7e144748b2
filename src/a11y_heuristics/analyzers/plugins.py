"""Plugin analyzers wrapping the heuristic markup checks."""
from typing import List, Dict, Any

from a11y_heuristics.core.analyzer import Analyzer
from a11y_heuristics.core.checks import (
    find_images_missing_alt,
    find_skipped_headings,
    find_unlabeled_inputs,
    find_unnamed_buttons,
    find_unnamed_links,
)


def _issue(code: str, message: str, occurrence: str) -> Dict[str, Any]:
    return {
        "code": code,
        "message": message,
        "context": occurrence[:200],
    }


class AltTextAnalyzer(Analyzer):
    """Check for images without an alt attribute."""

    @property
    def name(self) -> str:
        return "alt_text"

    @property
    def description(self) -> str:
        return "Detect images missing an alt attribute"

    def analyze(self, html: str) -> List[Dict[str, Any]]:
        return [
            _issue("IMG_MISSING_ALT", "Image element missing alt attribute.", tag)
            for tag in find_images_missing_alt(html)
        ]


class FormLabelAnalyzer(Analyzer):
    """Check for inputs whose id has no matching label."""

    @property
    def name(self) -> str:
        return "form_labels"

    @property
    def description(self) -> str:
        return "Detect inputs with an id but no label, aria-label or aria-labelledby"

    def analyze(self, html: str) -> List[Dict[str, Any]]:
        return [
            _issue("FORM_CONTROL_NO_LABEL", "Form control is missing an accessible label.", tag)
            for tag in find_unlabeled_inputs(html)
        ]


class HeadingOrderAnalyzer(Analyzer):
    """Check for heading level jumps."""

    @property
    def name(self) -> str:
        return "heading_order"

    @property
    def description(self) -> str:
        return "Detect heading level jumps that confuse screen readers"

    def analyze(self, html: str) -> List[Dict[str, Any]]:
        return [
            _issue("HEADING_ORDER", "Heading level jumps (may confuse screen readers).", tag)
            for tag in find_skipped_headings(html)
        ]


class ButtonAnalyzer(Analyzer):
    """Check for buttons without accessible names."""

    @property
    def name(self) -> str:
        return "button_names"

    @property
    def description(self) -> str:
        return "Detect buttons missing text, aria-label and title"

    def analyze(self, html: str) -> List[Dict[str, Any]]:
        return [
            _issue("BUTTON_NO_TEXT", "Button has no accessible name.", button)
            for button in find_unnamed_buttons(html)
        ]


class LinkTextAnalyzer(Analyzer):
    """Check for links without accessible names."""

    @property
    def name(self) -> str:
        return "link_text"

    @property
    def description(self) -> str:
        return "Detect links missing text, aria-label and title"

    def analyze(self, html: str) -> List[Dict[str, Any]]:
        return [
            _issue("LINK_NO_TEXT", "Link has no accessible name (no text, aria-label or title).", link)
            for link in find_unnamed_links(html)
        ]
