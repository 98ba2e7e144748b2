from .__version__ import __version__
from .core.checks import (
    check_alt_text,
    check_button_names,
    check_form_labels,
    check_heading_structure,
    check_link_text,
)
from .scanner import analyze_html, list_analyzers, run_checks, summarize_issues

__all__ = [
	"__version__",
	"check_alt_text",
	"check_form_labels",
	"check_heading_structure",
	"check_button_names",
	"check_link_text",
	"analyze_html",
	"list_analyzers",
	"run_checks",
	"summarize_issues",
]
