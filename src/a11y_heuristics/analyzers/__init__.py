"""Initialize and register built-in analyzers."""
from a11y_heuristics.core.analyzer import get_registry
from a11y_heuristics.analyzers.plugins import (
    AltTextAnalyzer,
    FormLabelAnalyzer,
    HeadingOrderAnalyzer,
    ButtonAnalyzer,
    LinkTextAnalyzer,
)


def init_default_analyzers():
    """Register built-in analyzers."""
    registry = get_registry()
    registry.register(AltTextAnalyzer())
    registry.register(FormLabelAnalyzer())
    registry.register(HeadingOrderAnalyzer())
    registry.register(ButtonAnalyzer())
    registry.register(LinkTextAnalyzer())
