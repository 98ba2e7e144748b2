import logging
from abc import ABC, abstractmethod
from typing import List, Dict, Any, Optional

logger = logging.getLogger(__name__)


class Analyzer(ABC):
    """Base class for markup accessibility analyzers."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Unique name for this analyzer."""
        pass

    @property
    @abstractmethod
    def description(self) -> str:
        """Human-readable description."""
        pass

    @abstractmethod
    def analyze(self, html: str) -> List[Dict[str, Any]]:
        """Analyze markup and return list of issues with keys: code, message, context."""
        pass

    def check(self, html: str) -> bool:
        """Return True when the markup raises no issue for this analyzer."""
        return not self.analyze(html)


class AnalyzerRegistry:
    """Registry to manage available analyzers."""

    def __init__(self):
        self._analyzers: Dict[str, Analyzer] = {}

    def register(self, analyzer: Analyzer) -> None:
        """Register an analyzer instance, replacing one with the same name."""
        self._analyzers[analyzer.name] = analyzer

    def unregister(self, name: str) -> None:
        """Unregister an analyzer by name."""
        if name in self._analyzers:
            del self._analyzers[name]

    def get(self, name: str) -> Optional[Analyzer]:
        """Get analyzer by name."""
        return self._analyzers.get(name)

    def list(self) -> Dict[str, Analyzer]:
        """List all registered analyzers."""
        return dict(self._analyzers)

    def analyze_all(self, html: str, exclude: List[str] = None) -> List[Dict[str, Any]]:
        """Run all analyzers (except excluded) and return combined issues.

        Each issue is tagged with the name of the analyzer that produced it.
        A failing analyzer is logged and skipped.
        """
        exclude = exclude or []
        issues = []
        for name, analyzer in self._analyzers.items():
            if name in exclude:
                logger.debug("Skipping excluded analyzer %s", name)
                continue
            try:
                analyzer_issues = analyzer.analyze(html)
            except Exception:
                logger.exception("Analyzer %s failed", name)
                continue
            for issue in analyzer_issues:
                issue["analyzer"] = name
            issues.extend(analyzer_issues)
        return issues


# Global registry instance
_registry = AnalyzerRegistry()


def get_registry() -> AnalyzerRegistry:
    """Get the global analyzer registry."""
    return _registry
