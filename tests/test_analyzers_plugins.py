"""Test plugin-based analyzers."""
import pytest

from a11y_heuristics.analyzers.plugins import (
    AltTextAnalyzer,
    FormLabelAnalyzer,
    HeadingOrderAnalyzer,
    ButtonAnalyzer,
    LinkTextAnalyzer,
)
from a11y_heuristics.core.analyzer import Analyzer, AnalyzerRegistry


def test_alt_text_analyzer():
    html = '<html><body><img src="logo.png"/></body></html>'
    analyzer = AltTextAnalyzer()
    issues = analyzer.analyze(html)
    assert any(i['code'] == 'IMG_MISSING_ALT' for i in issues)
    assert issues[0]['context'] == '<img src="logo.png"/>'


def test_form_label_analyzer():
    html = '<html><body><form><input type="text" id="name" /></form></body></html>'
    analyzer = FormLabelAnalyzer()
    issues = analyzer.analyze(html)
    assert any(i['code'] == 'FORM_CONTROL_NO_LABEL' for i in issues)


def test_heading_order_analyzer():
    html = '<html><body><h1>Title</h1><h3>Subtitle</h3></body></html>'
    analyzer = HeadingOrderAnalyzer()
    issues = analyzer.analyze(html)
    assert [i['code'] for i in issues] == ['HEADING_ORDER']
    assert issues[0]['context'] == '<h3>'


def test_button_analyzer():
    html = '<html><body><button></button><button>OK</button></body></html>'
    analyzer = ButtonAnalyzer()
    issues = analyzer.analyze(html)
    assert [i['code'] for i in issues] == ['BUTTON_NO_TEXT']


def test_link_text_analyzer():
    html = '<html><body><a href="/"></a></body></html>'
    analyzer = LinkTextAnalyzer()
    issues = analyzer.analyze(html)
    assert any(i['code'] == 'LINK_NO_TEXT' for i in issues)


def test_context_is_truncated():
    html = '<img src="%s" />' % ("x" * 500)
    issues = AltTextAnalyzer().analyze(html)
    assert len(issues[0]['context']) == 200


@pytest.mark.parametrize("analyzer_cls", [
    AltTextAnalyzer,
    FormLabelAnalyzer,
    HeadingOrderAnalyzer,
    ButtonAnalyzer,
    LinkTextAnalyzer,
])
def test_clean_markup_has_no_issues(analyzer_cls):
    html = """
      <h1>Title</h1>
      <img src="a.png" alt="A" />
      <label for="q">Search</label><input id="q" />
      <button>Go</button>
      <a href="/">Home</a>
    """
    analyzer = analyzer_cls()
    assert analyzer.analyze(html) == []
    assert analyzer.check(html) is True


class _BrokenAnalyzer(Analyzer):
    @property
    def name(self) -> str:
        return "broken"

    @property
    def description(self) -> str:
        return "Always fails"

    def analyze(self, html):
        raise RuntimeError("boom")


class TestAnalyzerRegistry:
    """Tests for AnalyzerRegistry."""

    def test_register_and_get(self):
        registry = AnalyzerRegistry()
        analyzer = AltTextAnalyzer()
        registry.register(analyzer)
        assert registry.get("alt_text") is analyzer
        assert list(registry.list()) == ["alt_text"]

    def test_unregister(self):
        registry = AnalyzerRegistry()
        registry.register(AltTextAnalyzer())
        registry.unregister("alt_text")
        registry.unregister("missing")
        assert registry.get("alt_text") is None

    def test_analyze_all_tags_analyzer_and_honours_exclude(self):
        registry = AnalyzerRegistry()
        registry.register(AltTextAnalyzer())
        registry.register(LinkTextAnalyzer())
        html = '<img src="a.png" /><a href="/"></a>'

        issues = registry.analyze_all(html)
        assert {i['analyzer'] for i in issues} == {"alt_text", "link_text"}

        issues = registry.analyze_all(html, exclude=["link_text"])
        assert [i['code'] for i in issues] == ['IMG_MISSING_ALT']

    def test_failing_analyzer_is_skipped(self, caplog):
        """A raising analyzer is logged and the others still run."""
        registry = AnalyzerRegistry()
        registry.register(_BrokenAnalyzer())
        registry.register(AltTextAnalyzer())
        issues = registry.analyze_all('<img src="a.png" />')
        assert [i['code'] for i in issues] == ['IMG_MISSING_ALT']
        assert "broken" in caplog.text
