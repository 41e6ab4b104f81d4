"""Unit tests for core/models.py"""

from pathlib import Path

from cwrap.core.models import BuildReport, ClassroomRule, RouteResult, RouteStatus, StyleSheet


def test_stylesheet_preserves_insertion_order():
    """Re-setting a selector keeps its original position."""
    sheet = StyleSheet()
    sheet.set_rule("a", "1")
    sheet.set_rule("b", "2")
    sheet.set_rule("a", "3")
    assert list(sheet.selectors.items()) == [("a", "3"), ("b", "2")]


def test_stylesheet_clear():
    """clear empties both maps."""
    sheet = StyleSheet()
    sheet.set_rule("a", "1")
    sheet.set_media_rule("q", "a", "2")
    assert not sheet.is_empty()
    sheet.clear()
    assert sheet.is_empty()


def test_classroom_selector():
    """class rules get a leading dot; other types are bare."""
    assert ClassroomRule(type="class", name="btn").selector == ".btn"
    assert ClassroomRule(type="element", name="h1").selector == "h1"


def test_build_report_counts():
    """ok is False as soon as one route failed."""
    report = BuildReport([
        RouteResult(Path("."), RouteStatus.compiled),
        RouteResult(Path("a"), RouteStatus.skipped),
    ])
    assert report.ok
    report.results.append(RouteResult(Path("b"), RouteStatus.failed, error="boom"))
    assert report.count(RouteStatus.failed) == 1
    assert not report.ok
