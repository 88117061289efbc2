"""Tests for hwgate.presenter — HTML rendering."""

from __future__ import annotations

from hwgate.evaluator import REASON_HEADER, SUMMARY_PASS, Diagnosis, evaluate
from hwgate.hardware import HardwareSnapshot
from hwgate.presenter import PAGE_TITLE, render_html


def _snap(**overrides) -> HardwareSnapshot:
    defaults = dict(cores=4, clock_ghz=2.1, memory_gb=6, disk_gb=20)
    defaults.update(overrides)
    return HardwareSnapshot(**defaults)


class TestRenderHtml:
    def test_title_and_header(self) -> None:
        page = render_html(evaluate(_snap()))
        assert page.startswith("<!DOCTYPE html>")
        assert f"<title>{PAGE_TITLE}</title>" in page
        assert f"<h1>{PAGE_TITLE}</h1>" in page

    def test_six_message_lines_on_pass(self) -> None:
        page = render_html(evaluate(_snap()))
        assert page.count("<h2>") == 6
        assert f"<h2>{SUMMARY_PASS}</h2>" in page
        assert page.count("<h2></h2>") == 5

    def test_failure_lines(self) -> None:
        page = render_html(evaluate(_snap(cores=2, clock_ghz=1.0, memory_gb=4, disk_gb=10)))
        assert f"<h2>{REASON_HEADER}</h2>" in page
        assert "<h2></h2>" not in page
        assert "Not enough CPU cores" in page

    def test_values_are_escaped(self) -> None:
        diag = Diagnosis(meets=True, summary="<script>alert(1)</script>")
        page = render_html(diag, title="A & B")
        assert "<script>" not in page
        assert "&lt;script&gt;" in page
        assert "<title>A &amp; B</title>" in page
