"""
Tests cho text va HTML report formatters.
"""

from core.reporting import (
    ReportFormatter,
    format_report_html,
    format_report_plain,
    sanitize_report_name,
    write_html_report_dir,
)
from core.results import ResultAggregate
from core.types import Finding


def _aggregate():
    return ResultAggregate(
        {
            "docs/b.txt": (Finding("wrld", 1, 7, ("world",)),),
            "a.txt": (
                Finding("errror", 1, 5, ("error",)),
                Finding("xyz", 2, 1, ()),
            ),
        }
    )


class TestPlainReport:
    def test_no_typos(self):
        """Khong co typo -> chi mot dong "No typos found"."""
        assert format_report_plain(ResultAggregate()) == "No typos found.\n"

    def test_line_with_suggestions(self):
        """Dong finding co "Did you mean"."""
        report = format_report_plain(_aggregate())
        assert (
            '- Line 1, Col 5: "errror" appears to be a typo. Did you mean: error?'
            in report
        )

    def test_line_without_suggestions(self):
        """Dong finding khong co suggestion."""
        report = format_report_plain(_aggregate())
        assert '- Line 2, Col 1: "xyz" appears to be a typo.\n' in report

    def test_files_sorted_by_path(self):
        """File sap xep theo path."""
        report = format_report_plain(_aggregate())
        assert report.startswith("Typos found:\n")
        assert report.index("--- In file a.txt ---") < report.index("--- In file docs/b.txt ---")

    def test_multiple_suggestions_joined(self):
        """Nhieu suggestions noi bang dau phay."""
        aggregate = ResultAggregate({"a.txt": (Finding("eror", 3, 2, ("error", "errors")),)})
        assert "Did you mean: error, errors?" in format_report_plain(aggregate)


class TestHtmlReport:
    def test_no_typos(self):
        """HTML cho aggregate rong."""
        report = format_report_html(ResultAggregate())
        assert "No typos found." in report
        assert "<table>" not in report

    def test_table(self):
        """Moi finding la mot dong trong bang."""
        report = format_report_html(_aggregate())
        assert report.startswith("<!DOCTYPE html>")
        assert "<h1>Spell Check Report</h1>" in report
        assert "<th>Suggestions</th>" in report
        assert "<td>world</td>" in report
        assert "<h2>Typos in: b.txt</h2>" in report

    def test_text_is_escaped(self):
        """Text trong HTML duoc escape."""
        aggregate = ResultAggregate({"<x>.txt": (Finding("a<b", 1, 1, ("a&b",)),)})
        report = format_report_html(aggregate)
        assert "<td>a&lt;b</td>" in report
        assert "<td>a&amp;b</td>" in report
        assert "Typos in: &lt;x&gt;.txt" in report

    def test_formatters_follow_protocol(self):
        """Ca hai formatter thoa ReportFormatter."""
        assert isinstance(format_report_plain, ReportFormatter)
        assert isinstance(format_report_html, ReportFormatter)


class TestHtmlReportDir:
    def test_sanitize_report_name(self):
        """Path -> ten file an toan."""
        assert sanitize_report_name("docs/guide.md") == "docs_guide.md.html"
        assert sanitize_report_name("C:\\docs\\a.txt") == "C__docs_a.txt.html"

    def test_writes_index_and_pages(self, tmp_path):
        """Ghi index.html va mot trang cho moi file."""
        out = tmp_path / "report"
        written = write_html_report_dir(out, _aggregate())

        assert written[0] == out / "index.html"
        assert {p.name for p in written[1:]} == {"a.txt.html", "docs_b.txt.html"}

        index = (out / "index.html").read_text(encoding="utf-8")
        assert '<a href="a.txt.html">a.txt</a> (2 typos)' in index
        assert '<a href="docs_b.txt.html">docs/b.txt</a> (1 typos)' in index

        page = (out / "docs_b.txt.html").read_text(encoding="utf-8")
        assert "<td>wrld</td>" in page

    def test_empty_aggregate_writes_only_index(self, tmp_path):
        """Aggregate rong -> chi co index.html."""
        written = write_html_report_dir(tmp_path / "report", ResultAggregate())
        assert written == [tmp_path / "report" / "index.html"]
        assert "No typos found." in written[0].read_text(encoding="utf-8")
