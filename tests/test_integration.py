"""End-to-end audits of whole documents."""
from __future__ import annotations

from datetime import datetime, timezone

from a11ylint.config import A11yLintConfig
from a11ylint.engine import audit_html
from a11ylint.reporter import Reporter

STAMP = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)


def _page(body: str, head: str = '<title>Test page</title><meta name="viewport" content="width=device-width">') -> str:
    return f'<!DOCTYPE html><html lang="en"><head>{head}</head><body><h1>Page</h1>{body}</body></html>'


def _ids(report) -> list[str]:
    return [v.id for v in report.violations]


class TestEndToEnd:
    def test_clean_page_has_no_violations(self):
        report = audit_html(_page("<p>Hello</p>"), timestamp=STAMP)
        assert report.violations == ()
        assert [p.id for p in report.passes] == [
            "document-title", "page-has-heading-one", "html-has-lang", "meta-viewport", "heading-order",
        ]

    def test_image_without_alt(self):
        report = audit_html(_page('<img src="x">'), timestamp=STAMP)
        assert _ids(report) == ["image-alt"]
        assert len(report.violation("image-alt").nodes) == 1
        assert not report.has_pass("image-alt")

    def test_decorative_image_passes(self):
        report = audit_html(_page('<img src="x" alt="">'), timestamp=STAMP)
        assert report.violation("image-alt") is None
        assert report.has_pass("image-alt")

    def test_skipped_heading_level(self):
        report = audit_html(_page("<h2>B</h2><h4>C</h4>"), timestamp=STAMP)
        violation = report.violation("heading-order")
        assert len(violation.nodes) == 1
        assert violation.nodes[0].target == ("h4:nth-child(3)",)

    def test_sequential_headings(self):
        report = audit_html(_page("<h2>B</h2><h3>C</h3>"), timestamp=STAMP)
        assert report.violation("heading-order") is None
        assert report.has_pass("heading-order")

    def test_duplicate_click_here_links(self):
        report = audit_html(_page('<a href="/a">Click here</a><a href="/b">Click here</a>'), timestamp=STAMP)
        assert len(report.violation("link-text-quality").nodes) == 2
        same_text = report.violation("link-same-text-diff-target")
        assert [n.target for n in same_text.nodes] == [("a:nth-child(2)",)]
        assert report.has_pass("link-name")

    def test_no_tables_means_no_table_outcome(self):
        report = audit_html(_page("<p>x</p>"), timestamp=STAMP)
        assert report.violation("table-headers") is None
        assert not report.has_pass("table-headers")

    def test_table_caption_is_not_surfaced(self):
        report = audit_html(_page("<table><tr><td>1</td></tr></table>"), timestamp=STAMP)
        assert _ids(report) == ["table-headers"]

    def test_truncation_keeps_true_total(self):
        report = audit_html(_page('<img src="x">' * 12), timestamp=STAMP)
        violation = report.violation("image-alt")
        assert len(violation.nodes) == 5
        assert violation.node_count == 12
        assert len(report.to_dict()["violations"][0]["nodes"]) == 5

    def test_contrast_cap_then_node_cap(self):
        body = '<p style="color: gray; background-color: white">x</p>' * 12
        config = A11yLintConfig(max_nodes=50)
        report = audit_html(_page(body), config=config, timestamp=STAMP)
        assert report.violation("color-contrast").node_count == 10

    def test_rule_id_appears_once(self):
        report = audit_html(_page('<img src="a"><img src="b"><h1>Again</h1>'), timestamp=STAMP)
        ids = _ids(report)
        assert len(ids) == len(set(ids))
        assert ids == ["image-alt", "multiple-h1"]

    def test_violations_follow_catalogue_order(self):
        html = (
            "<html><head></head><body>"
            '<table><tr><td>1</td></tr></table><h3>Deep</h3><button></button><img src="x">'
            "</body></html>"
        )
        report = audit_html(html, timestamp=STAMP)
        assert _ids(report) == [
            "image-alt", "button-name", "document-title", "page-has-heading-one",
            "html-has-lang", "meta-viewport", "table-headers",
        ]

    def test_evaluation_is_deterministic(self):
        html = _page(
            '<img src="x"><a href="/a">more</a><a href="/b">more</a>'
            '<input placeholder="Name"><p style="color: yellow; background-color: white">Faint</p>'
        )
        first = Reporter(audit_html(html, source="page", timestamp=STAMP)).format_json()
        second = Reporter(audit_html(html, source="page", timestamp=STAMP)).format_json()
        assert first == second
