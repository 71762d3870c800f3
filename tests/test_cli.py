"""Tests for a11ylint CLI entry point."""
from __future__ import annotations

import json

from click.testing import CliRunner

from a11ylint.cli import main

CLEAN_PAGE = (
    '<!DOCTYPE html><html lang="en"><head><title>Home</title>'
    '<meta name="viewport" content="width=device-width"></head>'
    "<body><h1>Welcome</h1><p>Hello</p></body></html>"
)

BROKEN_PAGE = '<html><head></head><body><img src="x"></body></html>'


class TestCheckCommand:
    def test_clean_page_exits_zero(self, tmp_path) -> None:
        page = tmp_path / "index.html"
        page.write_text(CLEAN_PAGE)
        result = CliRunner().invoke(main, ["check", str(page), "--project-dir", str(tmp_path)])
        assert result.exit_code == 0
        report = json.loads(result.stdout)
        assert report["violations"] == []
        assert report["url"] == str(page)
        assert {p["id"] for p in report["passes"]} >= {"document-title", "html-has-lang", "meta-viewport"}

    def test_violations_exit_one(self, tmp_path) -> None:
        page = tmp_path / "broken.html"
        page.write_text(BROKEN_PAGE)
        result = CliRunner().invoke(main, ["check", str(page), "--project-dir", str(tmp_path)])
        assert result.exit_code == 1
        ids = [v["id"] for v in json.loads(result.stdout)["violations"]]
        assert "image-alt" in ids

    def test_reads_stdin_with_url(self, tmp_path) -> None:
        result = CliRunner().invoke(
            main,
            ["check", "-", "--url", "https://example.test", "--project-dir", str(tmp_path)],
            input=CLEAN_PAGE,
        )
        assert result.exit_code == 0
        assert json.loads(result.stdout)["url"] == "https://example.test"

    def test_pack_option_overrides_config(self, tmp_path) -> None:
        page = tmp_path / "broken.html"
        page.write_text(BROKEN_PAGE)
        result = CliRunner().invoke(
            main, ["check", str(page), "--pack", "core", "--project-dir", str(tmp_path)],
        )
        ids = [v["id"] for v in json.loads(result.stdout)["violations"]]
        assert ids == ["image-alt", "document-title", "html-has-lang"]

    def test_config_disables_rule(self, tmp_path) -> None:
        (tmp_path / "a11ylint.yml").write_text("packs:\n  - core\nrules:\n  image-alt:\n    enabled: false\n")
        page = tmp_path / "broken.html"
        page.write_text(BROKEN_PAGE)
        result = CliRunner().invoke(main, ["check", str(page), "--project-dir", str(tmp_path)])
        ids = [v["id"] for v in json.loads(result.stdout)["violations"]]
        assert "image-alt" not in ids

    def test_text_format(self, tmp_path) -> None:
        page = tmp_path / "broken.html"
        page.write_text(BROKEN_PAGE)
        result = CliRunner().invoke(
            main, ["check", str(page), "--format", "text", "--project-dir", str(tmp_path)],
        )
        assert result.exit_code == 1
        assert "[image-alt] (critical)" in result.output

    def test_invalid_document_exits_two(self, tmp_path) -> None:
        page = tmp_path / "empty.html"
        page.write_text("")
        result = CliRunner().invoke(main, ["check", str(page), "--project-dir", str(tmp_path)])
        assert result.exit_code == 2
        assert "invalid document" in result.output

    def test_missing_file_is_usage_error(self, tmp_path) -> None:
        result = CliRunner().invoke(main, ["check", str(tmp_path / "nope.html")])
        assert result.exit_code == 2


class TestInitCommand:
    def test_init_creates_config(self, tmp_path) -> None:
        result = CliRunner().invoke(main, ["init", "--project-dir", str(tmp_path)])
        assert result.exit_code == 0
        assert (tmp_path / "a11ylint.yml").exists()
        assert "Created" in result.output

    def test_init_keeps_existing_config(self, tmp_path) -> None:
        (tmp_path / "a11ylint.yml").write_text("packs:\n  - core\n")
        result = CliRunner().invoke(main, ["init", "--project-dir", str(tmp_path)])
        assert result.exit_code == 0
        assert "already exists" in result.output
        assert (tmp_path / "a11ylint.yml").read_text() == "packs:\n  - core\n"


class TestListRulesCommand:
    def test_lists_all_rules(self) -> None:
        result = CliRunner().invoke(main, ["list-rules"])
        assert result.exit_code == 0
        assert "image-alt" in result.output
        assert "table-caption" in result.output
        assert "18 rules total." in result.output

    def test_filters_by_pack(self) -> None:
        result = CliRunner().invoke(main, ["list-rules", "--pack", "core"])
        assert "image-alt" in result.output
        assert "color-contrast" not in result.output
        assert "7 rules total." in result.output

    def test_unknown_pack(self) -> None:
        result = CliRunner().invoke(main, ["list-rules", "--pack", "nope"])
        assert "No rules found for pack 'nope'." in result.output
