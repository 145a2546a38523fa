# -*- coding: utf-8 -*-
"""
Tests for the WordReference table extractor
"""
from wordreference.extractor import extract_entries, extract_raw_table, parse_entries


class TestExtractRawTable:
    def test_returns_matching_table(self):
        body = """
        <html><body>
          <table class="WRD">
            <tr><td>Traduções principais</td></tr>
            <tr><td>foo</td></tr>
          </table>
        </body></html>
        """
        result = extract_raw_table(body, "pten")

        assert result.startswith("<table")
        assert "Traduções principais" in result
        assert "foo" in result

    def test_returns_empty_string_without_matching_header(self):
        body = """
        <html><body>
          <table class="WRD"><tr><td>Not the header</td></tr></table>
        </body></html>
        """
        assert extract_raw_table(body, "pten") == ""

    def test_skips_tables_before_the_matching_one(self, casa_page):
        result = extract_raw_table(casa_page, "pten")

        assert "casa" in result
        assert "lar" not in result

    def test_ignores_tables_without_marker_class(self):
        body = "<table class='other'><tr><td>Traduções principais</td></tr></table>"
        assert extract_raw_table(body, "pten") == ""

    def test_italian_label(self):
        body = """
        <table class="WRD">
          <tr><td>Principal Translations/Traduzioni principali</td></tr>
          <tr><td><strong>casa</strong></td><td>nf</td><td>house</td></tr>
        </table>
        """
        assert extract_raw_table(body, "iten") != ""
        assert extract_raw_table(body, "pten") == ""

    def test_header_text_spans_several_nodes(self):
        body = """
        <table class="WRD">
          <tr><td><span>Principal Translations/Traduzioni principali</span><span>Inglese</span></td></tr>
        </table>
        """
        assert extract_raw_table(body, "iten") != ""

    def test_empty_markup(self):
        assert extract_raw_table("", "pten") == ""


class TestExtractEntries:
    def test_basic_table(self):
        table_html = """
        <table class="WRD">
          <tr class>
            <td><strong>Português</strong></td>
            <td>nf</td>
            <td><strong>Inglês</strong></td>
          </tr>
          <tr class="odd">
            <td><strong>casa</strong></td>
            <td>nf</td>
            <td>house</td>
          </tr>
        </table>
        """
        result = extract_entries(table_html)

        assert "<b>casa</b> nf ⮕ house\n" in result
        assert result.endswith("\n")

    def test_skips_rows_without_three_cells(self):
        table_html = """
        <table class="WRD">
          <tr><td>only one td</td></tr>
          <tr><td><strong>casa</strong></td><td>nf</td><td>house</td></tr>
          <tr><td>a</td><td>b</td></tr>
          <tr><td>a</td><td>b</td><td>c</td><td>d</td></tr>
        </table>
        """
        assert extract_entries(table_html) == "<b>casa</b> nf ⮕ house\n"

    def test_header_only_table_yields_nothing(self):
        table_html = '<table class="WRD"><tr><td colspan="3">Traduções principais</td></tr></table>'
        assert extract_entries(table_html) == ""

    def test_empty_input(self):
        assert extract_entries("") == ""

    def test_translation_excludes_conjugate_links(self):
        table_html = """
        <table><tr>
          <td><strong>ir</strong></td><td>vi</td>
          <td>foo <a class="conjugate">bar</a> baz</td>
        </tr></table>
        """
        assert parse_entries(table_html)[0].translation == "foo baz"

    def test_translation_excludes_secondary_part_of_speech(self):
        table_html = """
        <table><tr>
          <td><strong>casa</strong></td><td>nf</td>
          <td>house <em class="POS2">n</em></td>
        </tr></table>
        """
        assert parse_entries(table_html)[0].translation == "house"

    def test_nested_exclusions_apply_independently(self):
        table_html = """
        <table><tr>
          <td><strong>mar</strong></td><td>nm</td>
          <td><span>sea <em class="POS2">n</em></span> ocean <a class="conjugate">conj</a><i>(big)</i></td>
        </tr></table>
        """
        assert parse_entries(table_html)[0].translation == "sea ocean (big)"

    def test_other_emphasis_is_kept(self):
        table_html = """
        <table><tr>
          <td><strong>casa</strong></td><td>nf</td>
          <td>house <em class="tooltip">(building)</em></td>
        </tr></table>
        """
        assert parse_entries(table_html)[0].translation == "house (building)"

    def test_headword_keeps_only_strong_text(self):
        table_html = """
        <table><tr>
          <td><strong>casa</strong> <em>nf</em> <strong> de campo </strong></td>
          <td>nf</td><td>country house</td>
        </tr></table>
        """
        entry = parse_entries(table_html)[0]

        assert entry.headword == "casa de campo"
        assert entry.part_of_speech == "nf"
        assert entry.translation == "country house"

    def test_text_is_html_escaped(self):
        table_html = """
        <table><tr>
          <td><strong>P&amp;D</strong></td><td>nf</td><td>R&amp;D &lt;research&gt;</td>
        </tr></table>
        """
        assert extract_entries(table_html) == "<b>P&amp;D</b> nf ⮕ R&amp;D &lt;research&gt;\n"

    def test_one_line_per_entry(self):
        table_html = """
        <table>
          <tr><td><strong>casa</strong></td><td>nf</td><td>house</td></tr>
          <tr><td><strong>casa</strong></td><td>nf</td><td>home</td></tr>
        </table>
        """
        assert extract_entries(table_html).splitlines() == [
            "<b>casa</b> nf ⮕ house",
            "<b>casa</b> nf ⮕ home",
        ]

    def test_page_to_entries(self, casa_page):
        entries = parse_entries(extract_raw_table(casa_page, "pten"))

        assert len(entries) == 1
        assert (entries[0].headword, entries[0].part_of_speech, entries[0].translation) == (
            "casa",
            "nf",
            "house",
        )
