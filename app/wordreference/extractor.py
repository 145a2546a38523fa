# -*- coding: utf-8 -*-
"""
@Time    : 2025/10/11 22:18
@Author  : QIN2DIM
@GitHub  : https://github.com/QIN2DIM
@Desc    : Extract translation tables from WordReference pages
"""
from html import escape
from typing import List

from bs4 import BeautifulSoup, Comment, NavigableString, Tag

from dictionary.directions import header_label
from models import TranslationEntry

TABLE_SELECTOR = "table.WRD"
HTML_PARSER = "html.parser"


def _is_text_node(node) -> bool:
    return isinstance(node, NavigableString) and not isinstance(node, Comment)


def _is_excluded(tag: Tag) -> bool:
    """Inline conjugation links and secondary part-of-speech hints are not translations"""
    classes = tag.get("class") or []
    if tag.name == "a" and "conjugate" in classes:
        return True
    if tag.name == "em" and any("POS2" in c for c in classes):
        return True
    return False


def _collect_translation_text(node: Tag, parts: List[str]) -> None:
    for child in node.children:
        if isinstance(child, Tag):
            if _is_excluded(child):
                continue
            _collect_translation_text(child, parts)
        elif _is_text_node(child):
            if text := child.strip():
                parts.append(text)


def _headword_text(td: Tag) -> str:
    parts = []
    for strong in td.find_all("strong"):
        parts.extend(s.strip() for s in strong.strings if s.strip())
    return " ".join(parts)


def _translation_text(td: Tag) -> str:
    parts: List[str] = []
    _collect_translation_text(td, parts)
    return " ".join(parts)


def extract_raw_table(markup: str, direction: str) -> str:
    """
    Select the main translation table of a WordReference page

    Every ``table.WRD`` is inspected in document order and the first one whose
    first row mentions the header label of ``direction`` is returned verbatim.

    Args:
        markup: full page HTML
        direction: translation direction code, e.g. ``pten``

    Returns:
        The table markup, or an empty string when the page has no matching table
    """
    if not markup:
        return ""

    label = header_label(direction)
    soup = BeautifulSoup(markup, HTML_PARSER)

    for table in soup.select(TABLE_SELECTOR):
        header_row = table.find("tr")
        if header_row is None:
            continue
        header_text = " ".join(header_row.strings)
        if label in header_text:
            return str(table)

    return ""


def parse_entries(table_markup: str) -> List[TranslationEntry]:
    """Rows with exactly three cells are translation rows, anything else is skipped"""
    if not table_markup:
        return []

    soup = BeautifulSoup(table_markup, HTML_PARSER)
    entries = []

    for row in soup.find_all("tr"):
        tds = row.find_all("td")
        if len(tds) != 3:
            continue

        # Replies use Telegram HTML parse mode, page text must not leak markup
        entries.append(
            TranslationEntry(
                headword=escape(_headword_text(tds[0]), quote=False),
                part_of_speech=escape(" ".join(tds[1].strings).strip(), quote=False),
                translation=escape(_translation_text(tds[2]), quote=False),
            )
        )

    return entries


def extract_entries(table_markup: str) -> str:
    """Render a translation table as Telegram HTML, one newline-terminated line per entry"""
    return "".join(entry.to_html() for entry in parse_entries(table_markup))
