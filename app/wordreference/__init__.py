# -*- coding: utf-8 -*-
"""
WordReference scraping: page fetcher and translation table extractor
"""
from .client import WordReferenceClient
from .extractor import extract_raw_table, extract_entries, parse_entries

__all__ = ["WordReferenceClient", "extract_raw_table", "extract_entries", "parse_entries"]
