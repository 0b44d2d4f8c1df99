"""Topical tag derivation."""

from .extractor import STOPWORDS, KeywordTagExtractor, TagExtractor

__all__ = ["KeywordTagExtractor", "STOPWORDS", "TagExtractor"]
