"""List filters applied before and after article extraction."""

from typing import Collection, List

from ..models import Article


def filter_by_sections(articles: List[Article], allowed_sections: Collection[str]) -> List[Article]:
    """Keep articles whose section exactly matches an allowed section.

    Order is preserved and neither argument is modified.
    """
    allowed = frozenset(allowed_sections)
    return [article for article in articles if article.section in allowed]


def filter_complete(articles: List[Article]) -> List[Article]:
    """Keep articles that ended up with body text."""
    return [article for article in articles if article.text]
