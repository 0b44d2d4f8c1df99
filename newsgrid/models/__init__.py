"""Data models for newsgrid."""

from .article import Article, ArticleView, TopStories

__all__ = ["Article", "ArticleView", "TopStories"]
