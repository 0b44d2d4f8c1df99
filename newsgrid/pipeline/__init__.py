"""Concurrent top stories pipeline."""

from .api import TopStoriesAPI
from .filters import filter_by_sections, filter_complete
from .jobs import ArticleJob, CompletionBarrier, FanOutCoordinator

__all__ = [
    "ArticleJob",
    "CompletionBarrier",
    "FanOutCoordinator",
    "TopStoriesAPI",
    "filter_by_sections",
    "filter_complete",
]
