"""Top stories pipeline driver."""

import asyncio
import logging
from typing import Collection, List, Optional

from ..config import Config
from ..ingestion import DocumentFetcher, TopStoriesClient, build_feed_url
from ..models import Article, ArticleView
from ..tagging import KeywordTagExtractor, TagExtractor
from .filters import filter_by_sections, filter_complete
from .jobs import FanOutCoordinator

logger = logging.getLogger(__name__)


class TopStoriesAPI:
    """Fetch the current top stories and extract their text and tags.

    Each call to :meth:`generate_articles` is an independent run; only the
    feed URL is computed once and reused.
    """

    def __init__(
        self,
        config: Optional[Config] = None,
        feed_client: Optional[TopStoriesClient] = None,
        fetcher: Optional[DocumentFetcher] = None,
        tag_extractor: Optional[TagExtractor] = None,
        allowed_sections: Optional[Collection[str]] = None,
        tag_count: Optional[int] = None,
    ) -> None:
        """
        Initialize the pipeline.

        Args:
            config: Configuration manager (defaults to the user config)
            feed_client: Top stories client
            fetcher: Article page fetcher
            tag_extractor: Tag extractor
            allowed_sections: Override for the configured section allow-set
            tag_count: Override for the configured number of tags
        """
        self.config = config or Config()
        settings = self.config.config

        self.feed_client = feed_client or TopStoriesClient(timeout=settings.feed.timeout)
        self.fetcher = fetcher or DocumentFetcher(
            timeout=settings.fetch.timeout,
            user_agent=settings.fetch.user_agent,
        )
        self.tag_extractor = tag_extractor or KeywordTagExtractor()

        if allowed_sections is None:
            allowed_sections = settings.pipeline.allowed_sections
        self.allowed_sections = tuple(allowed_sections)
        self.tag_count = tag_count if tag_count is not None else settings.pipeline.tag_count

        self._url: Optional[str] = None
        self._articles: List[Article] = []

    @property
    def url(self) -> str:
        """Feed URL, built on first use."""
        if self._url is None:
            self._url = build_feed_url(
                self.config.config.feed.base_url,
                self.config.get_feed_api_key(),
            )
        return self._url

    @property
    def articles(self) -> List[ArticleView]:
        """Articles produced by the last successful run."""
        return list(self._articles)

    async def generate_articles(self) -> List[ArticleView]:
        """Run the pipeline once.

        Raises:
            FeedError: If the feed could not be fetched or decoded
        """
        stories = await self.feed_client.fetch_top_stories(self.url)

        articles = filter_by_sections(stories.results, self.allowed_sections)
        logger.info(
            "%d of %d stories in allowed sections",
            len(articles),
            len(stories.results),
        )

        coordinator = FanOutCoordinator(self.fetcher, self.tag_extractor, self.tag_count)
        await coordinator.run(articles)

        self._articles = filter_complete(articles)
        logger.info("%d articles with extracted text", len(self._articles))
        return self.articles

    def generate_articles_sync(self) -> List[ArticleView]:
        """Synchronous wrapper for generate_articles."""
        return asyncio.run(self.generate_articles())
