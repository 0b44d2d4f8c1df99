"""Concurrent per-article extraction.

Every article gets its own :class:`ArticleJob`, running as an asyncio task.
:class:`FanOutCoordinator` starts all of them at once and waits on a
:class:`CompletionBarrier` until each job has released it. A job releases the
barrier exactly once, from a ``finally`` block, whichever way it exits.
"""

import asyncio
import logging
from typing import List, Optional

from ..errors import DocumentFetchError, DocumentParseError, TagExtractionError
from ..ingestion import DocumentFetcher, extract_body_text
from ..models import Article
from ..tagging import TagExtractor

logger = logging.getLogger(__name__)


class CompletionBarrier:
    """Wait until a fixed number of participants have released."""

    def __init__(self, count: int) -> None:
        if count < 0:
            raise ValueError(f"Barrier count must not be negative, got {count}")
        self._pending = count
        self._done = asyncio.Event()
        if count == 0:
            self._done.set()

    @property
    def pending(self) -> int:
        """Participants that have not released yet."""
        return self._pending

    def release(self) -> None:
        """Mark one participant as finished."""
        if self._pending == 0:
            raise RuntimeError("Barrier released more times than it has participants")
        self._pending -= 1
        if self._pending == 0:
            self._done.set()

    async def wait(self) -> None:
        """Block until every participant has released."""
        await self._done.wait()


class ArticleJob:
    """Fetch, extract and tag a single article in place."""

    def __init__(
        self,
        article: Article,
        fetcher: DocumentFetcher,
        tag_extractor: TagExtractor,
        tag_count: int = 3,
    ) -> None:
        self.article = article
        self.fetcher = fetcher
        self.tag_extractor = tag_extractor
        self.tag_count = tag_count

    async def run(self, barrier: Optional[CompletionBarrier] = None) -> None:
        """Populate the article's text and tags, releasing ``barrier`` on exit."""
        try:
            await self._process()
        finally:
            if barrier is not None:
                barrier.release()

    async def _process(self) -> None:
        url = self.article.url
        try:
            document = await self.fetcher.fetch_document(url)
        except DocumentFetchError as e:
            logger.warning("Skipping %s: %s", url, e)
            return
        except DocumentParseError as e:
            logger.warning("Skipping %s, page could not be parsed: %s", url, e)
            return

        text = extract_body_text(document)
        if not text:
            logger.info("No article body found at %s", url)
            return

        self.article.text = text

        try:
            self.article.tags = self.tag_extractor.extract_tags(text, self.tag_count)
        except TagExtractionError as e:
            logger.warning("No tags for %s: %s", url, e)


class FanOutCoordinator:
    """Run one :class:`ArticleJob` per article and wait for all of them."""

    def __init__(
        self,
        fetcher: DocumentFetcher,
        tag_extractor: TagExtractor,
        tag_count: int = 3,
    ) -> None:
        self.fetcher = fetcher
        self.tag_extractor = tag_extractor
        self.tag_count = tag_count

    async def run(self, articles: List[Article]) -> None:
        """Process ``articles`` concurrently, returning once every job is done."""
        barrier = CompletionBarrier(len(articles))
        jobs = [
            ArticleJob(articles[i], self.fetcher, self.tag_extractor, self.tag_count)
            for i in range(len(articles))
        ]
        tasks = [asyncio.create_task(job.run(barrier)) for job in jobs]

        await barrier.wait()

        # Every task has left its finally block; collect anything unexpected
        results = await asyncio.gather(*tasks, return_exceptions=True)
        for job, result in zip(jobs, results):
            if isinstance(result, BaseException):
                logger.error(
                    "Unexpected error processing %s",
                    job.article.url,
                    exc_info=(type(result), result, result.__traceback__),
                )
