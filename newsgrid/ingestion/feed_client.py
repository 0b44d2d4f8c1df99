"""Top stories feed client."""

import logging
from typing import Optional

import httpx
from pydantic import ValidationError

from ..errors import FeedError
from ..models import TopStories

logger = logging.getLogger(__name__)


def build_feed_url(base_url: str, api_key: str) -> str:
    """Append the API credential to the feed endpoint."""
    return f"{base_url}?api-key={api_key}"


class TopStoriesClient:
    """Fetch the current batch of top stories."""

    def __init__(
        self,
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        """Initialize feed client."""
        self.timeout = timeout
        self.transport = transport

    async def fetch_top_stories(self, url: str) -> TopStories:
        """Fetch and decode the feed.

        Raises:
            FeedError: On transport failure, non-2xx status or malformed body
        """
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                response = await client.get(url)
                response.raise_for_status()
                payload = response.json()
        except httpx.HTTPStatusError as e:
            # The URL carries the credential, keep it out of the message
            raise FeedError(f"Feed returned HTTP {e.response.status_code}") from e
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise FeedError(f"Feed request failed: {type(e).__name__}") from e
        except ValueError as e:
            raise FeedError(f"Feed returned invalid JSON: {e}") from e

        try:
            stories = TopStories.model_validate(payload)
        except ValidationError as e:
            raise FeedError(f"Malformed feed response: {e}") from e

        logger.info("Feed returned %d stories", len(stories.results))
        return stories
