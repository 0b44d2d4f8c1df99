"""Article page fetcher."""

import logging
import re
from typing import Optional, Tuple

import httpx
from lxml import etree

from ..errors import DocumentFetchError
from .body_extractor import parse_document

logger = logging.getLogger(__name__)

DEFAULT_ENCODING = "utf-8"

_META_CHARSET_RE = re.compile(rb"<meta[^>]+charset\s*=\s*[\"']?\s*([A-Za-z0-9._:-]+)", re.IGNORECASE)


def _meta_charset(content: bytes) -> Optional[str]:
    # Browsers look for the declaration within the first 1024 bytes
    match = _META_CHARSET_RE.search(content[:1024])
    return match.group(1).decode("ascii") if match else None


def resolve_encoding(content: bytes, header_charset: Optional[str]) -> str:
    """Pick the page encoding: Content-Type charset, then <meta>, then UTF-8."""
    return header_charset or _meta_charset(content) or DEFAULT_ENCODING


class DocumentFetcher:
    """Download an article page and parse it into a markup tree."""

    def __init__(
        self,
        timeout: float = 30.0,
        user_agent: str = "newsgrid/0.1 (news reader)",
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        """
        Initialize document fetcher.

        Args:
            timeout: Request timeout in seconds
            user_agent: User-Agent header sent with every request
            transport: Custom httpx transport (for testing)
        """
        self.timeout = timeout
        self.user_agent = user_agent
        self.transport = transport

    async def fetch_markup(self, url: str) -> Tuple[bytes, Optional[str]]:
        """Fetch the raw page body and the charset declared in its headers.

        Raises:
            DocumentFetchError: On transport failure or non-2xx status
        """
        headers = {
            "User-Agent": self.user_agent,
            "Accept": "text/html,application/xhtml+xml",
        }
        try:
            async with httpx.AsyncClient(
                timeout=self.timeout,
                follow_redirects=True,
                headers=headers,
                transport=self.transport,
            ) as client:
                response = await client.get(url)
                response.raise_for_status()
                return response.content, response.charset_encoding
        except httpx.HTTPStatusError as e:
            raise DocumentFetchError(f"HTTP {e.response.status_code} for {url}") from e
        except httpx.TimeoutException as e:
            raise DocumentFetchError(f"Request timed out for {url}") from e
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise DocumentFetchError(f"Request failed for {url}: {e}") from e

    async def fetch_document(self, url: str) -> etree._Element:
        """Fetch a page and parse it.

        Raises:
            DocumentFetchError: If the page could not be downloaded
            DocumentParseError: If the page could not be parsed
        """
        markup, header_charset = await self.fetch_markup(url)
        logger.debug("Fetched %d bytes from %s", len(markup), url)
        return parse_document(markup, resolve_encoding(markup, header_charset))
