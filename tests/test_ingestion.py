"""Tests for newsgrid.ingestion feed client and document fetcher."""

import asyncio

import httpx
import pytest

from newsgrid.errors import DocumentFetchError, DocumentParseError, FeedError
from newsgrid.ingestion import DocumentFetcher, TopStoriesClient, build_feed_url, extract_body_text

from .conftest import page, route_transport

FEED_URL = "https://api.example.com/svc/topstories/v2/home.json?api-key=k"


def _feed_client(handler) -> TopStoriesClient:
    return TopStoriesClient(transport=httpx.MockTransport(handler))


class TestBuildFeedUrl:
    def test_appends_api_key(self) -> None:
        assert build_feed_url("https://api.example.com/home.json", "abc") == (
            "https://api.example.com/home.json?api-key=abc"
        )


class TestTopStoriesClient:
    def test_decodes_results(self) -> None:
        payload = {
            "status": "OK",
            "results": [
                {
                    "url": "https://example.com/a",
                    "title": "A",
                    "section": "world",
                    "published_date": "2024-01-01T00:00:00-05:00",
                    "multimedia": [],
                }
            ],
        }
        client = _feed_client(lambda request: httpx.Response(200, json=payload))

        stories = asyncio.run(client.fetch_top_stories(FEED_URL))

        assert len(stories.results) == 1
        article = stories.results[0]
        assert (article.url, article.title, article.section) == ("https://example.com/a", "A", "world")
        assert article.text == ""
        assert article.tags == []

    def test_null_fields_do_not_fail_the_feed(self) -> None:
        payload = {"results": [{"url": "https://example.com/a", "title": None, "section": "us", "published_date": None}]}
        client = _feed_client(lambda request: httpx.Response(200, json=payload))

        stories = asyncio.run(client.fetch_top_stories(FEED_URL))

        assert stories.results[0].title == ""
        assert stories.results[0].section == "us"

    def test_http_error_raises_feed_error(self) -> None:
        client = _feed_client(lambda request: httpx.Response(401, json={"fault": "invalid key"}))
        with pytest.raises(FeedError, match="401"):
            asyncio.run(client.fetch_top_stories(FEED_URL))

    def test_error_message_hides_credential(self) -> None:
        client = _feed_client(lambda request: httpx.Response(500))
        with pytest.raises(FeedError) as excinfo:
            asyncio.run(client.fetch_top_stories(FEED_URL))
        assert "api-key" not in str(excinfo.value)

    def test_transport_error_raises_feed_error(self) -> None:
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        with pytest.raises(FeedError):
            asyncio.run(_feed_client(handler).fetch_top_stories(FEED_URL))

    def test_invalid_url_raises_feed_error(self) -> None:
        client = _feed_client(lambda request: httpx.Response(200, json={"results": []}))
        with pytest.raises(FeedError, match="InvalidURL"):
            asyncio.run(client.fetch_top_stories("https://api.example.com/home.json?api-key=k\x00"))

    def test_invalid_json_raises_feed_error(self) -> None:
        client = _feed_client(lambda request: httpx.Response(200, text="<html>oops</html>"))
        with pytest.raises(FeedError, match="invalid JSON"):
            asyncio.run(client.fetch_top_stories(FEED_URL))

    @pytest.mark.parametrize(
        "payload",
        [
            {"status": "OK"},
            {"results": "nope"},
            {"results": [{"title": "no url"}]},
            [],
        ],
    )
    def test_malformed_payload_raises_feed_error(self, payload) -> None:
        client = _feed_client(lambda request: httpx.Response(200, json=payload))
        with pytest.raises(FeedError, match="Malformed"):
            asyncio.run(client.fetch_top_stories(FEED_URL))


class TestDocumentFetcher:
    def test_fetches_and_parses(self) -> None:
        transport = route_transport({"/a": page('<div name="articleBody"><p>Hello</p></div>')})
        fetcher = DocumentFetcher(transport=transport)

        document = asyncio.run(fetcher.fetch_document("https://example.com/a"))

        assert extract_body_text(document) == "Hello\n"

    def test_uses_declared_charset(self) -> None:
        body = page('<div name="articleBody"><p>Grüße</p></div>').encode("iso-8859-1")
        transport = route_transport({
            "/a": lambda request: httpx.Response(
                200, content=body, headers={"Content-Type": "text/html; charset=iso-8859-1"}
            ),
        })
        document = asyncio.run(DocumentFetcher(transport=transport).fetch_document("https://example.com/a"))
        assert extract_body_text(document) == "Grüße\n"

    def test_undeclared_charset_defaults_to_utf8(self) -> None:
        body = page('<div name="articleBody"><p>Café – naïve</p></div>').encode("utf-8")
        transport = route_transport({
            "/a": lambda request: httpx.Response(200, content=body, headers={"Content-Type": "text/html"}),
        })
        document = asyncio.run(DocumentFetcher(transport=transport).fetch_document("https://example.com/a"))
        assert extract_body_text(document) == "Café – naïve\n"

    def test_meta_charset_used_when_header_is_silent(self) -> None:
        body = (
            '<html><head><meta charset="iso-8859-1"></head><body>'
            '<div name="articleBody"><p>Grüße</p></div></body></html>'
        ).encode("iso-8859-1")
        transport = route_transport({
            "/a": lambda request: httpx.Response(200, content=body, headers={"Content-Type": "text/html"}),
        })
        document = asyncio.run(DocumentFetcher(transport=transport).fetch_document("https://example.com/a"))
        assert extract_body_text(document) == "Grüße\n"

    def test_sends_user_agent(self) -> None:
        seen = {}

        def handler(request):
            seen["ua"] = request.headers["User-Agent"]
            return httpx.Response(200, text=page("<p>x</p>"))

        fetcher = DocumentFetcher(user_agent="test-agent", transport=httpx.MockTransport(handler))
        asyncio.run(fetcher.fetch_document("https://example.com/a"))
        assert seen["ua"] == "test-agent"

    def test_not_found_raises_fetch_error(self) -> None:
        fetcher = DocumentFetcher(transport=route_transport({}))
        with pytest.raises(DocumentFetchError, match="404"):
            asyncio.run(fetcher.fetch_document("https://example.com/missing"))

    def test_timeout_raises_fetch_error(self) -> None:
        def handler(request):
            raise httpx.ReadTimeout("slow", request=request)

        fetcher = DocumentFetcher(transport=httpx.MockTransport(handler))
        with pytest.raises(DocumentFetchError, match="timed out"):
            asyncio.run(fetcher.fetch_document("https://example.com/slow"))

    def test_invalid_url_raises_fetch_error(self) -> None:
        fetcher = DocumentFetcher(transport=route_transport({}))
        with pytest.raises(DocumentFetchError, match="Request failed"):
            asyncio.run(fetcher.fetch_document("https://example.com/a\x00"))

    def test_empty_page_raises_parse_error(self) -> None:
        transport = route_transport({"/empty": lambda request: httpx.Response(200, content=b"")})
        fetcher = DocumentFetcher(transport=transport)
        with pytest.raises(DocumentParseError):
            asyncio.run(fetcher.fetch_document("https://example.com/empty"))
