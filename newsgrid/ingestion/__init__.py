"""Feed and article page ingestion."""

from .body_extractor import extract_body_text, extract_text, find_body_node, parse_document
from .document_fetcher import DocumentFetcher
from .feed_client import TopStoriesClient, build_feed_url

__all__ = [
    "DocumentFetcher",
    "TopStoriesClient",
    "build_feed_url",
    "extract_body_text",
    "extract_text",
    "find_body_node",
    "parse_document",
]
