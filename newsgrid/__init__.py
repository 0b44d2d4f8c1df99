"""Top stories ingestion: fetch, extract and tag news articles concurrently."""

__version__ = "0.1.0"
