"""Attach summaries to extracted articles."""

import logging
from typing import Any, Dict, Iterable

from ..models import ArticleView
from .llm_provider import LLMProvider, MockLLMProvider, OpenAIProvider

logger = logging.getLogger(__name__)


def get_llm_provider(llm_config: Dict[str, Any]) -> LLMProvider:
    """Build the configured provider, falling back to the mock one."""
    provider = llm_config.get("provider")
    if provider == "mock":
        return MockLLMProvider()

    if provider == "openai":
        api_key = llm_config.get("api_key")
        if not api_key:
            logger.warning("No OpenAI API key found. Using mock LLM provider.")
            return MockLLMProvider()
        return OpenAIProvider(
            api_key=api_key,
            model=llm_config.get("model", "gpt-4o-mini"),
            base_url=llm_config.get("base_url"),
        )

    logger.warning("Unknown LLM provider %r. Using mock provider.", provider)
    return MockLLMProvider()


def summarize_articles(articles: Iterable[ArticleView], provider: LLMProvider) -> int:
    """Set ``summary`` on every article, returning how many got one."""
    summarized = 0
    for article in articles:
        summary = provider.summarize_article(article.title, article.text, article.url)
        article.summary = summary
        if summary:
            summarized += 1
    return summarized
