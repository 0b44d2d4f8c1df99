"""Article summaries."""

from .llm_provider import LLMProvider, MockLLMProvider, OpenAIProvider
from .summaries import get_llm_provider, summarize_articles

__all__ = [
    "LLMProvider",
    "MockLLMProvider",
    "OpenAIProvider",
    "get_llm_provider",
    "summarize_articles",
]
