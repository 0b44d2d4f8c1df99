"""LLM provider interface and implementations."""

import logging
from abc import ABC, abstractmethod
from typing import Dict, List, Optional

import openai
from openai import OpenAI

logger = logging.getLogger(__name__)


class LLMProvider(ABC):
    """Abstract base class for LLM providers."""

    @abstractmethod
    def summarize_article(self, title: str, content: str, url: str) -> str:
        """
        Summarize an article in a short paragraph.

        Args:
            title: Article title
            content: Extracted article text
            url: Article URL

        Returns:
            Summary text, empty if summarization failed
        """
        pass

    @abstractmethod
    def get_usage_stats(self) -> Dict:
        """Get usage statistics."""
        pass


class OpenAIProvider(LLMProvider):
    """OpenAI implementation of LLM provider."""

    def __init__(
        self,
        api_key: str,
        model: str = "gpt-4o-mini",
        base_url: Optional[str] = None,
        client: Optional[OpenAI] = None,
    ) -> None:
        """
        Initialize OpenAI provider.

        Args:
            api_key: OpenAI API key
            model: Model name to use
            base_url: Custom base URL
            client: Preconfigured client (for testing)
        """
        self.client = client or OpenAI(api_key=api_key, base_url=base_url)
        self.model = model
        self.total_tokens = 0
        self.api_calls = 0

    def summarize_article(self, title: str, content: str, url: str) -> str:
        """Summarize article using OpenAI."""
        # Rough token estimate: 1 token ~= 4 chars
        max_content_chars = 8000
        if len(content) > max_content_chars:
            content = content[:max_content_chars] + "..."

        prompt = f"""Summarize this news article in two or three plain sentences.

Article Title: {title}
URL: {url}

Article Content:
{content}

Stick to what the article reports. No headings, bullets or commentary."""

        try:
            self.api_calls += 1
            response = self.client.chat.completions.create(
                model=self.model,
                messages=[{"role": "user", "content": prompt}],
                temperature=0.3,
                max_tokens=200,
            )

            if response.usage:
                self.total_tokens += response.usage.total_tokens

            return (response.choices[0].message.content or "").strip()

        except openai.OpenAIError as e:
            logger.warning("Error summarizing article '%s': %s", title, e)
            return ""

    def get_usage_stats(self) -> Dict:
        """Get usage statistics."""
        return {
            "total_tokens": self.total_tokens,
            "api_calls": self.api_calls,
            "model": self.model,
        }


class MockLLMProvider(LLMProvider):
    """Mock LLM provider for testing and offline runs."""

    def __init__(self) -> None:
        """Initialize mock provider."""
        self.calls: List[str] = []

    def summarize_article(self, title: str, content: str, url: str) -> str:
        """Mock article summarization: the first line of the text."""
        self.calls.append(title)
        first_line = content.strip().split("\n", 1)[0]
        return f"{title}: {first_line}" if first_line else title

    def get_usage_stats(self) -> Dict:
        """Get mock usage statistics."""
        return {
            "total_tokens": 0,
            "api_calls": len(self.calls),
            "model": "mock",
        }
