"""Configuration models."""

from typing import List, Optional

from pydantic import BaseModel, Field, field_validator

DEFAULT_ALLOWED_SECTIONS = ["business", "politics", "technology", "us", "world"]


class FeedConfig(BaseModel):
    """Top stories feed configuration."""

    base_url: str = Field(
        "https://api.nytimes.com/svc/topstories/v2/home.json",
        description="Top stories endpoint, without query string",
    )
    api_key_env: Optional[str] = Field("NYTIMES_KEY", description="Environment variable for API key")
    api_key: Optional[str] = Field(None, description="API key (prefer api_key_env)")
    timeout: float = Field(30.0, description="Request timeout in seconds", gt=0)


class PipelineConfig(BaseModel):
    """Pipeline behaviour."""

    allowed_sections: List[str] = Field(
        default_factory=lambda: list(DEFAULT_ALLOWED_SECTIONS),
        description="Sections kept by the section filter (exact match)",
    )
    tag_count: int = Field(3, description="Number of tags derived per article", ge=1, le=20)

    @field_validator("allowed_sections")
    @classmethod
    def validate_sections(cls, v: List[str]) -> List[str]:
        """Reject blank section labels."""
        for section in v:
            if not section.strip():
                raise ValueError("Section labels must not be blank")
        return v


class FetchConfig(BaseModel):
    """Article page download settings."""

    timeout: float = Field(30.0, description="Request timeout in seconds", gt=0)
    user_agent: str = Field("newsgrid/0.1 (news reader)", description="User-Agent header")


class LLMConfig(BaseModel):
    """LLM provider configuration."""

    provider: str = Field("openai", description="LLM provider (openai, mock)")
    model: str = Field("gpt-4o-mini", description="Model name")
    api_key_env: Optional[str] = Field("OPENAI_API_KEY", description="Environment variable for API key")
    api_key: Optional[str] = Field(None, description="API key (prefer api_key_env)")
    base_url: Optional[str] = Field(None, description="Base URL for API")


class ConfigModel(BaseModel):
    """Main configuration model."""

    feed: FeedConfig = Field(default_factory=FeedConfig)
    pipeline: PipelineConfig = Field(default_factory=PipelineConfig)
    fetch: FetchConfig = Field(default_factory=FetchConfig)
    llm: LLMConfig = Field(default_factory=LLMConfig)
