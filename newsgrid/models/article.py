"""Article records and the read-only view handed to consumers."""

from typing import List, Optional, Protocol, runtime_checkable

import pendulum
from pendulum import DateTime
from pydantic import BaseModel, ConfigDict, Field, field_validator


@runtime_checkable
class ArticleView(Protocol):
    """What downstream consumers may see of an article.

    Everything is read-only except ``summary``.
    """

    @property
    def url(self) -> str: ...

    @property
    def title(self) -> str: ...

    @property
    def section(self) -> str: ...

    @property
    def created_at(self) -> Optional[DateTime]: ...

    @property
    def text(self) -> str: ...

    @property
    def tags(self) -> List[str]: ...

    summary: str


class Article(BaseModel):
    """A single top story.

    Feed fields are frozen once the record is built. ``text`` and ``tags`` are
    filled in by the one job that owns the record.
    """

    model_config = ConfigDict(extra="ignore")

    url: str = Field(..., frozen=True, description="Article URL")
    title: str = Field("", frozen=True, description="Article title")
    section: str = Field("", frozen=True, description="Feed section, e.g. technology")
    published_date: str = Field("", frozen=True, description="RFC-3339 publication timestamp")
    text: str = Field("", description="Extracted body text")
    summary: str = Field("", description="Summarised text, set by consumers")
    tags: List[str] = Field(default_factory=list, description="Derived topical tags")

    @field_validator("title", "section", "published_date", mode="before")
    @classmethod
    def null_to_empty(cls, v):
        """The feed sends null for fields it has no value for."""
        return "" if v is None else v

    @property
    def created_at(self) -> Optional[DateTime]:
        """Publication time normalised to UTC, or None if unparseable."""
        if not self.published_date:
            return None
        try:
            parsed = pendulum.parse(self.published_date)
        except ValueError:
            return None
        if not isinstance(parsed, DateTime):
            return None
        return parsed.in_timezone("UTC")


class TopStories(BaseModel):
    """Body of a top stories API response."""

    model_config = ConfigDict(extra="ignore")

    results: List[Article] = Field(..., description="Article stubs")
