"""Pydantic models for the backend's JSON responses."""

import datetime
from typing import Any
from urllib.parse import urlparse

from pydantic import BaseModel, field_validator

from search_assistant.data import Article


class LinkPayload(BaseModel):
    """One entry of the ``links`` array from ``/api/related``."""

    title: str
    url: str
    description: str = ""
    date: datetime.date

    @field_validator("url")
    @classmethod
    def url_must_be_absolute(cls, v: str) -> str:
        parsed = urlparse(v)
        if not parsed.scheme or not parsed.netloc:
            raise ValueError(f"Article url is not absolute: {v}")
        return v

    @field_validator("date", mode="before")
    @classmethod
    def drop_time_component(cls, v: Any) -> Any:
        # Backend dates may carry a time part, e.g. "2024-03-04T00:00:00"
        if isinstance(v, str) and len(v) > 10:
            return v[:10]
        return v

    def to_article(self) -> Article:
        return Article(
            title=self.title,
            url=self.url,
            description=self.description,
            published_date=self.date,
        )


class RelatedPayload(BaseModel):
    """Body of a successful ``/api/related`` response."""

    links: list[LinkPayload]
    id: str | None = None


class AnswerPayload(BaseModel):
    """Body of a successful ``/api/answer`` response."""

    answer: str
