"""Pydantic models for the catalog search request and response."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class ResultType(str, Enum):
    """Catalog entity kinds; each value is the literal the API expects as ``entity``."""

    SOFTWARE = "software"
    MUSIC = "musicTrack"
    MOVIE = "movie"
    PODCAST = "podcast"
    EBOOK = "ebook"


class SearchQuery(BaseModel):
    term: str
    result_type: ResultType

    def as_params(self) -> dict[str, str]:
        return {"term": self.term, "entity": self.result_type.value}


class SearchResult(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="allow")

    title: str = Field(..., alias="trackName")
    creator: str = Field(..., alias="artistName")


class SearchResults(BaseModel):
    """Top-level response envelope."""

    model_config = ConfigDict(populate_by_name=True)

    result_count: int | None = Field(default=None, alias="resultCount")
    results: list[SearchResult]


__all__ = ["ResultType", "SearchQuery", "SearchResult", "SearchResults"]
