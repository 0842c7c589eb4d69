"""Catalog search: request construction and response classification."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from typing import Callable

import httpx
from pydantic import ValidationError

from itunes_search.config import SearchSettings
from itunes_search.domain.models import ResultType, SearchQuery, SearchResult, SearchResults
from itunes_search.logging import logger
from itunes_search.services.exceptions import (
    InvalidJSONError,
    NetworkError,
    NoDataError,
    PerformSearchError,
    RequestURLIsNilError,
)
from itunes_search.services.transport import Transport

_ALLOWED_SCHEMES = frozenset({"http", "https"})


@dataclass(slots=True, frozen=True)
class SearchOutcome:
    """Either the ordered results or exactly one classified failure."""

    results: list[SearchResult] | None = None
    error: PerformSearchError | None = None

    def __post_init__(self) -> None:
        if self.results is not None and self.error is not None:
            raise ValueError("results and error cannot be used at the same time")
        if self.results is None and self.error is None:
            raise ValueError("either results or error must be provided")

    @classmethod
    def success(cls, results: list[SearchResult]) -> "SearchOutcome":
        return cls(results=results)

    @classmethod
    def failure(cls, error: PerformSearchError) -> "SearchOutcome":
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> list[SearchResult]:
        if self.error is not None:
            raise self.error
        return self.results


SearchCompletion = Callable[[SearchOutcome], None]


class SearchResultController:
    """Runs keyword searches against the catalog endpoint.

    The transport is passed per call so a live client and a preset stub are
    interchangeable without touching the caller.
    """

    def __init__(self, settings: SearchSettings | None = None) -> None:
        self._settings = settings or SearchSettings()

    @property
    def base_url(self) -> str:
        return self._settings.base_url

    def build_request(self, term: str, result_type: ResultType) -> httpx.Request:
        query = SearchQuery(term=term, result_type=result_type)
        try:
            url = httpx.URL(self.base_url, params=query.as_params())
        except (httpx.InvalidURL, TypeError, ValueError) as exc:
            raise RequestURLIsNilError(f"Could not compose a request URL: {exc}") from exc
        if url.scheme not in _ALLOWED_SCHEMES or not url.host:
            raise RequestURLIsNilError(f"Could not compose a request URL from {self.base_url!r}.")
        return httpx.Request("GET", url)

    async def perform_search(
        self,
        term: str,
        result_type: ResultType,
        transport: Transport,
    ) -> SearchOutcome:
        """Search the catalog and classify the outcome.

        Failures are returned inside the outcome rather than raised.
        """

        try:
            request = self.build_request(term, result_type)
        except RequestURLIsNilError as exc:
            return self._fail(exc, term=term, result_type=result_type)

        logger.debug(
            "itunes_search_request_built",
            url=str(request.url),
            method=request.method,
        )

        reply = await transport.fetch(request)

        if reply.error is not None:
            return self._fail(NetworkError(reply.error), term=term, result_type=result_type)
        if reply.data is None:
            return self._fail(NoDataError(), term=term, result_type=result_type)

        try:
            envelope = SearchResults.model_validate_json(reply.data)
        except ValidationError as exc:
            return self._fail(InvalidJSONError(exc), term=term, result_type=result_type)

        logger.info(
            "itunes_search_completed",
            term=term,
            result_type=result_type.value,
            result_count=len(envelope.results),
        )
        return SearchOutcome.success(envelope.results)

    def submit_search(
        self,
        term: str,
        result_type: ResultType,
        transport: Transport,
        completion: SearchCompletion,
    ) -> asyncio.Task[SearchOutcome]:
        """Schedule a search and hand its outcome to ``completion`` once.

        Must be called with a running event loop. Returns immediately; the
        completion runs inside the returned task.
        """

        async def _run() -> SearchOutcome:
            outcome = await self.perform_search(term, result_type, transport)
            completion(outcome)
            return outcome

        return asyncio.create_task(_run())

    @staticmethod
    def _fail(error: PerformSearchError, *, term: str, result_type: ResultType) -> SearchOutcome:
        logger.warning(
            "itunes_search_failed",
            term=term,
            result_type=result_type.value,
            kind=error.kind,
            error=str(error),
        )
        return SearchOutcome.failure(error)


__all__ = ["SearchCompletion", "SearchOutcome", "SearchResultController"]
