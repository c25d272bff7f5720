"""Query service backed by the widget's HTTP API."""

import logging

import httpx
from pydantic import ValidationError

from search_assistant.client.payloads import AnswerPayload, RelatedPayload
from search_assistant.data import NetworkFailure, NoResults, NoSummary, RelatedResult, SummaryResult

DEFAULT_BASE_URL = "http://localhost:5555"
RELATED_PATH = "/api/related"
ANSWER_PATH = "/api/answer"

logger = logging.getLogger(__name__)


class HttpQueryService:
    """Query the related-articles and answer endpoints over HTTP.

    Every call opens its own ``httpx.AsyncClient``. No retries are made;
    failures are returned as outcome values.

    Args:
        base_url: Origin serving ``/api/related`` and ``/api/answer``.
        timeout: Request timeout in seconds.
        transport: Optional httpx transport, mainly for tests.
    """

    def __init__(
        self,
        *,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        if not base_url:
            raise ValueError("Query service base_url must not be empty.")
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._transport = transport

    @property
    def base_url(self) -> str:
        return self._base_url

    async def fetch_related(
        self,
        query: str,
        *,
        want_summary: bool = False,
    ) -> RelatedResult | NoResults | NetworkFailure:
        """Look up articles related to a query.

        Cached results are requested unless a summary is wanted, in which
        case the backend must compute fresh results and hand back an id.

        Args:
            query: Validated, non-empty query text.
            want_summary: Whether a summary will be requested afterwards.

        Returns:
            RelatedResult, NoResults for an empty article list, or
            NetworkFailure for transport errors, non-2xx statuses and
            malformed bodies.
        """
        params = {
            "cache": "FALSE" if want_summary else "TRUE",
            "query": query,
        }
        try:
            async with self._client() as client:
                response = await client.get(RELATED_PATH, params=params)
        except (httpx.HTTPError, httpx.InvalidURL, UnicodeEncodeError) as e:
            logger.warning(f"Related articles request failed in transport. Error: {e!r}")
            return NetworkFailure(operation="related", detail=repr(e))

        if not response.is_success:
            logger.warning(f"Related articles request returned HTTP {response.status_code}")
            return NetworkFailure(
                operation="related", detail=f"HTTP {response.status_code}: {response.text[:200]}"
            )

        try:
            payload = RelatedPayload.model_validate(response.json())
        except (ValueError, ValidationError) as e:
            logger.warning(f"Related articles response was malformed. Error: {e}")
            return NetworkFailure(operation="related", detail=f"Malformed body: {e}")

        if not payload.links:
            logger.info(f"No related articles for query: {query}")
            return NoResults()

        articles = tuple(link.to_article() for link in payload.links)
        logger.info(f"Query: {query}. Articles found: {len(articles)}")
        return RelatedResult(articles=articles, correlation_id=payload.id)

    async def fetch_summary(
        self,
        correlation_id: str,
    ) -> SummaryResult | NoSummary | NetworkFailure:
        """Fetch the summary generated for an earlier related lookup.

        Args:
            correlation_id: Identifier returned with the related articles.

        Returns:
            SummaryResult, NoSummary for non-2xx statuses, malformed bodies
            or blank answers, or NetworkFailure for transport errors.
        """
        try:
            async with self._client() as client:
                response = await client.get(ANSWER_PATH, params={"id": correlation_id})
        except (httpx.HTTPError, httpx.InvalidURL, UnicodeEncodeError) as e:
            logger.warning(f"Summary request failed in transport. Error: {e!r}")
            return NetworkFailure(operation="summary", detail=repr(e))

        if not response.is_success:
            logger.warning(
                f"Summary request for id {correlation_id} returned HTTP {response.status_code}"
            )
            return NoSummary()

        try:
            payload = AnswerPayload.model_validate(response.json())
        except (ValueError, ValidationError) as e:
            logger.warning(f"Summary response was malformed. Error: {e}")
            return NoSummary()

        if not payload.answer.strip():
            return NoSummary()
        return SummaryResult(text=payload.answer)

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self._base_url,
            timeout=self._timeout,
            transport=self._transport,
        )
