from typing import Protocol

from search_assistant.data import NetworkFailure, NoResults, NoSummary, RelatedResult, SummaryResult


class QueryService(Protocol):
    """Interface to the backend answering the widget's questions.

    Implementations never raise for transport or server problems; every
    failure comes back as an outcome value.
    """

    async def fetch_related(
        self,
        query: str,
        *,
        want_summary: bool = False,
    ) -> RelatedResult | NoResults | NetworkFailure:
        """Look up articles related to a query.

        Args:
            query: Validated, non-empty query text.
            want_summary: Whether a summary will be requested afterwards.

        Returns:
            The related articles, or the reason there are none.
        """
        ...

    async def fetch_summary(
        self,
        correlation_id: str,
    ) -> SummaryResult | NoSummary | NetworkFailure:
        """Fetch the computer-generated summary for an earlier related lookup.

        Args:
            correlation_id: Identifier returned with the related articles.

        Returns:
            The summary, or the reason there is none.
        """
        ...
