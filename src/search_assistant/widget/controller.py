"""Widget controller: wires user events to the query service and renderer."""

import logging
import time

from search_assistant.client.base import QueryService
from search_assistant.data import (
    DisplayEntry,
    EmptyQuery,
    NoSummary,
    Outcome,
    RelatedResult,
    SearchRequest,
    validate_query,
)
from search_assistant.render.entries import render_outcome
from search_assistant.session_log import SessionLog
from search_assistant.widget import state as transitions
from search_assistant.widget.state import WidgetState, WidgetStatus
from search_assistant.widget.view import ACTIVE_CLASS, WidgetView

logger = logging.getLogger(__name__)


class WidgetController:
    """Owns the widget's state and is the only writer of its results area.

    Flow of one submission:
    1. Clear every entry of the previous submission
    2. Validate the query; an empty one renders EmptyQuery without a request
    3. Fetch related articles and render them as soon as they arrive
    4. If a summary was asked for and articles were found, fetch the summary
       with the same response's correlation id and append it

    Each submission gets a sequence number. Results that arrive after a newer
    submission has started are dropped, so a slow earlier request can never
    overwrite a later one.

    Args:
        view: Element references built at mount time.
        service: Backend query service.
        trust_descriptions: Insert article descriptions as unescaped markup.
        session_log: Optional SessionLog recording each submission.
    """

    def __init__(
        self,
        view: WidgetView,
        service: QueryService,
        *,
        trust_descriptions: bool = False,
        session_log: SessionLog | None = None,
    ) -> None:
        self._view = view
        self._service = service
        self._trust_descriptions = trust_descriptions
        self._session_log = session_log
        self._state = WidgetState(is_open=view.is_open)
        self._entries: list[DisplayEntry] = []

    @property
    def state(self) -> WidgetState:
        return self._state

    @property
    def status(self) -> WidgetStatus:
        return self._state.status

    @property
    def entries(self) -> list[DisplayEntry]:
        """Entries currently shown in the results area."""
        return list(self._entries)

    def toggle(self) -> WidgetState:
        """Open or close the modal. Launcher and modal always flip together."""
        self._view.launcher_frame.toggle_class(ACTIVE_CLASS)
        self._view.modal.toggle_class(ACTIVE_CLASS)
        self._state = transitions.toggle(self._state)
        return self._state

    async def submit(self) -> list[DisplayEntry]:
        """Handle a click on the submit control.

        Returns:
            Entries produced by this submission. Empty if a newer submission
            superseded it before anything was displayed.

        Raises:
            InvalidTransitionError: If the widget is closed.
        """
        query = validate_query(self._view.input.value)
        toggle = self._view.summary_toggle
        request = SearchRequest(query=query, want_summary=bool(toggle and toggle.checked))

        self._state = transitions.submit(self._state, request.query)
        sequence = self._state.sequence
        self._clear()

        if self._session_log:
            self._session_log.start_submission(sequence, request)

        if not request.query:
            empty = self._display(sequence, EmptyQuery(), time.monotonic())
            self._finish(sequence, empty)
            return empty

        shown: list[DisplayEntry] = []
        try:
            t0 = time.monotonic()
            related = await self._service.fetch_related(
                request.query, want_summary=request.want_summary
            )
            shown = self._display(sequence, related, t0)
            if not transitions.is_current(self._state, sequence):
                return shown

            if request.want_summary and isinstance(related, RelatedResult):
                t0 = time.monotonic()
                summary: Outcome
                if related.correlation_id is None:
                    logger.warning(f"No correlation id returned for query: {request.query}")
                    summary = NoSummary()
                else:
                    summary = await self._service.fetch_summary(related.correlation_id)
                shown += self._display(sequence, summary, t0)
            return shown
        finally:
            self._finish(
                sequence, shown, discarded=not transitions.is_current(self._state, sequence)
            )

    async def handle_submit_click(self) -> list[DisplayEntry]:
        """Event handler for the submit control. Ignored while the widget is closed."""
        if not self._state.is_open:
            logger.debug("Ignoring submit while the widget is closed")
            return []
        return await self.submit()

    def _clear(self) -> None:
        for entry in self._entries:
            if entry.content.parent is self._view.results:
                self._view.results.remove(entry.content)
        self._entries = []

    def _display(self, sequence: int, outcome: Outcome, started: float) -> list[DisplayEntry]:
        """Render ``outcome`` into the results area if ``sequence`` is still current."""
        if self._session_log:
            self._session_log.log_outcome(sequence, outcome, time.monotonic() - started)

        if not transitions.is_current(self._state, sequence):
            logger.debug(
                f"Dropping {type(outcome).__name__} for submission {sequence}; "
                f"submission {self._state.sequence} is newer"
            )
            return []

        self._state = transitions.resolve(self._state, sequence)
        entries = render_outcome(outcome, trust_descriptions=self._trust_descriptions)
        for entry in entries:
            self._view.results.append(entry.content)
        self._entries.extend(entries)
        return entries

    def _finish(self, sequence: int, shown: list[DisplayEntry], *, discarded: bool = False) -> None:
        if self._session_log:
            self._session_log.finish_submission(
                sequence, entry_count=len(shown), discarded=discarded
            )
