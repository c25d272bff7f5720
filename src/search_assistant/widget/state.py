"""Interaction state machine for the widget.

Transitions are pure functions from one ``WidgetState`` to the next. The
controller holds the current state and applies them.

    Closed <-> Open-Idle        toggle
    Open-* -> Open-Pending      submit with a non-empty query
    Open-* -> Open-Displaying   submit with an empty query (no request)
    Open-Pending -> Open-Displaying   resolve, for the current submission only

Closing while a request is pending keeps the pending phase; the result is
still rendered, into the hidden modal.
"""

from dataclasses import dataclass, replace
from enum import StrEnum


class Phase(StrEnum):
    IDLE = "idle"
    PENDING = "pending"
    DISPLAYING = "displaying"


class WidgetStatus(StrEnum):
    """User-facing state of the widget."""

    CLOSED = "closed"
    OPEN_IDLE = "open-idle"
    OPEN_PENDING = "open-pending"
    OPEN_DISPLAYING = "open-displaying"


class InvalidTransitionError(ValueError):
    """Raised for a transition the state machine does not define."""


@dataclass(frozen=True)
class WidgetState:
    """Snapshot of the widget's interaction state.

    Args:
        is_open: Whether the modal is shown.
        phase: Progress of the latest submission.
        sequence: Number of the latest submission; 0 before the first one.
        last_query: Validated query of the latest submission.
    """

    is_open: bool = False
    phase: Phase = Phase.IDLE
    sequence: int = 0
    last_query: str | None = None

    @property
    def status(self) -> WidgetStatus:
        if not self.is_open:
            return WidgetStatus.CLOSED
        if self.phase is Phase.PENDING:
            return WidgetStatus.OPEN_PENDING
        if self.phase is Phase.DISPLAYING:
            return WidgetStatus.OPEN_DISPLAYING
        return WidgetStatus.OPEN_IDLE


def toggle(state: WidgetState) -> WidgetState:
    """Open a closed widget or close an open one."""
    return replace(state, is_open=not state.is_open)


def submit(state: WidgetState, query: str) -> WidgetState:
    """Start a new submission.

    An empty query goes straight to displaying, since no request is made.
    Any submission in flight is superseded by the new sequence number.

    Raises:
        InvalidTransitionError: If the widget is closed.
    """
    if not state.is_open:
        raise InvalidTransitionError("Cannot submit a query while the widget is closed.")
    phase = Phase.PENDING if query else Phase.DISPLAYING
    return replace(state, phase=phase, sequence=state.sequence + 1, last_query=query)


def is_current(state: WidgetState, sequence: int) -> bool:
    """Whether ``sequence`` identifies the latest submission."""
    return sequence == state.sequence


def resolve(state: WidgetState, sequence: int) -> WidgetState:
    """Mark the submission ``sequence`` as displaying its results.

    Stale resolutions leave the state unchanged.
    """
    if not is_current(state, sequence):
        return state
    return replace(state, phase=Phase.DISPLAYING)
