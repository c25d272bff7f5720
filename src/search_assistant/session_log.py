"""Session logger for recording widget submissions to JSON files."""

import dataclasses
from datetime import UTC, datetime
from pathlib import Path
from typing import Any

from pydantic import BaseModel

from search_assistant.data import (
    NetworkFailure,
    Outcome,
    RelatedResult,
    SearchRequest,
    SummaryResult,
)


class OutcomeRecord(BaseModel):
    """Record of one outcome produced during a submission."""

    kind: str
    detail: dict[str, Any] | None = None
    timestamp: str = ""
    duration_seconds: float = 0.0


class SubmissionRecord(BaseModel):
    """Record of a complete submission."""

    sequence: int
    query: str
    want_summary: bool
    started_at: str
    completed_at: str | None = None
    outcomes: list[OutcomeRecord] = []
    entry_count: int = 0
    discarded: bool = False


def _describe(outcome: Outcome) -> dict[str, Any] | None:
    """Summarize an outcome for the log.

    Article lists are reduced to titles and URLs; failure details are kept
    in full since they are only meant for operators.
    """
    if isinstance(outcome, RelatedResult):
        return {
            "correlation_id": outcome.correlation_id,
            "articles": [{"title": a.title, "url": a.url} for a in outcome.articles],
        }
    if isinstance(outcome, SummaryResult):
        return {"text": outcome.text}
    if isinstance(outcome, NetworkFailure):
        return dataclasses.asdict(outcome)
    return None


class SessionLog:
    """Accumulates submission records and writes one JSON file per submission.

    When ``enabled=False``, all methods are no-ops.

    Args:
        log_dir: Directory to write JSON log files.
        enabled: If False, all methods become no-ops.
    """

    def __init__(self, log_dir: Path, *, enabled: bool = True) -> None:
        self._log_dir = log_dir
        self._enabled = enabled
        self._records: dict[int, SubmissionRecord] = {}
        self._last_log_path: Path | None = None

    @property
    def enabled(self) -> bool:
        """Whether logging is active."""
        return self._enabled

    @property
    def last_log_path(self) -> Path | None:
        """Path to the last written log file, or None."""
        return self._last_log_path

    def start_submission(self, sequence: int, request: SearchRequest) -> None:
        """Open a record for a new submission.

        Args:
            sequence: Sequence number the controller assigned.
            request: The submitted request.
        """
        if not self._enabled:
            return

        self._records[sequence] = SubmissionRecord(
            sequence=sequence,
            query=request.query,
            want_summary=request.want_summary,
            started_at=datetime.now(tz=UTC).isoformat(),
        )

    def log_outcome(self, sequence: int, outcome: Outcome, duration_seconds: float) -> None:
        """Append an outcome to an open submission record.

        Args:
            sequence: Sequence number of the submission.
            outcome: The outcome received.
            duration_seconds: Wall-clock time spent waiting for it.
        """
        record = self._records.get(sequence)
        if not self._enabled or record is None:
            return

        record.outcomes.append(
            OutcomeRecord(
                kind=type(outcome).__name__,
                detail=_describe(outcome),
                timestamp=datetime.now(tz=UTC).isoformat(),
                duration_seconds=round(duration_seconds, 4),
            )
        )

    def finish_submission(
        self,
        sequence: int,
        *,
        entry_count: int,
        discarded: bool = False,
    ) -> Path | None:
        """Close a submission record and write it to a JSON file.

        Args:
            sequence: Sequence number of the submission.
            entry_count: Number of display entries it produced.
            discarded: True if a newer submission superseded it.

        Returns:
            Path to the written JSON file, or None if logging is disabled.
        """
        record = self._records.pop(sequence, None)
        if not self._enabled or record is None:
            return None

        record.completed_at = datetime.now(tz=UTC).isoformat()
        record.entry_count = entry_count
        record.discarded = discarded

        self._log_dir.mkdir(parents=True, exist_ok=True)

        # submission_2026-02-12T14-30-00_3.json (colons → dashes)
        ts = record.started_at.replace(":", "-")
        ts = ts.split(".")[0].split("+")[0]
        filepath = self._log_dir / f"submission_{ts}_{sequence}.json"

        filepath.write_text(record.model_dump_json(indent=2))
        self._last_log_path = filepath
        return filepath
