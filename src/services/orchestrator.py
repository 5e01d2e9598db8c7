"""Single-flight analysis session.

``AnalysisSession`` holds the UI state as one explicit status plus the
selected file, the report and the error message. Each analysis gets a
request token from ``begin()``; a result is applied only if its token is
still the active one, so a response that arrives after ``reset()`` or a
new file selection is dropped instead of overwriting newer state.

Usage::

    from src.services.orchestrator import AnalysisSession, run_analysis

    session = AnalysisSession()
    session.select_file("dealer.mp3", "audio/mpeg", data)
    await run_analysis(session, AnalysisClient())
"""

import logging
from dataclasses import dataclass

from src.core.exceptions import (
    AnalysisInProgressError,
    AnalyzerError,
    NoFileSelectedError,
)
from src.core.models import AnalysisStatus, ReportData
from src.services.analysis import AnalysisClient
from src.services.audio import encode_audio

logger = logging.getLogger(__name__)

UNEXPECTED_ERROR_MESSAGE = "An unexpected error occurred."

_TRANSITIONS: dict[AnalysisStatus, frozenset[AnalysisStatus]] = {
    AnalysisStatus.idle: frozenset({AnalysisStatus.selecting}),
    AnalysisStatus.selecting: frozenset({AnalysisStatus.selecting, AnalysisStatus.processing}),
    AnalysisStatus.processing: frozenset({AnalysisStatus.showing_report, AnalysisStatus.error}),
    AnalysisStatus.showing_report: frozenset({AnalysisStatus.selecting}),
    AnalysisStatus.error: frozenset({AnalysisStatus.selecting, AnalysisStatus.processing}),
}


@dataclass(frozen=True)
class SelectedFile:
    """The audio file the user picked, as uploaded."""

    name: str
    mime_type: str | None
    data: bytes

    @property
    def size_mb(self) -> float:
        return len(self.data) / 1024 / 1024


class AnalysisSession:
    """State machine for one user's analysis flow.

    idle -> selecting -> processing -> showing_report | error.
    ``reset()`` returns to idle from anywhere.
    """

    def __init__(self) -> None:
        self.status = AnalysisStatus.idle
        self.selected_file: SelectedFile | None = None
        self.report: ReportData | None = None
        self.error: str | None = None
        self._generation = 0
        self._active_token: int | None = None

    @property
    def is_processing(self) -> bool:
        return self.status == AnalysisStatus.processing

    @property
    def active_token(self) -> int | None:
        return self._active_token

    def _transition(self, target: AnalysisStatus) -> None:
        if target not in _TRANSITIONS[self.status]:
            if self.status == AnalysisStatus.processing:
                raise AnalysisInProgressError()
            raise ValueError(f"Invalid transition {self.status} -> {target}")
        logger.debug("Session %s -> %s", self.status, target)
        self.status = target

    def select_file(self, name: str, mime_type: str | None, data: bytes) -> None:
        """Choose a new file, clearing any previous report or error."""
        self._transition(AnalysisStatus.selecting)
        self.selected_file = SelectedFile(name=name, mime_type=mime_type, data=data)
        self.report = None
        self.error = None

    def begin(self) -> int:
        """Start an analysis and return its request token.

        Raises:
            AnalysisInProgressError: If a request is already in flight.
            NoFileSelectedError: If no file has been selected.
        """
        if self.status == AnalysisStatus.processing:
            raise AnalysisInProgressError()
        if self.selected_file is None:
            raise NoFileSelectedError()
        self._transition(AnalysisStatus.processing)
        self._generation += 1
        self._active_token = self._generation
        self.report = None
        self.error = None
        return self._active_token

    def _is_current(self, token: int) -> bool:
        if token != self._active_token or self.status != AnalysisStatus.processing:
            logger.info("Ignoring stale result for request %s", token)
            return False
        return True

    def complete(self, token: int, report: ReportData) -> bool:
        """Apply a finished report if ``token`` is still active."""
        if not self._is_current(token):
            return False
        self._transition(AnalysisStatus.showing_report)
        self._active_token = None
        self.report = report
        return True

    def fail(self, token: int, message: str) -> bool:
        """Record an error if ``token`` is still active; drops any partial report."""
        if not self._is_current(token):
            return False
        self._transition(AnalysisStatus.error)
        self._active_token = None
        self.report = None
        self.error = message
        return True

    def reset(self) -> None:
        """Return to idle. Any in-flight request becomes stale."""
        if self._active_token is not None:
            logger.info("Reset while request %s in flight; its result will be ignored",
                        self._active_token)
        self._generation += 1
        self._active_token = None
        self.status = AnalysisStatus.idle
        self.selected_file = None
        self.report = None
        self.error = None


async def run_analysis(session: AnalysisSession, client: AnalysisClient) -> bool:
    """Run one analysis for the session's selected file.

    Reads and encodes the file, calls the model once and applies the report
    or a single human-readable error message. No retry.

    Returns:
        True if the outcome (report or error) was applied to the session,
        False if the session moved on before the request finished.

    Raises:
        AnalysisInProgressError: If another analysis is already running.
        NoFileSelectedError: If no file has been selected.
    """
    token = session.begin()
    selected = session.selected_file
    try:
        payload = encode_audio(selected.data, selected.mime_type, selected.name)
        report = await client.analyze(payload)
    except AnalyzerError as exc:
        logger.warning("Analysis failed [%s]: %s", exc.code, exc.detail)
        return session.fail(token, exc.detail)
    except Exception:
        logger.exception("Unexpected error while analyzing %s", selected.name)
        return session.fail(token, UNEXPECTED_ERROR_MESSAGE)
    return session.complete(token, report)
