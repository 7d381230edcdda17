"""
Shared dashboard state.

One DashboardState is created per session and handed by reference to every
component. It holds:
- the active email (written only by ProfileManager, read by everyone else)
- the listing currently picked for queuing
- one RequestState per operation kind (idle/loading/success/error)
- the sequence tags used to drop responses that resolved out of order
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Generic, TypeVar

from dashboard.errors import DashboardError
from dashboard.schemas import JobListing

T = TypeVar("T")

# Operation kinds
SAVE = "save"
SEARCH = "search"
QUEUE = "queue"
REFRESH = "refresh"


class RequestStatus(str, enum.Enum):
    IDLE = "idle"
    LOADING = "loading"
    SUCCESS = "success"
    ERROR = "error"


@dataclass
class RequestState:
    """Lifecycle of the latest request of one operation kind."""

    status: RequestStatus = RequestStatus.IDLE
    message: str = ""
    error: DashboardError | None = None

    @property
    def loading(self) -> bool:
        return self.status is RequestStatus.LOADING


@dataclass
class Outcome(Generic[T]):
    """Result of a component operation: a value or an error, plus the status message."""

    value: T | None = None
    error: DashboardError | None = None
    message: str = ""
    stale: bool = False  # resolved after a newer request of the same kind

    @property
    def ok(self) -> bool:
        return self.error is None


class RequestTracker:
    """Issues monotonically increasing tags per operation kind."""

    def __init__(self):
        self._issued: dict[str, int] = {}

    def issue(self, kind: str) -> int:
        tag = self._issued.get(kind, 0) + 1
        self._issued[kind] = tag
        return tag

    def is_latest(self, kind: str, tag: int) -> bool:
        return self._issued.get(kind, 0) == tag

    def latest(self, kind: str) -> int:
        return self._issued.get(kind, 0)


@dataclass
class DashboardState:
    """Explicit state shared by the dashboard components."""

    _active_email: str = ""
    picked: JobListing | None = None
    requests: dict[str, RequestState] = field(default_factory=dict)
    tracker: RequestTracker = field(default_factory=RequestTracker)

    @property
    def active_email(self) -> str:
        return self._active_email

    def publish_active_email(self, email: str) -> bool:
        """Set the active email. Only ProfileManager calls this.

        Returns True if the value changed.
        """
        changed = email != self._active_email
        self._active_email = email
        return changed

    def request(self, kind: str) -> RequestState:
        if kind not in self.requests:
            self.requests[kind] = RequestState()
        return self.requests[kind]

    def begin(self, kind: str) -> int:
        """Mark `kind` as loading and return the tag of the new request."""
        state = self.request(kind)
        state.status = RequestStatus.LOADING
        state.message = ""
        state.error = None
        return self.tracker.issue(kind)

    def finish(self, kind: str, tag: int, message: str = "", error: DashboardError | None = None) -> bool:
        """Record the result of request `tag`, unless a newer one was issued.

        Returns False when the response is stale and was not applied.
        """
        if not self.tracker.is_latest(kind, tag):
            return False
        state = self.request(kind)
        state.status = RequestStatus.ERROR if error is not None else RequestStatus.SUCCESS
        state.message = message
        state.error = error
        return True
