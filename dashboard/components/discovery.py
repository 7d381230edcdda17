"""Job discovery: free-text search against the backend."""

from __future__ import annotations

import enum
import logging
from collections import deque
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

from dashboard.api.client import BackendClient
from dashboard.errors import DashboardError
from dashboard.schemas import JobListing
from dashboard.state import SEARCH, DashboardState

logger = logging.getLogger(__name__)

DEFAULT_QUERY = '"careers" "apply" "remote" software engineer site:company.com'


class SearchKind(str, enum.Enum):
    FOUND = "found"
    EMPTY = "empty"
    FAILED = "failed"


@dataclass
class SearchOutcome:
    """Result of one search. `listings` is empty for EMPTY and FAILED."""

    kind: SearchKind
    query: str
    listings: list[JobListing] = field(default_factory=list)
    error: DashboardError | None = None
    stale: bool = False

    @property
    def ok(self) -> bool:
        return self.kind is not SearchKind.FAILED

    @property
    def reason(self) -> str:
        return str(self.error) if self.error else ""


class ListingSequence(Iterator[JobListing]):
    """Single-pass sequence of listings for one search.

    Iterating consumes the listings; run a new search to get them again.
    """

    def __init__(self, listings: Iterable[JobListing] = ()):
        self._pending: deque[JobListing] = deque(listings)

    def __next__(self) -> JobListing:
        if not self._pending:
            raise StopIteration
        return self._pending.popleft()

    def __len__(self) -> int:
        return len(self._pending)

    def discard(self, url: str) -> bool:
        """Drop an unread listing by url. Returns True if one was dropped."""
        for listing in self._pending:
            if listing.url == url:
                self._pending.remove(listing)
                return True
        return False


class JobDiscoveryClient:
    """Runs searches; each search replaces the held results."""

    def __init__(self, client: BackendClient, state: DashboardState):
        self.client = client
        self.state = state
        self.query = DEFAULT_QUERY
        self._results = ListingSequence()

    @property
    def results(self) -> ListingSequence:
        return self._results

    @property
    def loading(self) -> bool:
        return self.state.request(SEARCH).loading

    async def search(self, query: str | None = None) -> SearchOutcome:
        """Search for `query` (verbatim) and replace the held results."""
        if query is not None:
            self.query = query
        query = self.query
        tag = self.state.begin(SEARCH)
        logger.info(f"[search#{tag}] Searching: {query}")

        try:
            found = await self.client.search(query)
        except DashboardError as e:
            outcome = SearchOutcome(kind=SearchKind.FAILED, query=query, error=e)
            if self.state.finish(SEARCH, tag, "Search failed", e):
                self._results = ListingSequence()
                logger.warning(f"[search#{tag}] Search failed: {e}")
            else:
                outcome.stale = True
                logger.info(f"[search#{tag}] Stale failure ignored")
            return outcome

        listings = list(found)
        sequence = ListingSequence(listings)
        kind = SearchKind.FOUND if listings else SearchKind.EMPTY
        outcome = SearchOutcome(kind=kind, query=query, listings=listings)

        if self.state.finish(SEARCH, tag, f"{len(listings)} results"):
            self._results = sequence
            logger.info(f"[search#{tag}] Found {len(listings)} results")
        else:
            outcome.stale = True
            logger.info(f"[search#{tag}] Superseded by search#{self.state.tracker.latest(SEARCH)}, discarded")
        return outcome

    def discard(self, url: str) -> bool:
        """Remove a queued listing from the held results."""
        return self._results.discard(url)
