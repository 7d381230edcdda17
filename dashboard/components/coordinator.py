"""Application coordinator: turns a picked listing into a tracked application."""

import logging

from dashboard.api.client import BackendClient
from dashboard.errors import DashboardError, MissingProfile, QueueFailed
from dashboard.schemas import ApplicationCreate, JobListing
from dashboard.state import QUEUE, DashboardState, Outcome

logger = logging.getLogger(__name__)

QUEUED_MESSAGE = "Application queued and cover letter generated!"
QUEUE_ERROR_MESSAGE = "Failed to create application"


class ApplicationCoordinator:
    """Queues applications for the active candidate.

    The new record is not pushed into the ApplicationCache; callers refresh
    the cache after a successful queue.
    """

    def __init__(self, client: BackendClient, state: DashboardState):
        self.client = client
        self.state = state

    async def queue(self, listing: JobListing, active_email: str | None = None) -> Outcome[None]:
        """Create an application for `listing` bound to the active email."""
        email = self.state.active_email if active_email is None else active_email
        if not email:
            error = MissingProfile()
            logger.warning(f"Cannot queue {listing.url}: no active profile")
            return Outcome(error=error, message=str(error))

        body = ApplicationCreate.from_listing(listing, email)
        tag = self.state.begin(QUEUE)
        logger.info(f"[queue#{tag}] Queuing {listing.url} for {email!r}")

        try:
            await self.client.create_application(body)
        except DashboardError as e:
            error = QueueFailed(e)
            self.state.finish(QUEUE, tag, QUEUE_ERROR_MESSAGE, error)
            logger.error(f"[queue#{tag}] {error}")
            return Outcome(error=error, message=QUEUE_ERROR_MESSAGE)

        self.state.finish(QUEUE, tag, QUEUED_MESSAGE)
        if self.state.picked is not None and self.state.picked.url == listing.url:
            self.state.picked = None
        logger.info(f"[queue#{tag}] Queued {listing.url}")
        return Outcome(message=QUEUED_MESSAGE)
