"""Local view of the active candidate's applications."""

import logging

from dashboard.api.client import BackendClient
from dashboard.errors import DashboardError
from dashboard.schemas import Application
from dashboard.state import REFRESH, DashboardState, Outcome

logger = logging.getLogger(__name__)


class ApplicationCache:
    """Owns the cached application list; the backend is the source of truth.

    A refresh replaces the whole list. A failed refresh keeps the previous
    list and marks the cache as stale.
    """

    def __init__(self, client: BackendClient, state: DashboardState):
        self.client = client
        self.state = state
        self._applications: tuple[Application, ...] = ()
        self.email: str | None = None  # filter used for the cached list
        self.last_error: DashboardError | None = None

    @property
    def applications(self) -> tuple[Application, ...]:
        return self._applications

    @property
    def stale(self) -> bool:
        return self.last_error is not None

    def find(self, job_url: str) -> Application | None:
        for application in self._applications:
            if application.job_url == job_url:
                return application
        return None

    async def refresh(self, active_email: str | None = None) -> Outcome[tuple[Application, ...]]:
        """Reload applications, filtered by email when one is active."""
        email = (self.state.active_email if active_email is None else active_email) or None
        tag = self.state.begin(REFRESH)
        logger.info(f"[refresh#{tag}] Loading applications for {email or 'all applicants'}")

        try:
            fetched = await self.client.list_applications(email)
        except DashboardError as e:
            applied = self.state.finish(REFRESH, tag, "", e)
            if applied:
                self.last_error = e
                logger.warning(f"[refresh#{tag}] Refresh failed, keeping {len(self._applications)} cached: {e}")
            return Outcome(value=self._applications, error=e, stale=not applied)

        applications = tuple(fetched)
        if not self.state.finish(REFRESH, tag):
            logger.info(f"[refresh#{tag}] Superseded by refresh#{self.state.tracker.latest(REFRESH)}, discarded")
            return Outcome(value=applications, stale=True)

        self._applications = applications
        self.email = email
        self.last_error = None
        logger.info(f"[refresh#{tag}] Cached {len(applications)} applications")
        return Outcome(value=applications)
