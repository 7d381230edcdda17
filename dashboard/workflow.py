"""
Dashboard controller.

Wires the four components around one shared state and one backend client:
profile save -> job search -> pick/queue -> applications refresh.
"""

import logging

from dashboard.api.client import BackendClient
from dashboard.components import (
    ApplicationCache,
    ApplicationCoordinator,
    JobDiscoveryClient,
    ProfileManager,
    SearchOutcome,
)
from dashboard.config import Settings, settings as default_settings
from dashboard.schemas import Application, JobListing, Profile, ProfileForm
from dashboard.state import DashboardState, Outcome, RequestState

logger = logging.getLogger(__name__)


class Dashboard:
    """Top-level controller for one dashboard session.

    Usage:
        async with Dashboard() as dashboard:
            await dashboard.save_profile(form)
            outcome = await dashboard.search('site:acme.com careers')
            await dashboard.pick(outcome.listings[0])
    """

    def __init__(self, settings: Settings | None = None, client: BackendClient | None = None):
        settings = settings or default_settings
        self.client = client or BackendClient(settings.backend_url, settings.request_timeout)
        self.state = DashboardState()
        self.profile = ProfileManager(self.client, self.state)
        self.discovery = JobDiscoveryClient(self.client, self.state)
        self.coordinator = ApplicationCoordinator(self.client, self.state)
        self.cache = ApplicationCache(self.client, self.state)

    async def __aenter__(self) -> "Dashboard":
        await self.activate()
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.client.aclose()

    @property
    def active_email(self) -> str:
        return self.state.active_email

    @property
    def applications(self) -> tuple[Application, ...]:
        return self.cache.applications

    @property
    def status(self) -> dict[str, RequestState]:
        return dict(self.state.requests)

    async def activate(self) -> Outcome[tuple[Application, ...]]:
        """Initial load of the applications list."""
        return await self.cache.refresh()

    async def save_profile(self, form: ProfileForm | Profile) -> Outcome[str]:
        previous = self.state.active_email
        outcome = await self.profile.save(form)
        if outcome.ok and self.state.active_email != previous:
            logger.info(f"Active email changed to {self.state.active_email!r}, refreshing applications")
            await self.cache.refresh()
        return outcome

    async def search(self, query: str | None = None) -> SearchOutcome:
        return await self.discovery.search(query)

    async def pick(self, listing: JobListing) -> Outcome[None]:
        """Queue the picked listing and reconcile the applications list."""
        self.state.picked = listing
        outcome = await self.coordinator.queue(listing)
        if outcome.ok:
            self.discovery.discard(listing.url)
            await self.cache.refresh()
        return outcome

    async def refresh(self) -> Outcome[tuple[Application, ...]]:
        return await self.cache.refresh()
