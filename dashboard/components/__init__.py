"""
Dashboard components.

- profile: ProfileManager, saves the profile and publishes the active email
- discovery: JobDiscoveryClient, runs searches and holds the current results
- coordinator: ApplicationCoordinator, turns a listing into an application
- cache: ApplicationCache, the local view of the candidate's applications
"""

from dashboard.components.cache import ApplicationCache
from dashboard.components.coordinator import ApplicationCoordinator
from dashboard.components.discovery import JobDiscoveryClient, ListingSequence, SearchKind, SearchOutcome
from dashboard.components.profile import ProfileManager

__all__ = [
    "ApplicationCache",
    "ApplicationCoordinator",
    "JobDiscoveryClient",
    "ListingSequence",
    "ProfileManager",
    "SearchKind",
    "SearchOutcome",
]
