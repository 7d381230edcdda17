"""Profile setup: saves the candidate profile and establishes the active email."""

import logging

from dashboard.api.client import BackendClient
from dashboard.errors import DashboardError, SaveFailed
from dashboard.schemas import Profile, ProfileForm
from dashboard.state import SAVE, DashboardState, Outcome

logger = logging.getLogger(__name__)

SAVED_MESSAGE = "Saved!"
SAVE_ERROR_MESSAGE = "Error saving profile"


class ProfileManager:
    """Submits the profile. The only writer of the active email."""

    def __init__(self, client: BackendClient, state: DashboardState):
        self.client = client
        self.state = state

    async def save(self, form: ProfileForm | Profile) -> Outcome[str]:
        """Upsert the profile; on success the saved email becomes active."""
        profile = form.to_profile() if isinstance(form, ProfileForm) else form
        tag = self.state.begin(SAVE)
        logger.info(f"[save#{tag}] Saving profile for {profile.email!r}")

        try:
            await self.client.save_profile(profile)
        except DashboardError as e:
            error = SaveFailed(e)
            applied = self.state.finish(SAVE, tag, SAVE_ERROR_MESSAGE, error)
            logger.error(f"[save#{tag}] {error}")
            return Outcome(error=error, message=SAVE_ERROR_MESSAGE, stale=not applied)

        applied = self.state.finish(SAVE, tag, SAVED_MESSAGE)
        if applied:
            self.state.publish_active_email(profile.email)
        else:
            logger.info(f"[save#{tag}] Superseded by save#{self.state.tracker.latest(SAVE)}, not applied")
        return Outcome(value=profile.email, message=SAVED_MESSAGE, stale=not applied)
