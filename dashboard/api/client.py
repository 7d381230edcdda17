"""
Backend HTTP client.

The only module that talks to the backend. Every failure is raised as a
dashboard error:
- httpx request failures (connect, timeout, redirects) -> TransportError
- non-2xx responses and unreadable or undecodable bodies -> BackendError
"""

import logging
from typing import Any

import httpx
from pydantic import TypeAdapter
from pydantic import ValidationError as SchemaError

from dashboard.config import settings
from dashboard.errors import BackendError, TransportError
from dashboard.schemas import Application, ApplicationCreate, JobListing, Profile

logger = logging.getLogger(__name__)

PROFILE_PATH = "/api/profile"
SEARCH_PATH = "/api/search"
APPLICATIONS_PATH = "/api/applications"

# Use settings.request_timeout
DEFAULT_TIMEOUT: Any = object()

_listings = TypeAdapter(list[JobListing])
_applications = TypeAdapter(list[Application])


class BackendClient:
    """Async client for the dashboard backend API."""

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = DEFAULT_TIMEOUT,
        http: httpx.AsyncClient | None = None,
    ):
        self.base_url = (base_url or settings.backend_url).rstrip("/")
        self._owns_http = http is None
        self._http = http or httpx.AsyncClient(
            base_url=self.base_url,
            timeout=settings.request_timeout if timeout is DEFAULT_TIMEOUT else timeout,
            headers={"Accept": "application/json"},
        )

    async def __aenter__(self) -> "BackendClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the connection pool if this client created it."""
        if self._owns_http:
            await self._http.aclose()

    async def save_profile(self, profile: Profile) -> None:
        """Upsert the candidate profile."""
        await self._request("POST", PROFILE_PATH, json=profile.to_payload())

    async def search(self, query: str) -> list[JobListing]:
        """Run a free-text job search."""
        response = await self._request("GET", SEARCH_PATH, params={"q": query})
        return self._parse(response, _listings)

    async def create_application(self, body: ApplicationCreate) -> None:
        """Create an application; the backend generates the cover letter."""
        await self._request("POST", APPLICATIONS_PATH, json=body.model_dump())

    async def list_applications(self, email: str | None = None) -> list[Application]:
        """List applications, filtered by applicant email when given."""
        params = {"email": email} if email else None
        response = await self._request("GET", APPLICATIONS_PATH, params=params)
        return self._parse(response, _applications)

    async def _request(self, method: str, path: str, **kwargs: Any) -> httpx.Response:
        try:
            response = await self._http.request(method, path, **kwargs)
        except httpx.DecodingError as e:
            logger.warning(f"{method} {path} undecodable body: {e!r}")
            raise BackendError(f"Unreadable response body: {e}") from e
        except httpx.RequestError as e:
            # Connection failures, timeouts, redirect loops
            logger.warning(f"{method} {path} transport error: {e!r}")
            raise TransportError(f"Could not reach backend: {e}") from e

        if not response.is_success:
            logger.warning(f"{method} {path} -> HTTP {response.status_code}")
            raise BackendError(f"HTTP error {response.status_code}", status_code=response.status_code)

        logger.debug(f"{method} {path} -> HTTP {response.status_code}")
        return response

    @staticmethod
    def _parse(response: httpx.Response, adapter: TypeAdapter) -> list:
        try:
            return adapter.validate_python(response.json())
        except (ValueError, SchemaError) as e:
            # json.JSONDecodeError is a ValueError
            raise BackendError(f"Unreadable response body: {e}", status_code=response.status_code) from e
