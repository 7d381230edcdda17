"""Shared fixtures: an in-memory FastAPI stand-in for the dashboard backend."""

import httpx
import pytest
from fastapi import Body, FastAPI, Request
from fastapi.responses import JSONResponse

from dashboard.api.client import BackendClient
from dashboard.config import Settings
from dashboard.workflow import Dashboard

BASE_URL = "http://testserver"


class FakeBackend:
    """Records every request and serves profiles, searches and applications from memory."""

    def __init__(self):
        self.profiles: dict[str, dict] = {}
        self.search_results: dict[str, list[dict]] = {}
        self.applications: list[dict] = []
        self.requests: list[tuple[str, str, dict]] = []
        self.fail: dict[str, int] = {}  # route name -> status code to answer with
        self.app = self._build_app()

    def calls(self, method: str, path: str) -> list[dict]:
        return [data for m, p, data in self.requests if m == method and p == path]

    def _failure(self, route: str) -> JSONResponse | None:
        if route in self.fail:
            return JSONResponse(status_code=self.fail[route], content={"detail": "boom"})
        return None

    def _build_app(self) -> FastAPI:
        app = FastAPI(title="Fake dashboard backend")

        @app.post("/api/profile")
        def save_profile(payload: dict = Body(...)):
            self.requests.append(("POST", "/api/profile", payload))
            if failure := self._failure("profile"):
                return failure
            self.profiles[payload["email"]] = payload
            return {"ok": True}

        @app.get("/api/search")
        def search(q: str):
            self.requests.append(("GET", "/api/search", {"q": q}))
            if failure := self._failure("search"):
                return failure
            return self.search_results.get(q, [])

        @app.post("/api/applications", status_code=201)
        def create_application(payload: dict = Body(...)):
            self.requests.append(("POST", "/api/applications", payload))
            if failure := self._failure("create"):
                return failure
            company = payload.get("company") or "your company"
            record = {
                "id": len(self.applications) + 1,
                **payload,
                "status": "queued",
                "cover_letter": f"Dear hiring team at {company},\n\nI would love to join as {payload['job_title']}.",
            }
            self.applications.append(record)
            return record

        @app.get("/api/applications")
        def list_applications(request: Request, email: str | None = None):
            self.requests.append(("GET", "/api/applications", dict(request.query_params)))
            if failure := self._failure("list"):
                return failure
            if email:
                return [a for a in self.applications if a["applicant_email"] == email]
            return list(self.applications)

        return app

    def client(self) -> BackendClient:
        http = httpx.AsyncClient(transport=httpx.ASGITransport(app=self.app), base_url=BASE_URL)
        return BackendClient(base_url=BASE_URL, http=http)

    def dashboard(self) -> Dashboard:
        return Dashboard(Settings(backend_url=BASE_URL), client=self.client())


@pytest.fixture()
def backend() -> FakeBackend:
    return FakeBackend()


@pytest.fixture()
def mock_client():
    """Factory for a BackendClient over an httpx.MockTransport handler (sync or async)."""

    def make(handler) -> BackendClient:
        http = httpx.AsyncClient(transport=httpx.MockTransport(handler), base_url=BASE_URL)
        return BackendClient(base_url=BASE_URL, http=http)

    return make
