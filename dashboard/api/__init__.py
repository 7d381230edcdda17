"""HTTP access to the dashboard backend."""

from dashboard.api.client import BackendClient

__all__ = ["BackendClient"]
