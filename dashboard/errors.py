"""Error taxonomy for dashboard operations."""


class DashboardError(Exception):
    """Base class for all dashboard errors."""


class TransportError(DashboardError):
    """The backend could not be reached (connection refused, reset, DNS...)."""


class BackendError(DashboardError):
    """The backend answered with a non-2xx status or an unreadable body."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class ValidationError(DashboardError):
    """A local precondition failed before any request was sent."""


class MissingProfile(ValidationError):
    """No active email: the profile must be saved before queuing."""

    def __init__(self, message: str = "Save your profile first"):
        super().__init__(message)


class OperationFailed(DashboardError):
    """A remote operation failed; `cause` holds the transport or backend error."""

    operation = "operation"

    def __init__(self, cause: DashboardError):
        super().__init__(f"{self.operation} failed: {cause}")
        self.cause = cause

    @property
    def status_code(self) -> int | None:
        return getattr(self.cause, "status_code", None)


class SaveFailed(OperationFailed):
    operation = "save profile"


class QueueFailed(OperationFailed):
    operation = "queue application"
