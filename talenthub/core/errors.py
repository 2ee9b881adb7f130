"""
Domain errors raised by services and rendered at the API boundary as
{"success": false, "error": ...}.
"""


class TalentHubError(Exception):
    """Base application error."""

    status_code = 500

    def __init__(self, message: str = "Internal server error", status_code: int | None = None):
        self.message = message
        if status_code is not None:
            self.status_code = status_code
        super().__init__(self.message)


class NotFoundError(TalentHubError):
    """Referenced job, application or assessment does not exist."""

    status_code = 404

    def __init__(self, message: str = "Resource not found"):
        super().__init__(message)


class UnauthorizedError(TalentHubError):
    """Caller identity does not own the resource."""

    status_code = 403

    def __init__(self, message: str = "Not allowed to access this resource"):
        super().__init__(message)


class InvalidStateError(TalentHubError):
    """Mutation attempted on a terminal assessment."""

    status_code = 409

    def __init__(self, message: str = "Invalid state for this operation"):
        super().__init__(message)


class AssessmentExpiredError(InvalidStateError):
    status_code = 410

    def __init__(self, message: str = "Assessment has expired"):
        super().__init__(message)


class UpstreamFailureError(TalentHubError):
    """Persistent store or e-mail sender call failed."""

    status_code = 502

    def __init__(self, message: str = "Upstream service failed"):
        super().__init__(message)
