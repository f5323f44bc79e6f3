"""Exception types shared by the API routes and tools."""


class ValidationFailure(Exception):
    """Missing or invalid client input (400)."""

    status_code = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidUpload(ValidationFailure):
    """Uploaded CV rejected before storage."""


class UpstreamError(Exception):
    """The job directory could not be reached or returned an unusable body."""
