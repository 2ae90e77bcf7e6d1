"""
Application exceptions.

Services raise these instead of HTTP errors so they stay usable outside
of FastAPI.  ``main.create_app`` registers handlers that turn them into
``{"error": ...}`` responses.
"""


class SightShareError(Exception):
    """Base class for errors raised by the SightShare services."""

    status_code = 500
    public_message = "Internal server error"


class ValidationError(SightShareError):
    """A required field is missing or empty."""

    status_code = 400
    public_message = "Missing required fields"

    def __init__(self, missing=None):
        self.missing = list(missing or [])
        detail = self.public_message
        if self.missing:
            detail = f"{detail}: {', '.join(self.missing)}"
        super().__init__(detail)


class StorageError(SightShareError):
    """The underlying SQLite database failed."""

    status_code = 500
    public_message = "Database error"
