"""
Application errors.

Services raise these; a single set of handlers in app.main turns them into
flat JSON responses of the form {"message": ...}.
"""


class AppError(Exception):
    """Base error carrying the HTTP status it maps to."""

    status_code: int = 500

    def __init__(self, message: str, status_code: int = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class CreationError(AppError):
    """Uniqueness collision while creating a document."""
    status_code = 400


class AuthError(AppError):
    status_code = 401


class ForbiddenError(AppError):
    status_code = 403


class NotFoundError(AppError):
    status_code = 404


class ConflictError(AppError):
    """Uniqueness collision while updating a document."""
    status_code = 409


class UnexpectedError(AppError):
    """Store or internal failure; the client only sees a generic message."""
    status_code = 500

    def __init__(self, message: str = "Internal Server Error"):
        super().__init__(message)
