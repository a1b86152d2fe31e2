from typing import Any, Optional


class AppError(Exception):
    """Base for errors that map onto an HTTP status and a stable error code."""

    status: int = 500
    code: str = "server_error"

    def __init__(self, message: str, details: Optional[Any] = None):
        super().__init__(message)
        self.message = message
        self.details = details

    def to_body(self) -> dict:
        return {"ok": False, "error": {"code": self.code, "message": self.message, "details": self.details}}


class ValidationError(AppError):
    status = 400
    code = "invalid_input"


class AuthError(AppError):
    status = 401
    code = "unauthorized"


class NotFoundError(AppError):
    status = 404
    code = "not_found"


class ConflictError(AppError):
    status = 409
    code = "conflict"


class ServerError(AppError):
    status = 500
    code = "server_error"
