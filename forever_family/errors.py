"""
Error types raised by handlers and rendered as ``{"error": ...}`` bodies.
"""

from __future__ import annotations


class ServiceError(Exception):
    status_code = 500
    default_message = "Internal server error."

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(ServiceError):
    status_code = 400
    default_message = "Required fields missing."


class AuthenticationError(ServiceError):
    status_code = 401
    default_message = "Invalid access code. Check your welcome email."


class AuthorizationError(ServiceError):
    status_code = 403
    default_message = "Forbidden."


class NotFoundError(ServiceError):
    status_code = 404
    default_message = "Not found."
