"""Domain exceptions raised by services and stores.

The error handler middleware maps each class onto its HTTP status.
"""

from __future__ import annotations


class SchoolPulseError(Exception):
    """Base class for all domain errors."""

    status_code: int = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(SchoolPulseError):
    """Input does not match the expected shape."""

    status_code = 400


class Unauthorized(SchoolPulseError):
    """Admin access code missing or wrong."""

    status_code = 401


class Forbidden(SchoolPulseError):
    """Action not allowed in the caller's current state (assessment cooldown)."""

    status_code = 403


class NotFound(SchoolPulseError):
    """An id-keyed lookup missed."""

    status_code = 404


class GenerationExhausted(SchoolPulseError):
    """No unique access code could be produced within the attempt budget."""

    status_code = 500
