"""Domain error taxonomy.

Use cases and adapters raise these; routers translate them into HTTP
status codes.  Library exceptions (elasticsearch, SQLAlchemy) never
cross the infrastructure boundary unwrapped.
"""

from __future__ import annotations


class DomainError(Exception):
    """Base class for every error raised on purpose by this service."""


class InvalidInputError(DomainError):
    """The caller supplied input that violates a request contract.

    Maps to a 4xx response.  Raised before any backend is contacted.
    """


class BackendError(DomainError):
    """A search backend or persistent store call failed."""

    def __init__(self, backend: str, message: str) -> None:
        super().__init__(f"{backend}: {message}")
        self.backend = backend


class BackendUnavailableError(BackendError):
    """The backend could not be reached at all (refused, timed out)."""


__all__ = [
    "DomainError",
    "InvalidInputError",
    "BackendError",
    "BackendUnavailableError",
]
