"""
Domain-specific exception hierarchy.

All business-rule failures inherit from InsureClaimError so callers can
catch broadly or narrowly as needed.  Each exception carries structured
context in ``details`` for logging.  Services raise these before any
mutation; the API layer maps them to HTTP responses.
"""

from __future__ import annotations


class InsureClaimError(Exception):
    """Base exception for all domain errors."""

    def __init__(self, message: str, *, details: dict | None = None) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(message)


class NotFoundError(InsureClaimError):
    """The referenced entity does not exist."""

    def __init__(self, entity: str, entity_id: object, **kwargs) -> None:
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(f"{entity} with ID {entity_id} not found", **kwargs)


class ForbiddenError(InsureClaimError):
    """Ownership or role violation."""
    pass


class UnauthorizedError(InsureClaimError):
    """Credentials are missing, invalid or expired."""
    pass


class InvalidStateError(InsureClaimError):
    """A business rule rejected the request (wrong status, bad dates, ...)."""
    pass


class OutOfRangeError(InvalidStateError):
    """An amount or date falls outside the bounds allowed by the policy/claim."""
    pass


class IdentifierExhaustedError(InsureClaimError):
    """The yearly sequence for an identifier tag ran past its fixed width."""

    def __init__(self, tag: str, year: int, **kwargs) -> None:
        self.tag = tag
        self.year = year
        super().__init__(f"Identifier sequence {tag}-{year} is exhausted", **kwargs)
