"""
Capability checks shared by every service.

A viewer is identified by (user id, role).  Admins may act on any
resource; everyone else only on resources they own.
"""

from __future__ import annotations

from typing import NamedTuple

from insureclaim.core.constants import UserRole
from insureclaim.core.errors import ForbiddenError


class Viewer(NamedTuple):
    """The authenticated caller, as seen by the services."""

    user_id: int
    role: str

    @classmethod
    def of(cls, user) -> Viewer:
        return cls(user_id=user.id, role=user.role)

    @property
    def is_admin(self) -> bool:
        return is_admin(self.role)


def can_access(viewer_id: int, viewer_role: str, owner_id: int) -> bool:
    """Return True when the viewer may read or act on a resource owned by ``owner_id``."""
    return viewer_role == UserRole.ADMIN or viewer_id == owner_id


def ensure_can_access(viewer: Viewer, owner_id: int, *, action: str = "access this resource") -> None:
    if not can_access(viewer.user_id, viewer.role, owner_id):
        raise ForbiddenError(
            f"You are not allowed to {action}",
            details={"viewer_id": viewer.user_id, "owner_id": owner_id},
        )


def can_create_for(viewer_id: int, viewer_role: str, owner_id: int) -> bool:
    """Customers may only open policies for themselves; agents and admins for anyone."""
    return viewer_role != UserRole.CUSTOMER or viewer_id == owner_id


def is_admin(viewer_role: str) -> bool:
    return viewer_role == UserRole.ADMIN
