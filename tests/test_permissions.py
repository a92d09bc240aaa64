"""Tests for the shared capability check."""

import pytest

from insureclaim.core.constants import UserRole
from insureclaim.core.errors import ForbiddenError
from insureclaim.core.permissions import Viewer, can_access, can_create_for, ensure_can_access


class TestCanAccess:
    @pytest.mark.parametrize(
        ("role", "viewer_id", "owner_id", "allowed"),
        [
            (UserRole.ADMIN, 1, 2, True),
            (UserRole.ADMIN, 1, 1, True),
            (UserRole.CUSTOMER, 3, 3, True),
            (UserRole.CUSTOMER, 3, 4, False),
            (UserRole.AGENT, 5, 5, True),
            (UserRole.AGENT, 5, 6, False),
        ],
    )
    def test_matrix(self, role, viewer_id, owner_id, allowed) -> None:
        assert can_access(viewer_id, role, owner_id) is allowed

    def test_plain_role_strings(self) -> None:
        assert can_access(1, "Admin", 2)
        assert not can_access(1, "Customer", 2)


class TestEnsureCanAccess:
    def test_raises_forbidden_with_context(self) -> None:
        with pytest.raises(ForbiddenError) as excinfo:
            ensure_can_access(Viewer(7, UserRole.CUSTOMER), 8, action="view this claim")

        assert "view this claim" in excinfo.value.message
        assert excinfo.value.details == {"viewer_id": 7, "owner_id": 8}

    def test_owner_passes(self) -> None:
        ensure_can_access(Viewer(7, UserRole.CUSTOMER), 7)


class TestCanCreateFor:
    def test_customers_only_for_themselves(self) -> None:
        assert can_create_for(1, UserRole.CUSTOMER, 1)
        assert not can_create_for(1, UserRole.CUSTOMER, 2)

    def test_agents_and_admins_for_anyone(self) -> None:
        assert can_create_for(1, UserRole.AGENT, 2)
        assert can_create_for(1, UserRole.ADMIN, 2)


class TestViewer:
    def test_is_admin(self) -> None:
        assert Viewer(1, "Admin").is_admin
        assert not Viewer(1, "Agent").is_admin
