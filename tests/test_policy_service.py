"""Service-level tests for the policy lifecycle."""

from datetime import date, timedelta
from decimal import Decimal

import pytest

from insureclaim.core.constants import PolicyStatus, PolicyType
from insureclaim.core.errors import ForbiddenError, InvalidStateError, NotFoundError
from insureclaim.core.permissions import Viewer
from insureclaim.services import policies as policy_service
from insureclaim.services.premium import add_months


class TestCreatePolicy:
    async def test_auto_policy_scenario(self, auto_policy, customer, policy_start) -> None:
        assert auto_policy.premium_amount == Decimal("3800.00")
        assert auto_policy.end_date == add_months(policy_start, 12)
        assert auto_policy.status == PolicyStatus.ACTIVE
        assert auto_policy.user_id == customer.id
        assert auto_policy.policy_number.startswith("POL-")
        assert auto_policy.policy_number.endswith("-000001")

    async def test_numbers_are_sequential(self, db, customer, policy_start) -> None:
        numbers = []
        for _ in range(3):
            policy = await policy_service.create_policy(
                db,
                owner_id=customer.id,
                policy_type=PolicyType.LIFE,
                coverage_amount=Decimal("10000"),
                start_date=policy_start,
                duration_months=6,
            )
            numbers.append(policy.policy_number)

        suffixes = [int(n.rsplit("-", 1)[1]) for n in numbers]
        assert suffixes == [1, 2, 3]

    async def test_unknown_owner(self, db, policy_start) -> None:
        with pytest.raises(NotFoundError):
            await policy_service.create_policy(
                db,
                owner_id=999,
                policy_type=PolicyType.AUTO,
                coverage_amount=Decimal("5000"),
                start_date=policy_start,
                duration_months=12,
            )

    async def test_customer_cannot_create_for_someone_else(self, db, customer, other_customer, policy_start) -> None:
        with pytest.raises(ForbiddenError):
            await policy_service.create_policy(
                db,
                owner_id=other_customer.id,
                policy_type=PolicyType.AUTO,
                coverage_amount=Decimal("5000"),
                start_date=policy_start,
                duration_months=12,
                viewer=Viewer.of(customer),
            )

    async def test_agent_can_create_for_customer(self, db, agent, customer, policy_start) -> None:
        policy = await policy_service.create_policy(
            db,
            owner_id=customer.id,
            policy_type=PolicyType.PROPERTY,
            coverage_amount=Decimal("2000000"),
            start_date=policy_start,
            duration_months=36,
            viewer=Viewer.of(agent),
        )
        assert policy.user_id == customer.id
        assert policy.premium_amount == Decimal("7200.00")


class TestUpdatePolicy:
    async def test_coverage_change_recomputes_premium(self, db, auto_policy) -> None:
        updated = await policy_service.update_policy(db, auto_policy.id, coverage_amount=Decimal("1000000"))

        assert updated.coverage_amount == Decimal("1000000")
        assert updated.premium_amount == Decimal("7600.00")
        assert updated.updated_at is not None

    async def test_untouched_fields_are_kept(self, db, auto_policy) -> None:
        original_end = auto_policy.end_date
        updated = await policy_service.update_policy(db, auto_policy.id, status=PolicyStatus.SUSPENDED)

        assert updated.status == PolicyStatus.SUSPENDED
        assert updated.end_date == original_end
        assert updated.premium_amount == Decimal("3800.00")

    async def test_premium_uses_duration_before_end_date_change(self, db, auto_policy, policy_start) -> None:
        # 12-month policy shortened to 3 months while coverage doubles: the 12-month discount still applies
        new_end = add_months(policy_start, 3)
        updated = await policy_service.update_policy(
            db, auto_policy.id, coverage_amount=Decimal("1000000"), end_date=new_end
        )

        assert updated.end_date == new_end
        assert updated.premium_amount == Decimal("7600.00")

    async def test_end_date_must_follow_start(self, db, auto_policy, policy_start) -> None:
        with pytest.raises(InvalidStateError):
            await policy_service.update_policy(db, auto_policy.id, end_date=policy_start)
        assert auto_policy.end_date > policy_start

    async def test_missing_policy(self, db) -> None:
        with pytest.raises(NotFoundError):
            await policy_service.update_policy(db, 404, status=PolicyStatus.ACTIVE)


class TestCancelPolicy:
    async def test_cancel_keeps_row(self, db, auto_policy, admin) -> None:
        await policy_service.cancel_policy(db, auto_policy.id)

        reloaded = await policy_service.get_policy(db, auto_policy.id, Viewer.of(admin))
        assert reloaded.status == PolicyStatus.CANCELLED

    async def test_cancel_missing(self, db) -> None:
        with pytest.raises(NotFoundError):
            await policy_service.cancel_policy(db, 12345)


class TestReadPolicies:
    async def test_list_is_role_filtered(self, db, auto_policy, customer, other_customer, admin, policy_start) -> None:
        await policy_service.create_policy(
            db,
            owner_id=other_customer.id,
            policy_type=PolicyType.HEALTH,
            coverage_amount=Decimal("80000"),
            start_date=policy_start,
            duration_months=12,
        )

        own = await policy_service.list_policies(db, Viewer.of(customer))
        everything = await policy_service.list_policies(db, Viewer.of(admin))

        assert [p.id for p in own] == [auto_policy.id]
        assert len(everything) == 2

    async def test_list_newest_first(self, db, customer, policy_start) -> None:
        first = await policy_service.create_policy(
            db, owner_id=customer.id, policy_type=PolicyType.LIFE,
            coverage_amount=Decimal("5000"), start_date=policy_start, duration_months=1,
        )
        second = await policy_service.create_policy(
            db, owner_id=customer.id, policy_type=PolicyType.LIFE,
            coverage_amount=Decimal("5000"), start_date=policy_start, duration_months=1,
        )

        listed = await policy_service.list_policies(db, Viewer.of(customer))
        assert [p.id for p in listed] == [second.id, first.id]

    async def test_other_customer_cannot_read(self, db, auto_policy, other_customer) -> None:
        with pytest.raises(ForbiddenError):
            await policy_service.get_policy(db, auto_policy.id, Viewer.of(other_customer))

    async def test_user_policies_need_self_or_admin(self, db, auto_policy, customer, other_customer, admin) -> None:
        assert len(await policy_service.list_user_policies(db, customer.id, Viewer.of(customer))) == 1
        assert len(await policy_service.list_user_policies(db, customer.id, Viewer.of(admin))) == 1
        with pytest.raises(ForbiddenError):
            await policy_service.list_user_policies(db, customer.id, Viewer.of(other_customer))


class TestExpireLapsedPolicies:
    async def test_only_lapsed_active_policies_expire(self, db, customer) -> None:
        today = date(2025, 6, 15)
        lapsed = await policy_service.create_policy(
            db, owner_id=customer.id, policy_type=PolicyType.AUTO,
            coverage_amount=Decimal("20000"), start_date=date(2024, 1, 1), duration_months=12,
        )
        current = await policy_service.create_policy(
            db, owner_id=customer.id, policy_type=PolicyType.AUTO,
            coverage_amount=Decimal("20000"), start_date=today - timedelta(days=30), duration_months=12,
        )
        cancelled = await policy_service.create_policy(
            db, owner_id=customer.id, policy_type=PolicyType.AUTO,
            coverage_amount=Decimal("20000"), start_date=date(2023, 1, 1), duration_months=6,
        )
        await policy_service.cancel_policy(db, cancelled.id)

        assert await policy_service.expire_lapsed_policies(db, today) == 1

        for policy in (lapsed, current, cancelled):
            await db.refresh(policy)
        assert lapsed.status == PolicyStatus.EXPIRED
        assert current.status == PolicyStatus.ACTIVE
        assert cancelled.status == PolicyStatus.CANCELLED
