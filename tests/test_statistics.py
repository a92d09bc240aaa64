"""Tests for the claim and payment dashboard aggregates."""

from datetime import timedelta
from decimal import Decimal

from insureclaim.core.constants import ClaimStatus, PaymentMethod, PaymentStatus
from insureclaim.services import claims as claim_service
from insureclaim.services import payments as payment_service
from insureclaim.services import statistics as statistics_service
from insureclaim.services.statistics import percentage


class TestPercentage:
    def test_zero_total(self) -> None:
        assert percentage(0, 0) == 0.0

    def test_rounds_to_two_places(self) -> None:
        assert percentage(1, 3) == 33.33
        assert percentage(1, 2) == 50.0


class TestClaimStatistics:
    async def test_empty(self, db) -> None:
        stats = await statistics_service.claim_statistics(db)

        assert stats["total_claims"] == 0
        assert stats["by_status"] == {status.value: 0 for status in ClaimStatus}
        assert stats["amounts"]["total_claimed"] == Decimal("0")
        assert stats["amounts"]["approval_rate"] == 0.0

    async def test_counts_and_amounts(self, db, auto_policy, customer) -> None:
        incident = auto_policy.start_date + timedelta(days=3)
        claims = []
        for amount in ("10000", "20000", "30000", "40000"):
            claims.append(
                await claim_service.submit_claim(
                    db,
                    user_id=customer.id,
                    policy_id=auto_policy.id,
                    description="Hail damage to the roof and bonnet",
                    claim_amount=Decimal(amount),
                    incident_date=incident,
                )
            )
        await claim_service.review_claim(db, claims[0].id, status=ClaimStatus.APPROVED, approved_amount=Decimal("8000"))
        await claim_service.review_claim(db, claims[1].id, status=ClaimStatus.DENIED)
        await claim_service.review_claim(db, claims[2].id, status=ClaimStatus.UNDER_REVIEW)

        stats = await statistics_service.claim_statistics(db)

        assert stats["total_claims"] == 4
        assert stats["by_status"]["Approved"] == 1
        assert stats["by_status"]["Denied"] == 1
        assert stats["by_status"]["UnderReview"] == 1
        assert stats["by_status"]["Submitted"] == 1
        assert stats["by_status"]["Paid"] == 0
        assert stats["amounts"]["total_claimed"] == Decimal("100000.00")
        assert stats["amounts"]["total_approved"] == Decimal("8000.00")
        assert stats["amounts"]["approval_rate"] == 25.0


class TestPaymentStatistics:
    async def test_empty(self, db) -> None:
        stats = await statistics_service.payment_statistics(db)

        assert stats["total_payments"] == 0
        assert stats["amounts"]["net_revenue"] == Decimal("0")
        assert stats["amounts"]["success_rate"] == 0.0
        assert set(stats["by_method"]) == {method.value for method in PaymentMethod}

    async def test_refund_scenario(self, db, auto_policy) -> None:
        kept = await payment_service.record_payment(
            db, policy_id=auto_policy.id, amount=Decimal("3800"), method=PaymentMethod.DEBIT_CARD
        )
        refunded = await payment_service.record_payment(
            db, policy_id=auto_policy.id, amount=Decimal("3800"), method=PaymentMethod.CREDIT_CARD
        )
        await payment_service.update_payment_status(db, refunded.id, status=PaymentStatus.REFUNDED)

        stats = await statistics_service.payment_statistics(db)

        assert kept.status == PaymentStatus.COMPLETED
        assert stats["total_payments"] == 2
        assert stats["amounts"]["total_received"] == Decimal("3800.00")
        assert stats["amounts"]["total_refunded"] == Decimal("3800.00")
        assert stats["amounts"]["net_revenue"] == Decimal("0")
        assert stats["amounts"]["success_rate"] == 50.0
        assert stats["by_method"]["DebitCard"] == Decimal("3800.00")
        assert stats["by_method"]["CreditCard"] == Decimal("0")
        assert stats["by_method"]["Cash"] == Decimal("0")
