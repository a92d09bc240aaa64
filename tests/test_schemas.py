"""Boundary validation: enum coercion, value ranges and password rules."""

from datetime import date
from decimal import Decimal

import pytest
from pydantic import ValidationError

from insureclaim.api.schemas.auth import RegisterRequest
from insureclaim.api.schemas.claim import ReviewClaimRequest, SubmitClaimRequest
from insureclaim.api.schemas.payment import RecordPaymentRequest, UpdatePaymentRequest
from insureclaim.api.schemas.policy import CreatePolicyRequest, UpdatePolicyRequest
from insureclaim.api.schemas.statistics import PaymentAmounts
from insureclaim.core.constants import ClaimStatus, PaymentMethod, PaymentStatus, PolicyStatus, PolicyType, UserRole


def _policy_payload(**overrides):
    payload = {
        "user_id": 1,
        "type": "Auto",
        "coverage_amount": 500000,
        "start_date": "2025-01-01",
        "duration_months": 12,
    }
    payload.update(overrides)
    return payload


class TestCodedEnums:
    @pytest.mark.parametrize("value", ["Auto", "auto", 2, "2", PolicyType.AUTO])
    def test_name_or_code(self, value) -> None:
        assert CreatePolicyRequest(**_policy_payload(type=value)).type is PolicyType.AUTO

    @pytest.mark.parametrize("value", [0, 5, -1, "Boat", True, 2.0, None])
    def test_unknown_values_rejected(self, value) -> None:
        with pytest.raises(ValidationError):
            CreatePolicyRequest(**_policy_payload(type=value))

    def test_codes_follow_declaration_order(self) -> None:
        assert ClaimStatus.from_code(5) is ClaimStatus.PAID
        assert PaymentMethod.from_code(3) is PaymentMethod.BANK_TRANSFER
        assert PaymentStatus.REFUNDED.code == 4
        assert UserRole.ADMIN.code == 3

    def test_each_request_coerces_its_enum(self) -> None:
        assert ReviewClaimRequest(status=3).status is ClaimStatus.APPROVED
        assert UpdatePaymentRequest(status="Refunded").status is PaymentStatus.REFUNDED
        assert UpdatePolicyRequest(status=3).status is PolicyStatus.CANCELLED
        assert RecordPaymentRequest(policy_id=1, amount=10, method=5).method is PaymentMethod.MOBILE_PAYMENT

    def test_review_status_out_of_range(self) -> None:
        with pytest.raises(ValidationError):
            ReviewClaimRequest(status=6)


class TestRanges:
    @pytest.mark.parametrize("coverage", [999, 100_000_001])
    def test_policy_coverage_bounds(self, coverage) -> None:
        with pytest.raises(ValidationError):
            CreatePolicyRequest(**_policy_payload(coverage_amount=coverage))

    @pytest.mark.parametrize("duration", [0, 61])
    def test_policy_duration_bounds(self, duration) -> None:
        with pytest.raises(ValidationError):
            CreatePolicyRequest(**_policy_payload(duration_months=duration))

    def test_update_policy_is_fully_optional(self) -> None:
        update = UpdatePolicyRequest()
        assert update.coverage_amount is None and update.status is None and update.end_date is None

    def test_claim_description_and_amount(self) -> None:
        valid = {"policy_id": 1, "description": "Windscreen cracked", "claim_amount": 100, "incident_date": date(2025, 2, 1)}
        assert SubmitClaimRequest(**valid).claim_amount == Decimal("100")

        with pytest.raises(ValidationError):
            SubmitClaimRequest(**{**valid, "description": "too short"})
        with pytest.raises(ValidationError):
            SubmitClaimRequest(**{**valid, "claim_amount": 99})

    def test_review_notes_length(self) -> None:
        with pytest.raises(ValidationError):
            ReviewClaimRequest(status="Approved", review_notes="x" * 1001)
        with pytest.raises(ValidationError):
            ReviewClaimRequest(status="Approved", approved_amount=-1)

    def test_payment_amount_bounds(self) -> None:
        with pytest.raises(ValidationError):
            RecordPaymentRequest(policy_id=1, amount=0, method="Cash")
        with pytest.raises(ValidationError):
            RecordPaymentRequest(policy_id=1, amount=10_000_001, method="Cash")
        with pytest.raises(ValidationError):
            RecordPaymentRequest(policy_id=1, amount=50, method="Cash", reference="r" * 201)


class TestRegisterRequest:
    def _payload(self, **overrides):
        payload = {
            "full_name": "Lerato Dlamini",
            "email": "lerato@example.com",
            "password": "Str0ng@pass",
            "phone_number": "+27 82 555 0101",
        }
        payload.update(overrides)
        return payload

    def test_defaults_to_customer(self) -> None:
        assert RegisterRequest(**self._payload()).role is UserRole.CUSTOMER

    @pytest.mark.parametrize("password", ["weak", "alllower@1", "ALLUPPER@1", "NoDigits@", "NoSpecial1", "Bad#Char1a"])
    def test_weak_passwords_rejected(self, password) -> None:
        with pytest.raises(ValidationError):
            RegisterRequest(**self._payload(password=password))

    def test_invalid_email_and_phone(self) -> None:
        with pytest.raises(ValidationError):
            RegisterRequest(**self._payload(email="not-an-email"))
        with pytest.raises(ValidationError):
            RegisterRequest(**self._payload(phone_number="call me"))


class TestMoneySerialization:
    def test_decimal_rendered_as_number(self) -> None:
        amounts = PaymentAmounts(
            total_received=Decimal("3800.00"),
            total_refunded=Decimal("3800.00"),
            net_revenue=Decimal("0.00"),
            success_rate=50.0,
        )
        assert amounts.model_dump(mode="json") == {
            "total_received": 3800.0,
            "total_refunded": 3800.0,
            "net_revenue": 0.0,
            "success_rate": 50.0,
        }
