"""API schema package."""

from insureclaim.api.schemas.auth import AuthResponse, CurrentUserResponse, LoginRequest, RegisterRequest
from insureclaim.api.schemas.claim import ClaimResponse, ReviewClaimRequest, SubmitClaimRequest
from insureclaim.api.schemas.payment import PaymentResponse, RecordPaymentRequest, UpdatePaymentRequest
from insureclaim.api.schemas.policy import CreatePolicyRequest, PolicyResponse, UpdatePolicyRequest
from insureclaim.api.schemas.statistics import ClaimStatisticsResponse, PaymentStatisticsResponse

__all__ = [
    "RegisterRequest",
    "LoginRequest",
    "AuthResponse",
    "CurrentUserResponse",
    "CreatePolicyRequest",
    "UpdatePolicyRequest",
    "PolicyResponse",
    "SubmitClaimRequest",
    "ReviewClaimRequest",
    "ClaimResponse",
    "RecordPaymentRequest",
    "UpdatePaymentRequest",
    "PaymentResponse",
    "ClaimStatisticsResponse",
    "PaymentStatisticsResponse",
]
