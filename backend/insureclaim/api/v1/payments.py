"""Payment ledger endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from insureclaim.api.deps import get_db, get_viewer, require_admin
from insureclaim.api.schemas.payment import PaymentResponse, RecordPaymentRequest, UpdatePaymentRequest
from insureclaim.api.schemas.statistics import PaymentStatisticsResponse
from insureclaim.core.permissions import Viewer
from insureclaim.services import payments as payment_service
from insureclaim.services import statistics as statistics_service

router = APIRouter(prefix="/payment", tags=["Payments"])


@router.post("", response_model=PaymentResponse, status_code=status.HTTP_201_CREATED)
async def record_payment(
    payload: RecordPaymentRequest,
    db: AsyncSession = Depends(get_db, scope="function"),
    viewer: Viewer = Depends(get_viewer),
) -> PaymentResponse:
    payment = await payment_service.record_payment(
        db,
        policy_id=payload.policy_id,
        amount=payload.amount,
        method=payload.method,
        reference=payload.reference,
        viewer=viewer,
    )
    return PaymentResponse.from_model(payment)


@router.get("", response_model=list[PaymentResponse])
async def list_payments(
    db: AsyncSession = Depends(get_db, scope="function"),
    viewer: Viewer = Depends(get_viewer),
) -> list[PaymentResponse]:
    payments = await payment_service.list_payments(db, viewer)
    return [PaymentResponse.from_model(p) for p in payments]


@router.get("/statistics", response_model=PaymentStatisticsResponse, dependencies=[Depends(require_admin)])
async def payment_statistics(
    db: AsyncSession = Depends(get_db, scope="function"),
) -> PaymentStatisticsResponse:
    stats = await statistics_service.payment_statistics(db)
    return PaymentStatisticsResponse.model_validate(stats)


@router.get("/policy/{policy_id}", response_model=list[PaymentResponse])
async def list_policy_payments(
    policy_id: int,
    db: AsyncSession = Depends(get_db, scope="function"),
    viewer: Viewer = Depends(get_viewer),
) -> list[PaymentResponse]:
    payments = await payment_service.list_policy_payments(db, policy_id, viewer)
    return [PaymentResponse.from_model(p) for p in payments]


@router.get("/{payment_id}", response_model=PaymentResponse)
async def get_payment(
    payment_id: int,
    db: AsyncSession = Depends(get_db, scope="function"),
    viewer: Viewer = Depends(get_viewer),
) -> PaymentResponse:
    payment = await payment_service.get_payment(db, payment_id, viewer)
    return PaymentResponse.from_model(payment)


@router.put("/{payment_id}", response_model=PaymentResponse, dependencies=[Depends(require_admin)])
async def update_payment_status(
    payment_id: int,
    payload: UpdatePaymentRequest,
    db: AsyncSession = Depends(get_db, scope="function"),
) -> PaymentResponse:
    payment = await payment_service.update_payment_status(
        db,
        payment_id,
        status=payload.status,
        reference=payload.reference,
    )
    return PaymentResponse.from_model(payment)
