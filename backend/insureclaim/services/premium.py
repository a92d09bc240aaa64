"""
Premium calculation and calendar-month arithmetic.

The premium is the amount billed per month:

    premium = coverage × monthly_rate(type) × discount(duration)

rounded to cents.  The policy duration only selects the discount tier.
Pure functions, no I/O.
"""

from __future__ import annotations

from datetime import date
from decimal import ROUND_HALF_EVEN, ROUND_HALF_UP, Decimal

from dateutil.relativedelta import relativedelta

from insureclaim.core.config import settings
from insureclaim.core.constants import PolicyType

CENTS = Decimal("0.01")

MONTHLY_RATES: dict[PolicyType, Decimal] = {
    PolicyType.LIFE: Decimal("0.005"),
    PolicyType.AUTO: Decimal("0.008"),
    PolicyType.HEALTH: Decimal("0.006"),
    PolicyType.PROPERTY: Decimal("0.004"),
}

# (minimum duration in months, multiplier), checked longest first
DURATION_DISCOUNTS: tuple[tuple[int, Decimal], ...] = (
    (24, Decimal("0.90")),
    (12, Decimal("0.95")),
)

ROUNDING_MODES = {
    "HALF_EVEN": ROUND_HALF_EVEN,
    "HALF_UP": ROUND_HALF_UP,
}


def discount_factor(duration_months: int) -> Decimal:
    for threshold, factor in DURATION_DISCOUNTS:
        if duration_months >= threshold:
            return factor
    return Decimal("1")


def calculate_premium(
    coverage_amount: Decimal | int | str,
    policy_type: PolicyType | str,
    duration_months: int,
    rounding: str | None = None,
) -> Decimal:
    """
    Monthly premium for a policy.

    ``rounding`` is ``"HALF_EVEN"`` or ``"HALF_UP"``; defaults to the
    PREMIUM_ROUNDING setting.
    """
    if duration_months < 1:
        raise ValueError(f"Duration must be at least one month, got {duration_months}")

    coverage = Decimal(str(coverage_amount))
    rate = MONTHLY_RATES[PolicyType(policy_type)]
    mode = ROUNDING_MODES[rounding or settings.PREMIUM_ROUNDING]

    raw = coverage * rate * discount_factor(duration_months)
    return raw.quantize(CENTS, rounding=mode)


def add_months(start: date, months: int) -> date:
    """Calendar month arithmetic; Jan 31 + 1 month is the last day of February."""
    return start + relativedelta(months=months)


def months_between(start: date, end: date) -> int:
    """
    Whole calendar months from ``start`` to ``end`` (0 when ``end`` is not after ``start``).

    Inverse of ``add_months``: ``months_between(d, add_months(d, n)) == n``
    even when the end date was clamped to a month end.
    """
    if end <= start:
        return 0
    delta = relativedelta(end, start)
    months = delta.years * 12 + delta.months
    while add_months(start, months + 1) <= end:
        months += 1
    return months
