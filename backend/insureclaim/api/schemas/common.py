"""
Types shared by the request/response schemas.

Enum fields accept the member name (``"Auto"``) or its 1-based integer
code (``2``); anything else fails validation with a 422.  Money is held
as Decimal and rendered as a JSON number.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Annotated, Any

from pydantic import BeforeValidator, PlainSerializer

from insureclaim.core.constants import ClaimStatus, CodedEnum, PaymentMethod, PaymentStatus, PolicyStatus, PolicyType, UserRole


def coerce_coded_enum(enum_cls: type[CodedEnum], value: Any) -> CodedEnum:
    if isinstance(value, enum_cls):
        return value
    # bool is an int subclass; True must not mean code 1
    if isinstance(value, bool):
        raise ValueError(f"{value!r} is not a valid {enum_cls.__name__}")
    if isinstance(value, int):
        return enum_cls.from_code(value)
    if isinstance(value, str):
        text = value.strip()
        if text.isdigit():
            return enum_cls.from_code(int(text))
        for member in enum_cls:
            if member.value.lower() == text.lower():
                return member
    allowed = ", ".join(f"{m.value} ({m.code})" for m in enum_cls)
    raise ValueError(f"{value!r} is not a valid {enum_cls.__name__}; expected one of {allowed}")


def _coded(enum_cls: type[CodedEnum]) -> BeforeValidator:
    return BeforeValidator(lambda value: coerce_coded_enum(enum_cls, value))


UserRoleField = Annotated[UserRole, _coded(UserRole)]
PolicyTypeField = Annotated[PolicyType, _coded(PolicyType)]
PolicyStatusField = Annotated[PolicyStatus, _coded(PolicyStatus)]
ClaimStatusField = Annotated[ClaimStatus, _coded(ClaimStatus)]
PaymentMethodField = Annotated[PaymentMethod, _coded(PaymentMethod)]
PaymentStatusField = Annotated[PaymentStatus, _coded(PaymentStatus)]

Money = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]
