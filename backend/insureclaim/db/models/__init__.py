"""
Models package — re-exports Base and all models.

Import models here so Alembic's `target_metadata = Base.metadata`
picks up every table automatically.

When adding a new model:
    1. Create `insureclaim/db/models/<table_name>.py`
    2. Import it here
"""

from insureclaim.db.models.base import Base
from insureclaim.db.models.user import User
from insureclaim.db.models.policy import Policy
from insureclaim.db.models.claim import Claim
from insureclaim.db.models.payment import Payment
from insureclaim.db.models.identifier_sequence import IdentifierSequence

__all__ = [
    "Base",
    "User",
    "Policy",
    "Claim",
    "Payment",
    "IdentifierSequence",
]
