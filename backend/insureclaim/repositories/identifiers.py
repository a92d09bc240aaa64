"""
Identifier allocation backed by the identifier_sequences table.

``allocate_identifier`` runs inside the caller's transaction:

1. Make sure a counter row exists for (tag, year).  A new row is seeded
   from the highest identifier already stored for that prefix, using an
   insert that is a no-op when another request created the row first.
2. Increment the counter with a single UPDATE.  The row lock this takes
   is held until the surrounding transaction ends, so two requests can
   never read the same value.
3. Read the incremented value back and format it.
"""

from __future__ import annotations

from sqlalchemy import insert, select, update
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import InstrumentedAttribute

from insureclaim.core.constants import IdentifierTag
from insureclaim.core.logging import get_logger
from insureclaim.db.models.base import utcnow
from insureclaim.db.models.claim import Claim
from insureclaim.db.models.identifier_sequence import IdentifierSequence
from insureclaim.db.models.payment import Payment
from insureclaim.db.models.policy import Policy
from insureclaim.services.identifiers import format_identifier, identifier_prefix, next_sequence

logger = get_logger(__name__)

IDENTIFIER_COLUMNS: dict[IdentifierTag, InstrumentedAttribute] = {
    IdentifierTag.POLICY: Policy.policy_number,
    IdentifierTag.CLAIM: Claim.claim_number,
    IdentifierTag.PAYMENT: Payment.transaction_id,
}


async def latest_issued_sequence(db: AsyncSession, tag: IdentifierTag, year: int) -> int:
    """
    Highest sequence already stored in the entity table for (tag, year), or 0.

    Only the greatest identifier is fetched; fixed-width suffixes make the
    string order match ``next_sequence``, which applies the numbering rule.
    """
    column = IDENTIFIER_COLUMNS[tag]
    prefix = identifier_prefix(tag, year)
    stmt = select(column).where(column.startswith(prefix)).order_by(column.desc()).limit(1)
    result = await db.execute(stmt)
    return next_sequence(result.scalars().all(), tag.value, year) - 1


def _insert_if_absent(db: AsyncSession, values: dict):
    dialect = db.get_bind().dialect.name
    if dialect == "postgresql":
        return pg_insert(IdentifierSequence).values(**values).on_conflict_do_nothing()
    if dialect == "sqlite":
        return sqlite_insert(IdentifierSequence).values(**values).on_conflict_do_nothing()
    # Other backends: a racing first insert surfaces as an IntegrityError
    return insert(IdentifierSequence).values(**values)


async def _ensure_counter(db: AsyncSession, tag: IdentifierTag, year: int) -> None:
    stmt = select(IdentifierSequence.last_value).where(
        IdentifierSequence.tag == tag.value, IdentifierSequence.year == year
    )
    if (await db.execute(stmt)).scalar_one_or_none() is not None:
        return

    seed = await latest_issued_sequence(db, tag, year)
    result = await db.execute(_insert_if_absent(db, {"tag": tag.value, "year": year, "last_value": seed}))
    if result.rowcount == 1:
        logger.info("Identifier sequence initialised", tag=tag.value, year=year, seed=seed)


async def allocate_identifier(db: AsyncSession, tag: IdentifierTag, *, year: int | None = None) -> str:
    """Reserve and return the next identifier for ``tag`` in ``year`` (default: current UTC year)."""
    year = year or utcnow().year
    await _ensure_counter(db, tag, year)

    await db.execute(
        update(IdentifierSequence)
        .where(IdentifierSequence.tag == tag.value, IdentifierSequence.year == year)
        .values(last_value=IdentifierSequence.last_value + 1)
        .execution_options(synchronize_session=False)
    )
    result = await db.execute(
        select(IdentifierSequence.last_value).where(
            IdentifierSequence.tag == tag.value, IdentifierSequence.year == year
        )
    )
    sequence = result.scalar_one()
    return format_identifier(tag.value, year, sequence)
