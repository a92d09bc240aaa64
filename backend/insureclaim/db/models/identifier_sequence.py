"""
IdentifierSequence — one counter row per (tag, year).

Backs allocation of POL/CLM/TXN numbers.  Incrementing ``last_value``
with a single UPDATE takes a row lock, so concurrent allocations for the
same tag and year are serialised by the database.
"""

from __future__ import annotations

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from insureclaim.db.models.base import Base


class IdentifierSequence(Base):
    __tablename__ = "identifier_sequences"

    tag: Mapped[str] = mapped_column(String(10), primary_key=True)
    year: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=False)
    last_value: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    def __repr__(self) -> str:
        return f"<IdentifierSequence {self.tag}-{self.year} last={self.last_value}>"
