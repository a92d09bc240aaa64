"""
Year-scoped human-readable identifiers: ``<TAG>-<year>-<NNNNNN>``.

The sequence suffix is zero-padded to a fixed width, so ordering the
identifiers of one year as strings is the same as ordering them by
sequence number.
"""

from __future__ import annotations

from collections.abc import Iterable

from insureclaim.core.errors import IdentifierExhaustedError

SEQUENCE_WIDTH = 6
MAX_SEQUENCE = 10**SEQUENCE_WIDTH - 1


def identifier_prefix(tag: str, year: int) -> str:
    return f"{tag}-{year}-"


def format_identifier(tag: str, year: int, sequence: int) -> str:
    """Render an identifier; fails fast when the sequence no longer fits."""
    if sequence < 1:
        raise ValueError(f"Sequence must be positive, got {sequence}")
    if sequence > MAX_SEQUENCE:
        raise IdentifierExhaustedError(str(tag), year)
    return f"{identifier_prefix(tag, year)}{sequence:0{SEQUENCE_WIDTH}d}"


def parse_sequence(identifier: str, prefix: str) -> int | None:
    """Return the numeric suffix of ``identifier`` if it carries ``prefix``."""
    if not identifier.startswith(prefix):
        return None
    suffix = identifier[len(prefix):]
    if not suffix.isdigit():
        return None
    return int(suffix)


def next_sequence(existing: Iterable[str], tag: str, year: int) -> int:
    """
    Next sequence number for ``tag`` in ``year`` given the identifiers issued so far.

    Takes the highest identifier carrying the year prefix and adds one, or
    starts at 1 when the year has none.
    """
    prefix = identifier_prefix(tag, year)
    candidates = [i for i in existing if i.startswith(prefix)]
    if not candidates:
        return 1
    current = parse_sequence(max(candidates), prefix)
    return (current or 0) + 1


def next_identifier(existing: Iterable[str], tag: str, year: int) -> str:
    return format_identifier(tag, year, next_sequence(existing, tag, year))
