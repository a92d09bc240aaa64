"""
Mark Active policies whose end date has passed as Expired.
Run: python -m scripts.expire_policies [YYYY-MM-DD]  (from backend/)

Intended for a daily cron job; the optional date defaults to today (UTC).
"""

import asyncio
import sys
from datetime import date

from insureclaim.core.logging import setup_logging
from insureclaim.db.session import async_session
from insureclaim.services.policies import expire_lapsed_policies


async def expire(as_of: date | None = None) -> int:
    async with async_session() as session:
        count = await expire_lapsed_policies(session, as_of)
        await session.commit()
    return count


if __name__ == "__main__":
    setup_logging("INFO")
    as_of = date.fromisoformat(sys.argv[1]) if len(sys.argv) > 1 else None
    count = asyncio.run(expire(as_of))
    print(f"Expired {count} policies.")
