"""
Seed development users, skipping any that already exist.
Run: python -m scripts.seed_users  (from backend/)
"""

import asyncio

from insureclaim.core.constants import UserRole
from insureclaim.db.session import async_session
from insureclaim.repositories.users import create_user, get_user_by_email


SEED_USERS = [
    {
        "email": "admin@insureclaim.com",
        "password": "Admin@123",  # Change in production!
        "full_name": "System Administrator",
        "phone_number": "+27110000000",
        "role": UserRole.ADMIN.value,
    },
    {
        "email": "agent@insureclaim.com",
        "password": "Agent@123",
        "full_name": "Field Agent",
        "phone_number": "+27110000001",
        "role": UserRole.AGENT.value,
    },
    {
        "email": "customer@insureclaim.com",
        "password": "Customer@123",
        "full_name": "Demo Customer",
        "phone_number": "+27110000002",
        "role": UserRole.CUSTOMER.value,
    },
]


async def seed():
    """Insert seed users."""
    created = 0
    async with async_session() as session:
        for data in SEED_USERS:
            if await get_user_by_email(session, data["email"]) is not None:
                print(f"  Exists, skipped: {data['email']}")
                continue
            user = await create_user(db=session, **data)
            created += 1
            print(f"  Created user: {user.email} ({user.role})")
        await session.commit()
    print(f"Seeded {created} users.")


if __name__ == "__main__":
    asyncio.run(seed())
