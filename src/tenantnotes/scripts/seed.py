"""
Seed the database with two demo tenants and their users.

    tenantnotes-seed            # create what is missing
    tenantnotes-seed --reset    # wipe tenants, users and notes first

Every seeded account uses the password ``password``.
"""

import argparse
import asyncio
from typing import Dict, List

from sqlalchemy import delete
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.logging import get_logger, setup_logging
from ..core.models import Note, SubscriptionTier, Tenant, User, UserRole
from ..core.repositories import TenantRepository, UserRepository
from ..security.password import hash_password

logger = get_logger("seed")

SEED_PASSWORD = "password"

SEED_TENANTS: List[Dict[str, str]] = [
    {"name": "Acme Corporation", "slug": "acme", "subscription": SubscriptionTier.FREE.value},
    {"name": "Globex Corporation", "slug": "globex", "subscription": SubscriptionTier.FREE.value},
]

SEED_USERS: List[Dict[str, str]] = [
    {"email": "admin@acme.test", "role": UserRole.ADMIN.value, "tenant": "acme"},
    {"email": "user@acme.test", "role": UserRole.MEMBER.value, "tenant": "acme"},
    {"email": "admin@globex.test", "role": UserRole.ADMIN.value, "tenant": "globex"},
    {"email": "user@globex.test", "role": UserRole.MEMBER.value, "tenant": "globex"},
]


async def reset_data(session: AsyncSession) -> None:
    """Delete every note, user and tenant."""
    await session.execute(delete(Note))
    await session.execute(delete(User))
    await session.execute(delete(Tenant))
    await session.commit()
    logger.info("Cleared existing data")


async def seed(session: AsyncSession, reset: bool = False) -> Dict[str, int]:
    """Create the demo tenants and users that do not exist yet.

    Returns how many tenants and users were created.
    """
    if reset:
        await reset_data(session)

    tenant_repo = TenantRepository(session)
    user_repo = UserRepository(session)
    created = {"tenants": 0, "users": 0}

    tenants: Dict[str, Tenant] = {}
    for data in SEED_TENANTS:
        tenant = await tenant_repo.get_by_slug(data["slug"])
        if tenant is None:
            tenant = await tenant_repo.create_tenant(dict(data), commit=False)
            created["tenants"] += 1
            logger.info(f"Created tenant {tenant.slug}")
        else:
            logger.info(f"Tenant {tenant.slug} already exists")
        tenants[data["slug"]] = tenant

    password_hash = hash_password(SEED_PASSWORD)
    for data in SEED_USERS:
        if await user_repo.is_email_taken(data["email"]):
            logger.info(f"User {data['email']} already exists")
            continue
        await user_repo.create_user(
            {
                "email": data["email"],
                "password_hash": password_hash,
                "role": data["role"],
                "tenant_id": tenants[data["tenant"]].id,
            },
            commit=False,
        )
        created["users"] += 1
        logger.info(f"Created user {data['email']} ({data['role']})")

    await session.commit()
    return created


async def main(reset: bool = False) -> None:
    from ..database import AsyncSessionLocal, create_tables, engine

    await create_tables()
    try:
        async with AsyncSessionLocal() as session:
            created = await seed(session, reset=reset)
    finally:
        await engine.dispose()

    logger.info(
        "Seeding completed",
        extra={"tenants_created": created["tenants"], "users_created": created["users"]},
    )


def run() -> None:
    parser = argparse.ArgumentParser(description="Seed demo tenants and users.")
    parser.add_argument(
        "--reset",
        action="store_true",
        help="Delete all tenants, users and notes before seeding",
    )
    args = parser.parse_args()

    setup_logging()
    asyncio.run(main(reset=args.reset))


if __name__ == "__main__":
    run()
