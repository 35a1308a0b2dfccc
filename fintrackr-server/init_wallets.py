"""
Seed the default wallets and categories for a development owner
and print a bearer token for trying the API.
"""
import asyncio
import sys

from fintrackr.core.security import create_access_token
from fintrackr.infrastructure.database.session import get_session, init_db
from fintrackr.modules.categories import CategoryCreateInput, CategoryService
from fintrackr.modules.wallets import WalletCreateInput, WalletService

DEFAULT_OWNER = "dev-owner"
DEFAULT_WALLETS = ("Cash", "Bank")
DEFAULT_CATEGORIES = (
    ("Salary", "#10B981"),
    ("Food", "#F59E0B"),
    ("Transport", "#3B82F6"),
    ("Bills", "#EF4444"),
)


async def seed(owner_id: str) -> None:
    await init_db()

    async for db in get_session():
        wallets = WalletService.with_session(db)
        if await wallets.list_wallets(owner_id):
            print(f"Owner {owner_id} already has wallets")
        else:
            for name in DEFAULT_WALLETS:
                await wallets.create_wallet(owner_id, WalletCreateInput(name=name))

            categories = CategoryService.with_session(db)
            for name, color in DEFAULT_CATEGORIES:
                await categories.create_category(owner_id, CategoryCreateInput(name=name, color=color))
            await db.commit()
            print(f"Seeded {len(DEFAULT_WALLETS)} wallets and {len(DEFAULT_CATEGORIES)} categories for {owner_id}")

    print(f"Bearer token: {create_access_token(owner_id)}")


if __name__ == "__main__":
    asyncio.run(seed(sys.argv[1] if len(sys.argv) > 1 else DEFAULT_OWNER))
