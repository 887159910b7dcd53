"""
app/db/schema.py

Purpose: Database table management

- Creates tables, unique constraints and indexes from the ORM metadata
- Ensures one seller row per user at the database level
- Seeds reference data (categories)
"""

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession

# Registers every table on Base.metadata
from app.models.base import Base
from app.models.user import User  # noqa: F401
from app.models.seller import Seller  # noqa: F401
from app.models.category import Category
from app.models.product import Product  # noqa: F401
from app.core.logging import get_logger

logger = get_logger(__name__)


async def create_tables(engine: AsyncEngine):
    """
    Creates all tables and their constraints.
    This function is idempotent - safe to run multiple times.
    """
    try:
        logger.info("Creating database tables...")

        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

        for table in Base.metadata.sorted_tables:
            unique = [col.name for col in table.columns if col.unique]
            logger.debug(f"Table {table.name}: unique={unique}, indexes={len(table.indexes)}")

        logger.info(f"✅ Database tables ready: {', '.join(Base.metadata.tables)}")

    except Exception as e:
        logger.error(f"Failed to create tables: {str(e)}", exc_info=True)
        raise


async def seed_categories(session: AsyncSession, names) -> int:
    """
    Inserts the given category names when the table is empty.

    Returns:
        Number of categories inserted
    """
    existing = await session.scalar(select(func.count()).select_from(Category))
    if existing:
        logger.info(f"Categories already present ({existing}), skipping seed")
        return 0

    session.add_all([Category(name=name) for name in names])
    await session.commit()
    logger.info(f"Seeded {len(names)} categories")
    return len(names)


if __name__ == "__main__":
    """
    Run this script directly to create tables manually.
    """
    import asyncio
    from app.db.database import connect_to_database, close_database_connection, get_engine

    async def main():
        await connect_to_database()
        await create_tables(get_engine())
        await close_database_connection()

    asyncio.run(main())
