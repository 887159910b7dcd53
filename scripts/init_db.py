"""
Database initialization script

Run once to create tables, constraints and seed categories:
    python scripts/init_db.py
"""

import asyncio
import sys
from pathlib import Path
from dotenv import load_dotenv

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

# Load environment variables
load_dotenv()

import logging

from app.db.database import connect_to_database, close_database_connection, get_engine
from app.db.schema import create_tables, seed_categories
from sqlalchemy.ext.asyncio import AsyncSession
from utils.constants import DEFAULT_CATEGORIES

logging.basicConfig(level=logging.INFO, format='%(levelname)s: %(message)s')
logger = logging.getLogger(__name__)


async def main():
    await connect_to_database()
    engine = get_engine()

    try:
        logger.info("📋 Creating tables...")
        await create_tables(engine)

        logger.info("🌱 Seeding categories...")
        async with AsyncSession(engine, expire_on_commit=False) as session:
            inserted = await seed_categories(session, DEFAULT_CATEGORIES)
        logger.info(f"  ✅ {inserted} categories inserted")

        logger.info("\n✅ Database initialization complete!")

    finally:
        await close_database_connection()


if __name__ == "__main__":
    asyncio.run(main())
