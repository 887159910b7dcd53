"""
Admin bootstrap script

Creates an admin user bound to an identity-provider UID:
    python scripts/create_admin.py [--uid UID] [--email EMAIL] [--name NAME]

Does nothing when a user with that UID already exists.
"""

import argparse
import asyncio
import sys
from pathlib import Path
from dotenv import load_dotenv

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

# Load environment variables
load_dotenv()

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from app.db.database import connect_to_database, close_database_connection, get_engine
from app.db.schema import create_tables
from app.flow.states import UserRole
from app.services.user_service import create_user, get_user_by_firebase_uid
from utils.constants import ADMIN_EMAIL, ADMIN_FIREBASE_UID, ADMIN_NAME

logging.basicConfig(level=logging.INFO, format='%(levelname)s: %(message)s')
logger = logging.getLogger(__name__)


async def create_admin(uid: str, email: str, name: str):
    await connect_to_database()
    engine = get_engine()

    try:
        await create_tables(engine)

        async with AsyncSession(engine, expire_on_commit=False) as session:
            existing = await get_user_by_firebase_uid(session, uid)
            if existing is not None:
                logger.info(f"Admin user already exists: {existing!r}")
                return

            admin = await create_user(session, uid, email, name, role=UserRole.ADMIN)
            logger.info(f"✅ Admin user created successfully: {admin!r}")

    finally:
        await close_database_connection()


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Create the marketplace admin user")
    parser.add_argument("--uid", default=ADMIN_FIREBASE_UID, help="Identity-provider UID")
    parser.add_argument("--email", default=ADMIN_EMAIL)
    parser.add_argument("--name", default=ADMIN_NAME)
    return parser.parse_args(argv)


if __name__ == "__main__":
    args = parse_args()
    asyncio.run(create_admin(args.uid, args.email, args.name))
