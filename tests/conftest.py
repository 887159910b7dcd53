"""
Shared fixtures.

Each test gets its own SQLite file. Rows are seeded through a synchronous
engine on the same file; the app under test talks to it through aiosqlite.
Identity verification is replaced by an in-memory token table.
"""

from datetime import datetime, timezone
from typing import Dict, Optional

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, select
from sqlalchemy.orm import Session
from sqlalchemy.pool import NullPool

from app.core.config import settings
from app.core.exceptions import AuthenticationError
from app.db.schema import Base
from app.flow.states import ApprovalStatus, UserRole
from app.main import app
from app.models.category import Category
from app.models.seller import Seller
from app.models.user import User
from app.schemas.auth import Identity
from app.services.identity_service import IdentityProvider, get_identity_provider


class FakeIdentityProvider(IdentityProvider):
    def __init__(self):
        self.tokens: Dict[str, Identity] = {}

    def register(self, token: str, uid: str, email: Optional[str] = None, name: Optional[str] = None):
        self.tokens[token] = Identity(uid=uid, email=email, name=name)

    async def verify_token(self, token: str) -> Identity:
        identity = self.tokens.get(token)
        if identity is None:
            raise AuthenticationError("Invalid or expired identity token")
        return identity


class Seeder:
    """Writes fixture rows straight into the test database."""

    def __init__(self, engine, identity: FakeIdentityProvider):
        self.engine = engine
        self.identity = identity

    def user(self, uid: str, role: UserRole = UserRole.BUYER, name: Optional[str] = None):
        """Inserts a user and registers a token for it. Returns (user_id, headers)."""
        email = f"{uid}@example.com"
        name = name or uid.title()
        with Session(self.engine) as session:
            user = User(firebase_uid=uid, email=email, name=name, role=role.value)
            session.add(user)
            session.commit()
            user_id = user.id
        token = f"token-{uid}"
        self.identity.register(token, uid, email, name)
        return user_id, {"Authorization": f"Bearer {token}"}

    def category(self, name: str) -> int:
        with Session(self.engine) as session:
            category = Category(name=name)
            session.add(category)
            session.commit()
            return category.id

    def seller(
        self,
        user_id: int,
        status: ApprovalStatus = ApprovalStatus.PENDING,
        store_name: str = "Store",
        created_at: Optional[datetime] = None,
    ) -> int:
        created_at = created_at or datetime.now(timezone.utc)
        with Session(self.engine) as session:
            seller = Seller(
                user_id=user_id,
                store_name=store_name,
                approval_status=status.value,
                created_at=created_at,
                updated_at=created_at,
            )
            session.add(seller)
            session.commit()
            return seller.id

    def get_user(self, user_id: int) -> User:
        with Session(self.engine, expire_on_commit=False) as session:
            return session.get(User, user_id)

    def get_seller(self, seller_id: int) -> Seller:
        with Session(self.engine, expire_on_commit=False) as session:
            return session.get(Seller, seller_id)

    def sellers_for_user(self, user_id: int):
        with Session(self.engine) as session:
            return list(session.scalars(select(Seller).where(Seller.user_id == user_id)))


@pytest.fixture
def db_path(tmp_path):
    return tmp_path / "bazaar-test.db"


@pytest.fixture
def sync_engine(db_path):
    engine = create_engine(f"sqlite:///{db_path}", poolclass=NullPool)
    Base.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def identity():
    return FakeIdentityProvider()


@pytest.fixture
def seed(sync_engine, identity):
    return Seeder(sync_engine, identity)


@pytest.fixture
def client(db_path, sync_engine, identity, monkeypatch):
    monkeypatch.setattr(settings, "DATABASE_URL", f"sqlite+aiosqlite:///{db_path}")
    monkeypatch.setattr(settings, "ENVIRONMENT", "development")
    app.dependency_overrides[get_identity_provider] = lambda: identity
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def admin_headers(seed):
    _, headers = seed.user("admin-uid", role=UserRole.ADMIN, name="Test Admin")
    return headers


@pytest.fixture
def application():
    return {
        "storeName": "Desi Threads",
        "storeDescription": "Handloom shirts and kurtas",
        "gstNumber": "27aabcu9603r1zm",
        "address": "12 MG Road, Pune",
        "phoneNumber": "9876543210",
    }
