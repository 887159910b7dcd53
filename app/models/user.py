"""
app/models/user.py

Purpose: User table

- Identity-provider UID (Firebase) and contact details
- Marketplace role (buyer, seller, admin)
- Approval status mirrored from the seller application once approved
"""

from typing import Optional

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from app.flow.states import UserRole
from app.models.base import Base, TimestampMixin


class User(TimestampMixin, Base):
    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    firebase_uid: Mapped[str] = mapped_column(String(128), unique=True, nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False)
    name: Mapped[Optional[str]] = mapped_column(String(255))
    role: Mapped[str] = mapped_column(
        String(20), nullable=False, default=UserRole.BUYER.value
    )
    approval_status: Mapped[Optional[str]] = mapped_column(String(20))

    def __repr__(self):
        return f"<User(id={self.id}, email={self.email}, role={self.role})>"
