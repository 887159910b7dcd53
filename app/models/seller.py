"""
app/models/seller.py

Purpose: Seller application / profile table

- One row per user (unique user_id), never deleted
- Store and tax details submitted with the application
- Approval status moved by the admin review workflow
"""

from typing import Optional

from sqlalchemy import ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from app.flow.states import ApprovalStatus
from app.models.base import Base, TimestampMixin


class Seller(TimestampMixin, Base):
    __tablename__ = "sellers"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(
        ForeignKey("users.id"), unique=True, nullable=False
    )
    firebase_uid: Mapped[Optional[str]] = mapped_column(String(128))
    email: Mapped[Optional[str]] = mapped_column(String(255))
    name: Mapped[Optional[str]] = mapped_column(String(255))
    store_name: Mapped[str] = mapped_column(String(255), nullable=False)
    store_description: Mapped[Optional[str]] = mapped_column(Text)
    gst_number: Mapped[Optional[str]] = mapped_column(String(20))
    address: Mapped[Optional[str]] = mapped_column(Text)
    phone_number: Mapped[Optional[str]] = mapped_column(String(20))
    approval_status: Mapped[str] = mapped_column(
        String(20), nullable=False, default=ApprovalStatus.PENDING.value, index=True
    )
    rejection_reason: Mapped[Optional[str]] = mapped_column(Text)

    def __repr__(self):
        return f"<Seller(id={self.id}, store_name={self.store_name}, status={self.approval_status})>"
