"""
app/schemas/auth.py

Purpose: Authenticated caller representations

- Identity: what the identity provider vouches for
- Principal: the identity resolved to a marketplace user row, passed
  explicitly into every service call
"""

from typing import Optional

from pydantic import BaseModel

from app.flow.states import UserRole


class Identity(BaseModel):
    """Verified identity returned by the identity provider."""

    uid: str
    email: Optional[str] = None
    name: Optional[str] = None


class Principal(BaseModel):
    """Authenticated marketplace user."""

    user_id: int
    firebase_uid: str
    email: str
    name: Optional[str] = None
    role: UserRole

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN
