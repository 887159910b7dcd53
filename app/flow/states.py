"""
app/flow/states.py

Purpose: Defines the seller onboarding states

- Enum for each approval status (PENDING, APPROVED, REJECTED)
- Single source of truth for the onboarding workflow
- State transition validation
- Metadata for each state (display name, terminal, who may move it)
"""

from enum import Enum
from typing import Dict, List, Optional
from dataclasses import dataclass


class ApprovalStatus(str, Enum):
    """
    Approval status of a seller application.
    """

    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


class UserRole(str, Enum):
    """Roles a marketplace user can hold."""

    BUYER = "buyer"
    SELLER = "seller"
    ADMIN = "admin"


@dataclass
class StateMetadata:
    """
    Metadata associated with each approval status.
    """
    name: ApprovalStatus
    display_name: str
    can_sell: bool = False  # Whether products may be listed in this state
    terminal: bool = False  # No admin transition leaves this state
    description: str = ""


STATE_METADATA: Dict[ApprovalStatus, StateMetadata] = {
    ApprovalStatus.PENDING: StateMetadata(
        name=ApprovalStatus.PENDING,
        display_name="Pending review",
        description="Application submitted, waiting for an admin"
    ),
    ApprovalStatus.APPROVED: StateMetadata(
        name=ApprovalStatus.APPROVED,
        display_name="Approved",
        can_sell=True,
        terminal=True,
        description="Seller may list products"
    ),
    ApprovalStatus.REJECTED: StateMetadata(
        name=ApprovalStatus.REJECTED,
        display_name="Rejected",
        terminal=True,
        description="Application declined; the seller may reapply"
    ),
}


# Admin review transitions. A status may always be re-applied to itself.
STATE_TRANSITIONS: Dict[ApprovalStatus, List[ApprovalStatus]] = {
    ApprovalStatus.PENDING: [
        ApprovalStatus.APPROVED,
        ApprovalStatus.REJECTED,
    ],
    ApprovalStatus.APPROVED: [],
    ApprovalStatus.REJECTED: [],
}

# Transitions the seller can trigger themselves
SELLER_TRANSITIONS: Dict[ApprovalStatus, List[ApprovalStatus]] = {
    ApprovalStatus.REJECTED: [ApprovalStatus.PENDING],
}


def is_valid_transition(
    from_state: ApprovalStatus,
    to_state: ApprovalStatus,
    by_seller: bool = False
) -> bool:
    """
    Checks if a status transition is valid.

    Args:
        from_state: Current status
        to_state: Target status
        by_seller: True when the seller (not an admin) requests the change

    Returns:
        True if transition is allowed, False otherwise
    """
    from_state = ApprovalStatus(from_state)
    to_state = ApprovalStatus(to_state)

    if by_seller:
        return to_state in SELLER_TRANSITIONS.get(from_state, [])

    if from_state == to_state:
        return True
    return to_state in STATE_TRANSITIONS.get(from_state, [])


def get_state_metadata(state: ApprovalStatus) -> StateMetadata:
    """
    Retrieves metadata for a given status.
    """
    return STATE_METADATA[ApprovalStatus(state)]


def can_sell(state: Optional[str]) -> bool:
    """True if a seller in this status may manage products."""
    if state is None:
        return False
    try:
        return get_state_metadata(ApprovalStatus(state)).can_sell
    except ValueError:
        return False
