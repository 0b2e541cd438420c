"""Role hierarchy used by the session layer to gate routes."""

from enum import Enum


class UserRole(Enum):
    ADMIN = "ADMIN"
    MANAGER = "MANAGER"
    STAFF = "STAFF"
    CUSTOMER = "CUSTOMER"


ROLE_HIERARCHY = {
    UserRole.ADMIN.value: 4,
    UserRole.MANAGER.value: 3,
    UserRole.STAFF.value: 2,
    UserRole.CUSTOMER.value: 1,
}


def has_permission(role: str | None, required: str) -> bool:
    """True when ``role`` sits at or above ``required`` in the hierarchy.

    Unknown or missing roles never pass.
    """
    if role not in ROLE_HIERARCHY:
        return False
    return ROLE_HIERARCHY[role] >= ROLE_HIERARCHY[required]
