"""Request identity as forwarded by the session layer.

Credential checks and token verification happen upstream; by the time a
request reaches these routers the session layer has placed the user's id and
role in ``X-User-Id`` / ``X-User-Role``.
"""

from dataclasses import dataclass

from fastapi import Depends, Header, HTTPException

from bookstore.identity.permissions import UserRole, has_permission


@dataclass(frozen=True)
class SessionUser:
    id: str
    role: str


def current_user(
    x_user_id: str | None = Header(default=None),
    x_user_role: str | None = Header(default=None),
) -> SessionUser:
    if not x_user_id:
        raise HTTPException(status_code=401, detail="Unauthorized")
    return SessionUser(id=x_user_id, role=(x_user_role or UserRole.CUSTOMER.value).upper())


def require_role(required: UserRole):
    """Dependency factory: 401 without a session, 403 below ``required``."""

    def _dependency(user: SessionUser = Depends(current_user)) -> SessionUser:
        if not has_permission(user.role, required.value):
            raise HTTPException(status_code=403, detail="Forbidden")
        return user

    return _dependency
