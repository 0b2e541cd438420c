"""FastAPI routes for users and the address book.

Thin adapters: each route builds a command, processes it, then re-reads the record for the response.
"""

from fastapi import APIRouter, Depends
from protean.utils.globals import current_domain

from bookstore.api.schemas import MessageResponse
from bookstore.api.session import SessionUser, current_user, require_role
from bookstore.identity.addresses import AddAddress, RemoveAddress, SetDefaultAddress, UpdateAddress
from bookstore.identity.api.schemas import (
    AddAddressRequest,
    ChangeRoleRequest,
    RegisterUserRequest,
    UpdateAddressRequest,
)
from bookstore.identity.permissions import UserRole
from bookstore.identity.registration import USER_NOT_FOUND, ChangeUserRole, DeleteUser, RegisterUser
from bookstore.identity.user import User
from bookstore.shared.soft_delete import find_live, get_live

user_router = APIRouter(prefix="/users", tags=["users"])
address_router = APIRouter(prefix="/addresses", tags=["addresses"])


def user_payload(user) -> dict:
    return {
        "id": str(user.id),
        "email": user.email.address,
        "name": user.name,
        "role": user.role,
        "createdAt": user.created_at,
    }


def address_payload(user, address) -> dict:
    return {
        "id": str(address.id),
        "userId": str(user.id),
        "name": address.name,
        "phone": address.phone.number if address.phone else None,
        "address": address.address,
        "note": address.note,
        "isDefault": bool(address.is_default),
        "createdAt": address.created_at,
        "updatedAt": address.updated_at,
    }


def _owner(session: SessionUser):
    return get_live(User, session.id, USER_NOT_FOUND)


# ---------------------------------------------------------------------------
# Users
# ---------------------------------------------------------------------------
@user_router.post("", status_code=201)
async def register_user(body: RegisterUserRequest) -> dict:
    command = RegisterUser(email=body.email, name=body.name, role=body.role.value)
    user_id = current_domain.process(command, asynchronous=False)
    return user_payload(get_live(User, user_id, USER_NOT_FOUND))


@user_router.get("")
async def list_users(_: SessionUser = Depends(require_role(UserRole.MANAGER))) -> list[dict]:
    users = sorted(find_live(User), key=lambda u: u.created_at, reverse=True)
    return [user_payload(u) for u in users]


@user_router.patch("/{user_id}/role")
async def change_role(
    user_id: str,
    body: ChangeRoleRequest,
    _: SessionUser = Depends(require_role(UserRole.MANAGER)),
) -> dict:
    current_domain.process(ChangeUserRole(user_id=user_id, role=body.role.value), asynchronous=False)
    return user_payload(get_live(User, user_id, USER_NOT_FOUND))


@user_router.delete("/{user_id}", response_model=MessageResponse)
async def delete_user(user_id: str, _: SessionUser = Depends(require_role(UserRole.MANAGER))) -> MessageResponse:
    current_domain.process(DeleteUser(user_id=user_id), asynchronous=False)
    return MessageResponse(message="Đã xóa người dùng")


# ---------------------------------------------------------------------------
# Address book of the signed-in user
# ---------------------------------------------------------------------------
@address_router.get("")
async def list_addresses(session: SessionUser = Depends(current_user)) -> list[dict]:
    user = _owner(session)
    return [address_payload(user, a) for a in user.live_addresses()]


@address_router.get("/{address_id}")
async def get_address(address_id: str, session: SessionUser = Depends(current_user)) -> dict:
    user = _owner(session)
    return address_payload(user, user.find_address(address_id))


@address_router.post("", status_code=201)
async def add_address(body: AddAddressRequest, session: SessionUser = Depends(current_user)) -> dict:
    command = AddAddress(
        user_id=session.id,
        name=body.name,
        phone=body.phone,
        address=body.address,
        note=body.note,
        is_default=body.is_default,
    )
    address_id = current_domain.process(command, asynchronous=False)
    user = _owner(session)
    return address_payload(user, user.find_address(address_id))


@address_router.patch("/{address_id}")
async def update_address(
    address_id: str,
    body: UpdateAddressRequest,
    session: SessionUser = Depends(current_user),
) -> dict:
    command = UpdateAddress(
        user_id=session.id,
        address_id=address_id,
        name=body.name,
        phone=body.phone,
        address=body.address,
        note=body.note,
        clear_note="note" in body.model_fields_set and body.note is None,
        is_default=body.is_default,
    )
    current_domain.process(command, asynchronous=False)
    user = _owner(session)
    return address_payload(user, user.find_address(address_id))


@address_router.put("/{address_id}/default")
async def set_default_address(address_id: str, session: SessionUser = Depends(current_user)) -> dict:
    current_domain.process(SetDefaultAddress(user_id=session.id, address_id=address_id), asynchronous=False)
    user = _owner(session)
    return address_payload(user, user.find_address(address_id))


@address_router.delete("/{address_id}", response_model=MessageResponse)
async def remove_address(address_id: str, session: SessionUser = Depends(current_user)) -> MessageResponse:
    current_domain.process(RemoveAddress(user_id=session.id, address_id=address_id), asynchronous=False)
    return MessageResponse(message="Đã xóa địa chỉ")
