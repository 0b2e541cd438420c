"""Pydantic request schemas for the identity API."""

from __future__ import annotations

from pydantic import Field

from bookstore.api.schemas import CamelModel
from bookstore.identity.permissions import UserRole


class RegisterUserRequest(CamelModel):
    model_config = {
        "json_schema_extra": {"examples": [{"email": "an.nguyen@example.com", "name": "Nguyễn Văn An"}]},
    }

    email: str = Field(..., max_length=254)
    name: str = Field(..., min_length=1, max_length=100)
    role: UserRole = UserRole.CUSTOMER


class ChangeRoleRequest(CamelModel):
    role: UserRole


class AddAddressRequest(CamelModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "name": "Nguyễn Văn An",
                    "phone": "0901234567",
                    "address": "12 Lê Lợi, Quận 1, TP. Hồ Chí Minh",
                    "note": "Giao giờ hành chính",
                    "isDefault": True,
                }
            ]
        }
    }

    name: str = Field(..., min_length=1, max_length=100)
    phone: str = Field(..., min_length=1, max_length=11)
    address: str = Field(..., min_length=1, max_length=500)
    note: str | None = None
    is_default: bool = False


class UpdateAddressRequest(CamelModel):
    name: str | None = Field(None, min_length=1, max_length=100)
    phone: str | None = Field(None, min_length=1, max_length=11)
    address: str | None = Field(None, min_length=1, max_length=500)
    note: str | None = None
    is_default: bool | None = None
