"""Pydantic request schemas for the cart API."""

from __future__ import annotations

from pydantic import Field

from bookstore.api.schemas import CamelModel


class AddToCartRequest(CamelModel):
    model_config = {
        "json_schema_extra": {"examples": [{"bookId": "2f1c7a52-8d8f-4bde-9c0e-0b3b4a1e2d11", "quantity": 2}]},
    }

    book_id: str = Field(..., min_length=1)
    quantity: int = Field(1, gt=0)


class UpdateCartItemRequest(CamelModel):
    quantity: int = Field(..., gt=0)
