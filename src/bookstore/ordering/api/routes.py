"""FastAPI routes for the signed-in user's shopping cart."""

from fastapi import APIRouter, Depends
from protean.utils.globals import current_domain

from bookstore.api.schemas import MessageResponse
from bookstore.api.session import SessionUser, current_user
from bookstore.catalogue.api.payloads import book_summary
from bookstore.catalogue.book.book import Book
from bookstore.ordering.api.schemas import AddToCartRequest, UpdateCartItemRequest
from bookstore.ordering.cart.cart import Cart
from bookstore.ordering.cart.items import AddToCart, ClearCart, RemoveCartItem, UpdateCartItemQuantity
from bookstore.ordering.cart.summary import summarize
from bookstore.shared.soft_delete import find_live_or_none

cart_router = APIRouter(prefix="/cart", tags=["cart"])


def item_payload(cart, item, book=None) -> dict:
    if book is None:
        book = find_live_or_none(Book, item.book_id)
    return {
        "id": str(item.id),
        "cartId": str(cart.id),
        "bookId": str(item.book_id),
        "quantity": item.quantity,
        "book": book_summary(book) if book is not None else None,
        "createdAt": item.created_at,
        "updatedAt": item.updated_at,
    }


def _cart_for(session: SessionUser):
    return current_domain.repository_for(Cart).find_for_user(session.id)


@cart_router.get("")
async def get_cart(session: SessionUser = Depends(current_user)) -> dict:
    cart = _cart_for(session)
    summary = summarize(cart)
    return {
        "cart": {
            "id": str(cart.id) if cart else None,
            "userId": session.id,
            "items": [item_payload(cart, item, book) for item, book in summary["lines"]],
        },
        "total": summary["total"],
        "itemCount": summary["item_count"],
        "seriesDiscount": summary["series_discount"],
        "appliedSeries": summary["applied_series"],
    }


@cart_router.post("/items", status_code=201)
async def add_to_cart(body: AddToCartRequest, session: SessionUser = Depends(current_user)) -> dict:
    command = AddToCart(user_id=session.id, book_id=body.book_id, quantity=body.quantity)
    item_id = current_domain.process(command, asynchronous=False)
    cart = _cart_for(session)
    return item_payload(cart, cart.find_item(item_id))


@cart_router.patch("/items/{item_id}")
async def update_cart_item(
    item_id: str,
    body: UpdateCartItemRequest,
    session: SessionUser = Depends(current_user),
) -> dict:
    command = UpdateCartItemQuantity(user_id=session.id, item_id=item_id, quantity=body.quantity)
    current_domain.process(command, asynchronous=False)
    cart = _cart_for(session)
    return item_payload(cart, cart.find_item(item_id))


@cart_router.delete("/items/{item_id}", response_model=MessageResponse)
async def remove_cart_item(item_id: str, session: SessionUser = Depends(current_user)) -> MessageResponse:
    current_domain.process(RemoveCartItem(user_id=session.id, item_id=item_id), asynchronous=False)
    return MessageResponse(message="Đã xóa item khỏi giỏ hàng")


@cart_router.delete("", response_model=MessageResponse)
async def clear_cart(session: SessionUser = Depends(current_user)) -> MessageResponse:
    current_domain.process(ClearCart(user_id=session.id), asynchronous=False)
    return MessageResponse(message="Đã xóa giỏ hàng")
