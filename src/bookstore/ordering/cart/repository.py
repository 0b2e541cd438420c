"""Repository for the Cart aggregate."""

from protean.utils.globals import current_domain

from bookstore.domain import bookstore
from bookstore.ordering.cart.cart import Cart, CartItem


@bookstore.repository(part_of=Cart)
class CartRepository:
    def find_for_user(self, user_id) -> Cart | None:
        """The user's cart, or ``None`` before the first add."""
        return self._dao.query.filter(user_id=str(user_id)).all().first

    def find_containing_item(self, item_id) -> Cart | None:
        item = current_domain.repository_for(CartItem)._dao.query.filter(id=str(item_id)).all().first
        if item is None:
            return None
        return self._dao.query.filter(id=str(item.cart_id)).all().first
