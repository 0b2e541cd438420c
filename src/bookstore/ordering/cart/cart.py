"""Shopping cart aggregate: one cart per user, one line per book."""

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import DateTime, HasMany, Identifier, Integer

from bookstore.domain import bookstore
from bookstore.ordering.cart.events import CartCleared, CartItemAdded, CartItemQuantityUpdated, CartItemRemoved
from bookstore.shared.errors import not_found
from bookstore.shared.soft_delete import utcnow

CART_ITEM_NOT_FOUND = "Không tìm thấy item trong giỏ hàng"


@bookstore.entity(part_of="Cart")
class CartItem:
    book_id: Identifier(required=True)
    quantity: Integer(required=True, min_value=1)
    created_at: DateTime()
    updated_at: DateTime()


@bookstore.aggregate
class Cart:
    user_id: Identifier(required=True)
    items: HasMany(CartItem)
    created_at: DateTime()
    updated_at: DateTime()

    @invariant.post
    def one_line_per_book(self):
        book_ids = [str(item.book_id) for item in self.items]
        if len(book_ids) != len(set(book_ids)):
            raise ValidationError({"book_id": ["Sách đã có trong giỏ hàng"]})

    @classmethod
    def create(cls, user_id):
        now = utcnow()
        return cls(user_id=user_id, created_at=now, updated_at=now)

    def item_for_book(self, book_id):
        return next((i for i in self.items if str(i.book_id) == str(book_id)), None)

    def find_item(self, item_id):
        item = next((i for i in self.items if str(i.id) == str(item_id)), None)
        if item is None:
            raise not_found(CART_ITEM_NOT_FOUND)
        return item

    def quantity_after_adding(self, book_id, quantity) -> int:
        """Line quantity the cart would hold for ``book_id`` after adding ``quantity``."""
        existing = self.item_for_book(book_id)
        return quantity + (existing.quantity if existing else 0)

    def add_item(self, book_id, quantity):
        """Add a book, merging into the existing line when the book is already in the cart."""
        now = utcnow()
        existing = self.item_for_book(book_id)

        if existing:
            existing.quantity += quantity
            existing.updated_at = now
            item = existing
        else:
            item = CartItem(book_id=book_id, quantity=quantity, created_at=now, updated_at=now)
            self.add_items(item)

        self.updated_at = now
        self.raise_(
            CartItemAdded(
                cart_id=str(self.id),
                item_id=str(item.id),
                book_id=str(book_id),
                quantity=quantity,
                new_quantity=item.quantity,
            )
        )
        return item

    def update_item_quantity(self, item_id, quantity):
        item = self.find_item(item_id)
        previous_quantity = item.quantity

        now = utcnow()
        item.quantity = quantity
        item.updated_at = now
        self.updated_at = now

        self.raise_(
            CartItemQuantityUpdated(
                cart_id=str(self.id),
                item_id=str(item.id),
                previous_quantity=previous_quantity,
                new_quantity=quantity,
            )
        )
        return item

    def remove_item(self, item_id):
        item = self.find_item(item_id)
        self.remove_items(item)
        self.updated_at = utcnow()

        self.raise_(CartItemRemoved(cart_id=str(self.id), item_id=str(item.id), book_id=str(item.book_id)))
        return item

    def clear(self):
        items = list(self.items)
        for item in items:
            self.remove_items(item)
        self.updated_at = utcnow()

        self.raise_(CartCleared(cart_id=str(self.id), items_removed=len(items)))
