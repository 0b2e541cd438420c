"""Domain events for the Cart aggregate."""

from protean.fields import Identifier, Integer

from bookstore.domain import bookstore


@bookstore.event(part_of="Cart")
class CartItemAdded:
    """A book was put in the cart, or its quantity was topped up."""

    __version__ = 1

    cart_id: Identifier(required=True)
    item_id: Identifier(required=True)
    book_id: Identifier(required=True)
    quantity: Integer(required=True)
    new_quantity: Integer(required=True)


@bookstore.event(part_of="Cart")
class CartItemQuantityUpdated:
    __version__ = 1

    cart_id: Identifier(required=True)
    item_id: Identifier(required=True)
    previous_quantity: Integer(required=True)
    new_quantity: Integer(required=True)


@bookstore.event(part_of="Cart")
class CartItemRemoved:
    __version__ = 1

    cart_id: Identifier(required=True)
    item_id: Identifier(required=True)
    book_id: Identifier(required=True)


@bookstore.event(part_of="Cart")
class CartCleared:
    __version__ = 1

    cart_id: Identifier(required=True)
    items_removed: Integer(default=0)
