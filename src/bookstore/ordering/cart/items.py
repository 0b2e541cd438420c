"""Cart item management: commands and handler.

Adding a book and changing a line's quantity both run the stock check first;
removing lines never does.
"""

from protean import handle
from protean.fields import Identifier, Integer
from protean.utils.globals import current_domain

from bookstore.catalogue.book.book import Book
from bookstore.domain import bookstore
from bookstore.ordering.cart.cart import CART_ITEM_NOT_FOUND, Cart
from bookstore.ordering.cart.inventory import BOOK_NOT_FOUND, check_quantity
from bookstore.shared.errors import Forbidden, not_found
from bookstore.shared.soft_delete import get_live
from bookstore.utils.logging import get_logger

logger = get_logger(__name__)


@bookstore.command(part_of="Cart")
class AddToCart:
    user_id: Identifier(required=True)
    book_id: Identifier(required=True)
    quantity: Integer(default=1, min_value=1)


@bookstore.command(part_of="Cart")
class UpdateCartItemQuantity:
    user_id: Identifier(required=True)
    item_id: Identifier(required=True)
    quantity: Integer(required=True, min_value=1)


@bookstore.command(part_of="Cart")
class RemoveCartItem:
    user_id: Identifier(required=True)
    item_id: Identifier(required=True)


@bookstore.command(part_of="Cart")
class ClearCart:
    user_id: Identifier(required=True)


def _owned_cart_for_item(user_id, item_id) -> Cart:
    """Locate the cart holding ``item_id``; 404 if none, 403 if it is someone else's."""
    cart = current_domain.repository_for(Cart).find_containing_item(item_id)
    if cart is None:
        raise not_found(CART_ITEM_NOT_FOUND)
    if str(cart.user_id) != str(user_id):
        logger.warning("cart_item_access_denied", user_id=str(user_id), item_id=str(item_id))
        raise Forbidden()
    return cart


@bookstore.command_handler(part_of=Cart)
class ManageCartItemsHandler:
    @handle(AddToCart)
    def add_to_cart(self, command):
        book = get_live(Book, command.book_id, BOOK_NOT_FOUND)
        if not book.is_active:
            raise not_found(BOOK_NOT_FOUND)

        repo = current_domain.repository_for(Cart)
        cart = repo.find_for_user(command.user_id) or Cart.create(user_id=command.user_id)

        check_quantity(book.id, cart.quantity_after_adding(book.id, command.quantity))

        item = cart.add_item(book_id=str(book.id), quantity=command.quantity)
        repo.add(cart)
        logger.info("cart_item_added", user_id=str(command.user_id), book_id=str(book.id), quantity=item.quantity)
        return str(item.id)

    @handle(UpdateCartItemQuantity)
    def update_quantity(self, command):
        repo = current_domain.repository_for(Cart)
        cart = _owned_cart_for_item(command.user_id, command.item_id)
        item = cart.find_item(command.item_id)

        check_quantity(item.book_id, command.quantity)

        cart.update_item_quantity(item.id, command.quantity)
        repo.add(cart)
        return str(item.id)

    @handle(RemoveCartItem)
    def remove_item(self, command):
        repo = current_domain.repository_for(Cart)
        cart = _owned_cart_for_item(command.user_id, command.item_id)
        cart.remove_item(command.item_id)
        repo.add(cart)

    @handle(ClearCart)
    def clear_cart(self, command):
        repo = current_domain.repository_for(Cart)
        cart = repo.find_for_user(command.user_id)
        if cart is None:
            return
        cart.clear()
        repo.add(cart)
        logger.info("cart_cleared", user_id=str(command.user_id))
