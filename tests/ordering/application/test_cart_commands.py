"""Application tests for cart item handlers and the stock check they run."""

import pytest
from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from bookstore.catalogue.book.management import DeleteBook, UpdateBook
from bookstore.ordering.cart.cart import Cart
from bookstore.ordering.cart.items import AddToCart, ClearCart, RemoveCartItem, UpdateCartItemQuantity
from bookstore.shared.errors import Forbidden, InsufficientStock

USER = "customer-1"


def _process(command):
    return current_domain.process(command, asynchronous=False)


def _cart(user_id=USER):
    return current_domain.repository_for(Cart).find_for_user(user_id)


class TestAddToCart:
    def test_first_add_creates_cart(self, make_book):
        book_id = make_book(stock=3)
        item_id = _process(AddToCart(user_id=USER, book_id=book_id, quantity=2))

        cart = _cart()
        assert cart is not None
        assert cart.find_item(item_id).quantity == 2

    def test_add_up_to_stock(self, make_book):
        book_id = make_book(stock=3)
        _process(AddToCart(user_id=USER, book_id=book_id, quantity=3))
        assert _cart().items[0].quantity == 3

    def test_merged_quantity_is_checked(self, make_book):
        book_id = make_book(stock=3)
        _process(AddToCart(user_id=USER, book_id=book_id, quantity=2))

        with pytest.raises(InsufficientStock) as exc:
            _process(AddToCart(user_id=USER, book_id=book_id, quantity=2))
        assert exc.value.available == 3
        assert _cart().items[0].quantity == 2

    def test_inactive_book_not_found(self, make_book):
        book_id = make_book(status="INACTIVE")
        with pytest.raises(ObjectNotFoundError):
            _process(AddToCart(user_id=USER, book_id=book_id))

    def test_deleted_book_not_found(self, make_book):
        book_id = make_book()
        _process(DeleteBook(book_id=book_id))
        with pytest.raises(ObjectNotFoundError):
            _process(AddToCart(user_id=USER, book_id=book_id))


class TestUpdateQuantity:
    def test_update_within_stock(self, make_book):
        book_id = make_book(stock=5)
        item_id = _process(AddToCart(user_id=USER, book_id=book_id))

        _process(UpdateCartItemQuantity(user_id=USER, item_id=item_id, quantity=5))
        assert _cart().find_item(item_id).quantity == 5

    def test_update_above_stock_rejected(self, make_book):
        book_id = make_book(stock=5)
        item_id = _process(AddToCart(user_id=USER, book_id=book_id))

        with pytest.raises(InsufficientStock):
            _process(UpdateCartItemQuantity(user_id=USER, item_id=item_id, quantity=6))
        assert _cart().find_item(item_id).quantity == 1

    def test_stock_read_at_update_time(self, make_book):
        book_id = make_book(stock=5)
        item_id = _process(AddToCart(user_id=USER, book_id=book_id, quantity=4))
        _process(UpdateBook(book_id=book_id, stock=2))

        with pytest.raises(InsufficientStock) as exc:
            _process(UpdateCartItemQuantity(user_id=USER, item_id=item_id, quantity=3))
        assert exc.value.available == 2

    def test_item_of_other_user_forbidden(self, make_book):
        item_id = _process(AddToCart(user_id=USER, book_id=make_book()))
        with pytest.raises(Forbidden):
            _process(UpdateCartItemQuantity(user_id="someone-else", item_id=item_id, quantity=1))

    def test_item_found_behind_many_other_carts(self, make_book):
        book_id = make_book(stock=5)
        for n in range(120):
            _process(AddToCart(user_id=f"reader-{n}", book_id=book_id))
        item_id = _process(AddToCart(user_id=USER, book_id=book_id))

        _process(UpdateCartItemQuantity(user_id=USER, item_id=item_id, quantity=3))
        assert _cart().find_item(item_id).quantity == 3

    def test_unknown_item_not_found(self):
        with pytest.raises(ObjectNotFoundError):
            _process(UpdateCartItemQuantity(user_id=USER, item_id="missing", quantity=1))


class TestRemoveAndClear:
    def test_remove_never_checks_stock(self, make_book):
        book_id = make_book(stock=5)
        item_id = _process(AddToCart(user_id=USER, book_id=book_id, quantity=5))
        _process(UpdateBook(book_id=book_id, stock=0))

        _process(RemoveCartItem(user_id=USER, item_id=item_id))
        assert len(_cart().items) == 0

    def test_remove_item_of_other_user_forbidden(self, make_book):
        item_id = _process(AddToCart(user_id=USER, book_id=make_book()))
        with pytest.raises(Forbidden):
            _process(RemoveCartItem(user_id="someone-else", item_id=item_id))

    def test_clear_cart(self, make_book):
        _process(AddToCart(user_id=USER, book_id=make_book(title="Một")))
        _process(AddToCart(user_id=USER, book_id=make_book(title="Hai")))

        _process(ClearCart(user_id=USER))
        assert len(_cart().items) == 0

    def test_clear_without_cart_is_a_no_op(self):
        _process(ClearCart(user_id="never-shopped"))
        assert _cart("never-shopped") is None
