"""Tests for the stock check used before cart writes."""

import pytest
from protean.exceptions import ObjectNotFoundError, ValidationError

from bookstore.ordering.cart.inventory import check_quantity
from bookstore.shared.errors import InsufficientStock


class TestCheckQuantity:
    def test_below_stock_passes(self, make_book):
        check_quantity(make_book(stock=5), 4)

    def test_equal_to_stock_passes(self, make_book):
        check_quantity(make_book(stock=5), 5)

    def test_above_stock_rejected_with_available(self, make_book):
        with pytest.raises(InsufficientStock) as exc:
            check_quantity(make_book(stock=5), 6)
        assert exc.value.available == 5
        assert "Số lượng không đủ. Chỉ còn 5 cuốn" in str(exc.value.messages)

    def test_insufficient_stock_is_a_validation_error(self, make_book):
        with pytest.raises(ValidationError):
            check_quantity(make_book(stock=0), 1)

    def test_missing_book_not_found(self):
        with pytest.raises(ObjectNotFoundError):
            check_quantity("missing", 1)
