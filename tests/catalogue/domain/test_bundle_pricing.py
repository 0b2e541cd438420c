"""Tests for series bundle pricing."""

from bookstore.catalogue.book.book import Book, BookStatus
from bookstore.catalogue.pricing import BUNDLE_DISCOUNT_RATE, BundlePrice, price_series


def _book(price, stock=5, status=BookStatus.ACTIVE.value, deleted=False):
    book = Book.create(title="Harry Potter", price=price, stock=stock, status=status)
    if deleted:
        book.delete()
    return book


class TestPriceSeries:
    def test_discount_rate_is_fixed(self):
        assert BUNDLE_DISCOUNT_RATE == 0.10

    def test_two_active_books(self):
        price = price_series([_book(100000), _book(150000)])
        assert isinstance(price, BundlePrice)
        assert price.total_price == 250000
        assert price.discounted_price == 225000
        assert price.discount == 25000

    def test_empty_series(self):
        price = price_series([])
        assert (price.total_price, price.discounted_price, price.discount) == (0, 0, 0)
        assert price.all_in_stock is True
        assert price.min_stock == 0

    def test_inactive_and_deleted_books_ignored(self):
        books = [
            _book(100000),
            _book(50000, status=BookStatus.INACTIVE.value),
            _book(70000, status=BookStatus.OUT_OF_STOCK.value),
            _book(30000, deleted=True),
        ]
        price = price_series(books)
        assert price.total_price == 100000
        assert price.discounted_price == 90000

    def test_series_with_only_inactive_books_prices_at_zero(self):
        price = price_series([_book(100000, status=BookStatus.INACTIVE.value)])
        assert (price.total_price, price.discounted_price, price.discount) == (0, 0, 0)

    def test_stock_summary(self):
        price = price_series([_book(10000, stock=3), _book(10000, stock=0), _book(10000, stock=7)])
        assert price.all_in_stock is False
        assert price.min_stock == 0

    def test_all_in_stock(self):
        price = price_series([_book(10000, stock=3), _book(10000, stock=7)])
        assert price.all_in_stock is True
        assert price.min_stock == 3

    def test_amounts_are_rounded_to_cents(self):
        price = price_series([_book(19.99), _book(5.01), _book(0.33)])
        assert price.total_price == 25.33
        assert price.discounted_price == 22.8
        assert price.discount == 2.53

    def test_discount_reconciles_with_rounded_prices(self):
        for prices in ([10.05], [0.15, 0.2], [33.35, 12.45, 7.05]):
            price = price_series([_book(p) for p in prices])
            assert price.discount == round(price.total_price - price.discounted_price, 2)
            assert price.discounted_price == round(price.total_price * 0.9, 2)
