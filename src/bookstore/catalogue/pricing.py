"""Bundle pricing for book series.

A series sold as a bundle costs the sum of its active books' prices less a
flat discount. The bundle is only in stock while every book in it is.
"""

from protean.fields import Boolean, Float, Integer

from bookstore.catalogue.book.book import BookStatus
from bookstore.domain import bookstore

BUNDLE_DISCOUNT_RATE = 0.10


@bookstore.value_object(part_of="BookSeries")
class BundlePrice:
    total_price: Float(default=0.0)
    discounted_price: Float(default=0.0)
    discount: Float(default=0.0)
    all_in_stock: Boolean(default=True)
    min_stock: Integer(default=0)


def round_money(amount: float) -> float:
    return round(amount, 2)


def active_books(books) -> list:
    """Live books with ACTIVE status, in the order given."""
    return [b for b in books if b.deleted_at is None and b.status == BookStatus.ACTIVE.value]


def price_series(books) -> BundlePrice:
    """Price a series from its books. Inactive and deleted books are ignored.

    An empty series prices at zero, counts as in stock and has ``min_stock`` 0.
    """
    members = active_books(books)
    total = round_money(sum(b.price for b in members))
    discounted = round_money(total * (1 - BUNDLE_DISCOUNT_RATE))
    stocks = [b.stock or 0 for b in members]

    return BundlePrice(
        total_price=total,
        discounted_price=discounted,
        discount=round_money(total - discounted),
        all_in_stock=all(s > 0 for s in stocks),
        min_stock=min(stocks) if stocks else 0,
    )
