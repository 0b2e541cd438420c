"""Cart totals with the series bundle discount.

A series' lines are discounted only when the cart holds every live, ACTIVE
book of that series. Quantities multiply through: two full sets get the
discount on both.
"""

from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from bookstore.catalogue.book.book import Book
from bookstore.catalogue.pricing import BUNDLE_DISCOUNT_RATE, active_books, round_money
from bookstore.shared.soft_delete import find_live


def _load_book(book_id):
    try:
        return current_domain.repository_for(Book).get(book_id)
    except ObjectNotFoundError:
        return None


def summarize(cart) -> dict:
    """Totals for ``cart`` (may be ``None``).

    Returns ``lines`` as ``(item, book)`` pairs, newest first, alongside
    ``total``, ``item_count``, ``series_discount`` and ``applied_series``.
    """
    items = sorted(cart.items, key=lambda i: i.created_at, reverse=True) if cart else []
    lines = [(item, _load_book(item.book_id)) for item in items]

    series_lines: dict[str, list] = {}
    for item, book in lines:
        if book is not None and book.deleted_at is None and book.series_id:
            series_lines.setdefault(str(book.series_id), []).append((item, book))

    total = 0.0
    series_discount = 0.0
    applied_series = []
    for series_id, members in series_lines.items():
        required = {str(b.id) for b in active_books(find_live(Book, series_id=series_id))}
        in_cart = {str(book.id) for _, book in members}
        if not required or required != in_cart:
            continue

        subtotal = round_money(sum(book.price * item.quantity for item, book in members))
        discounted = round_money(subtotal * (1 - BUNDLE_DISCOUNT_RATE))
        series_discount += subtotal - discounted
        total += discounted
        applied_series.append(series_id)

    for item, book in lines:
        if book is None:
            continue
        if book.deleted_at is None and book.series_id and str(book.series_id) in applied_series:
            continue
        total += book.price * item.quantity

    return {
        "lines": lines,
        "item_count": sum(item.quantity for item in items),
        "total": round_money(total),
        "series_discount": round_money(series_discount),
        "applied_series": applied_series,
    }
