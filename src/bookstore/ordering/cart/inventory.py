"""Stock check run before a cart line is created or its quantity changed.

This is a read-then-decide check against the book's current stock, not a
reservation: nothing is decremented, so two concurrent requests can both pass
against the same stale stock figure.
"""

from bookstore.catalogue.book.book import Book
from bookstore.shared.errors import InsufficientStock
from bookstore.shared.soft_delete import get_live
from bookstore.utils.logging import get_logger

logger = get_logger(__name__)

BOOK_NOT_FOUND = "Không tìm thấy sách"


def check_quantity(book_id, requested_quantity: int) -> None:
    """Raise :class:`InsufficientStock` when ``requested_quantity`` exceeds the book's stock."""
    book = get_live(Book, book_id, BOOK_NOT_FOUND)
    available = book.stock or 0

    if requested_quantity > available:
        logger.info(
            "cart_quantity_rejected",
            book_id=str(book_id),
            requested=requested_quantity,
            available=available,
        )
        raise InsufficientStock(available)
