"""Deletion rules for the records books point at.

Categories, authors and publishers can only be deleted while no live book
references them. A series is always deletable: its member books are detached
in the same unit of work as the series tombstone.
"""

from protean.utils.globals import current_domain

from bookstore.catalogue.book.book import Book
from bookstore.shared.errors import InUse
from bookstore.shared.soft_delete import count_live, find_all
from bookstore.utils.logging import get_logger

logger = get_logger(__name__)


def count_live_books(**criteria) -> int:
    return count_live(Book, **criteria)


def ensure_unused(field: str, entity_id, noun: str) -> None:
    """Raise :class:`InUse` when any live book has ``field == entity_id``."""
    count = count_live_books(**{field: str(entity_id)})
    if count:
        logger.warning("deletion_blocked", reference=field, entity_id=str(entity_id), book_count=count)
        raise InUse(noun, count)


def detach_series_members(series_id) -> int:
    """Clear ``series_id`` on every book of the series, tombstoned books included."""
    repo = current_domain.repository_for(Book)
    books = find_all(Book, series_id=str(series_id))
    for book in books:
        book.detach_from_series()
        repo.add(book)
    return len(books)
