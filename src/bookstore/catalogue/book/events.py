"""Domain events for the Book aggregate."""

from protean.fields import DateTime, Float, Identifier, Integer, String

from bookstore.domain import bookstore


@bookstore.event(part_of="Book")
class BookCreated:
    """A new title was added to the catalogue."""

    __version__ = 1

    book_id: Identifier(required=True)
    title: String(required=True)
    price: Float(required=True)
    stock: Integer()
    status: String(required=True)
    series_id: Identifier()


@bookstore.event(part_of="Book")
class BookUpdated:
    """A title's details, price, stock or references changed."""

    __version__ = 1

    book_id: Identifier(required=True)
    title: String(required=True)
    price: Float(required=True)
    stock: Integer()
    status: String(required=True)
    series_id: Identifier()


@bookstore.event(part_of="Book")
class BookDetachedFromSeries:
    """The book's series was deleted and its series reference cleared."""

    __version__ = 1

    book_id: Identifier(required=True)
    series_id: Identifier()


@bookstore.event(part_of="Book")
class BookDeleted:
    __version__ = 1

    book_id: Identifier(required=True)
    deleted_at: DateTime(required=True)
