"""Domain events for the BookSeries aggregate."""

from protean.fields import DateTime, Identifier, Integer, String

from bookstore.domain import bookstore


@bookstore.event(part_of="BookSeries")
class SeriesCreated:
    __version__ = 1

    series_id: Identifier(required=True)
    name: String(required=True)


@bookstore.event(part_of="BookSeries")
class SeriesUpdated:
    __version__ = 1

    series_id: Identifier(required=True)
    name: String(required=True)


@bookstore.event(part_of="BookSeries")
class SeriesDeleted:
    """The series was removed and its member books were detached."""

    __version__ = 1

    series_id: Identifier(required=True)
    detached_books: Integer(default=0)
    deleted_at: DateTime(required=True)
