"""BookSeries aggregate root."""

from protean.fields import DateTime, String, Text

from bookstore.domain import bookstore
from bookstore.shared.soft_delete import utcnow


@bookstore.aggregate
class BookSeries:
    """A named collection of books sold together at a bundle discount.

    Membership lives on the book side (``Book.series_id``); the series itself
    only carries its name and description.
    """

    name: String(required=True, max_length=255)
    description: Text()
    created_at: DateTime()
    updated_at: DateTime()
    deleted_at: DateTime()

    @classmethod
    def create(cls, name, description=None):
        from bookstore.catalogue.series.events import SeriesCreated

        now = utcnow()
        series = cls(name=name, description=description, created_at=now, updated_at=now)
        series.raise_(SeriesCreated(series_id=series.id, name=name))
        return series

    def update_details(self, **changes):
        from bookstore.catalogue.series.events import SeriesUpdated

        for field, value in changes.items():
            setattr(self, field, value)
        self.updated_at = utcnow()
        self.raise_(SeriesUpdated(series_id=self.id, name=self.name))

    def delete(self, detached_books: int = 0):
        from bookstore.catalogue.series.events import SeriesDeleted

        now = utcnow()
        self.deleted_at = now
        self.updated_at = now
        self.raise_(SeriesDeleted(series_id=self.id, detached_books=detached_books, deleted_at=now))
