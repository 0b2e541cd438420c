"""Book aggregate root."""

import json
from enum import Enum

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import DateTime, Float, Identifier, Integer, String, Text

from bookstore.domain import bookstore
from bookstore.shared.soft_delete import utcnow

# Sentinel for distinguishing "not provided" from None in partial updates
_UNSET = object()


class BookStatus(Enum):
    ACTIVE = "ACTIVE"
    INACTIVE = "INACTIVE"
    OUT_OF_STOCK = "OUT_OF_STOCK"


@bookstore.aggregate
class Book:
    """A sellable title.

    References to author, publisher, category, series and media are loose
    identifiers; the referenced records may be soft-deleted independently.
    ``gallery`` holds an ordered JSON list of media ids.
    """

    title: String(required=True, max_length=255)
    description: Text()
    isbn: String(max_length=20)
    price: Float(required=True)
    stock: Integer(default=0, min_value=0)
    status: String(choices=BookStatus, default=BookStatus.ACTIVE.value)
    author_id: Identifier()
    publisher_id: Identifier()
    category_id: Identifier()
    series_id: Identifier()
    thumbnail_id: Identifier()
    gallery: Text()
    created_by: Identifier()
    created_at: DateTime()
    updated_at: DateTime()
    deleted_at: DateTime()

    @invariant.post
    def price_must_be_positive(self):
        if self.price is not None and self.price <= 0:
            raise ValidationError({"price": ["Giá phải lớn hơn 0"]})

    @classmethod
    def create(
        cls,
        title,
        price,
        stock=0,
        status=BookStatus.ACTIVE.value,
        description=None,
        isbn=None,
        author_id=None,
        publisher_id=None,
        category_id=None,
        series_id=None,
        thumbnail_id=None,
        gallery_media_ids=None,
        created_by=None,
    ):
        from bookstore.catalogue.book.events import BookCreated

        now = utcnow()
        book = cls(
            title=title,
            price=price,
            stock=stock,
            status=status or BookStatus.ACTIVE.value,
            description=description,
            isbn=isbn,
            author_id=author_id,
            publisher_id=publisher_id,
            category_id=category_id,
            series_id=series_id,
            thumbnail_id=thumbnail_id,
            gallery=json.dumps(list(gallery_media_ids or [])),
            created_by=created_by,
            created_at=now,
            updated_at=now,
        )
        book.raise_(
            BookCreated(
                book_id=book.id,
                title=title,
                price=price,
                stock=book.stock,
                status=book.status,
                series_id=series_id,
            )
        )
        return book

    @property
    def gallery_media_ids(self) -> list[str]:
        return json.loads(self.gallery) if self.gallery else []

    @property
    def is_active(self) -> bool:
        return self.status == BookStatus.ACTIVE.value

    def update_details(self, **changes):
        """Apply a partial update. Reference fields accept ``None`` to clear them."""
        from bookstore.catalogue.book.events import BookUpdated

        gallery_media_ids = changes.pop("gallery_media_ids", _UNSET)
        for field, value in changes.items():
            setattr(self, field, value)
        if gallery_media_ids is not _UNSET:
            self.gallery = json.dumps(list(gallery_media_ids or []))
        self.updated_at = utcnow()

        self.raise_(
            BookUpdated(
                book_id=self.id,
                title=self.title,
                price=self.price,
                stock=self.stock,
                status=self.status,
                series_id=self.series_id,
            )
        )

    def detach_from_series(self):
        """Clear the series reference after the series was deleted."""
        from bookstore.catalogue.book.events import BookDetachedFromSeries

        previous_series_id = self.series_id
        self.series_id = None
        self.updated_at = utcnow()

        self.raise_(
            BookDetachedFromSeries(
                book_id=self.id,
                series_id=previous_series_id,
            )
        )

    def delete(self):
        from bookstore.catalogue.book.events import BookDeleted

        now = utcnow()
        self.deleted_at = now
        self.updated_at = now
        self.raise_(BookDeleted(book_id=self.id, deleted_at=now))
