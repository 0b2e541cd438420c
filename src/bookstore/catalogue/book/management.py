"""Book management: commands and handlers."""

import json

from protean import handle
from protean.fields import Float, Identifier, Integer, String, Text
from protean.utils.globals import current_domain

from bookstore.catalogue.author.author import Author
from bookstore.catalogue.book.book import Book, BookStatus
from bookstore.catalogue.category.category import Category
from bookstore.catalogue.publisher.publisher import Publisher
from bookstore.catalogue.series.series import BookSeries
from bookstore.domain import bookstore
from bookstore.shared.soft_delete import get_live
from bookstore.shared.updates import collect_changes
from bookstore.utils.logging import get_logger

logger = get_logger(__name__)

BOOK_NOT_FOUND = "Không tìm thấy sách"

_REFERENCES = {
    "author_id": (Author, "Không tìm thấy tác giả"),
    "publisher_id": (Publisher, "Không tìm thấy nhà xuất bản"),
    "category_id": (Category, "Không tìm thấy danh mục"),
    "series_id": (BookSeries, "Không tìm thấy bộ sách"),
}
_UPDATABLE = (
    "title",
    "description",
    "isbn",
    "price",
    "stock",
    "status",
    "author_id",
    "publisher_id",
    "category_id",
    "series_id",
    "thumbnail_id",
)


@bookstore.command(part_of="Book")
class CreateBook:
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


@bookstore.command(part_of="Book")
class UpdateBook:
    book_id: Identifier(required=True)
    title: String(max_length=255)
    description: Text()
    isbn: String(max_length=20)
    price: Float()
    stock: Integer(min_value=0)
    status: String(choices=BookStatus)
    author_id: Identifier()
    publisher_id: Identifier()
    category_id: Identifier()
    series_id: Identifier()
    thumbnail_id: Identifier()
    gallery: Text()
    cleared_fields: Text()


@bookstore.command(part_of="Book")
class DeleteBook:
    book_id: Identifier(required=True)


def _ensure_references_live(values: dict) -> None:
    """A book may only point at live authors, publishers, categories and series."""
    for field, (element_cls, message) in _REFERENCES.items():
        if values.get(field):
            get_live(element_cls, values[field], message)


@bookstore.command_handler(part_of=Book)
class ManageBookHandler:
    @handle(CreateBook)
    def create_book(self, command):
        _ensure_references_live(
            {field: getattr(command, field) for field in _REFERENCES},
        )

        book = Book.create(
            title=command.title,
            price=command.price,
            stock=command.stock,
            status=command.status,
            description=command.description,
            isbn=command.isbn,
            author_id=command.author_id,
            publisher_id=command.publisher_id,
            category_id=command.category_id,
            series_id=command.series_id,
            thumbnail_id=command.thumbnail_id,
            gallery_media_ids=json.loads(command.gallery) if command.gallery else None,
            created_by=command.created_by,
        )
        current_domain.repository_for(Book).add(book)
        logger.info("book_created", book_id=str(book.id), series_id=book.series_id)
        return str(book.id)

    @handle(UpdateBook)
    def update_book(self, command):
        repo = current_domain.repository_for(Book)
        book = get_live(Book, command.book_id, BOOK_NOT_FOUND)

        changes = collect_changes(command, _UPDATABLE, command.cleared_fields)
        _ensure_references_live(changes)
        if command.gallery is not None:
            changes["gallery_media_ids"] = json.loads(command.gallery)

        book.update_details(**changes)
        repo.add(book)

    @handle(DeleteBook)
    def delete_book(self, command):
        repo = current_domain.repository_for(Book)
        book = get_live(Book, command.book_id, BOOK_NOT_FOUND)
        book.delete()
        repo.add(book)
        logger.info("book_deleted", book_id=str(book.id))
