"""Domain events for the Category aggregate."""

from protean.fields import DateTime, Identifier, String

from bookstore.domain import bookstore


@bookstore.event(part_of="Category")
class CategoryCreated:
    """A new category was added to the storefront."""

    __version__ = 1

    category_id: Identifier(required=True)
    name: String(required=True)
    slug: String(required=True)


@bookstore.event(part_of="Category")
class CategoryUpdated:
    __version__ = 1

    category_id: Identifier(required=True)
    name: String(required=True)
    slug: String(required=True)


@bookstore.event(part_of="Category")
class CategoryDeleted:
    """A category with no remaining books was removed."""

    __version__ = 1

    category_id: Identifier(required=True)
    deleted_at: DateTime(required=True)
