"""Domain events for the Author aggregate."""

from protean.fields import DateTime, Identifier, String

from bookstore.domain import bookstore


@bookstore.event(part_of="Author")
class AuthorCreated:
    __version__ = 1

    author_id: Identifier(required=True)
    name: String(required=True)


@bookstore.event(part_of="Author")
class AuthorUpdated:
    __version__ = 1

    author_id: Identifier(required=True)
    name: String(required=True)


@bookstore.event(part_of="Author")
class AuthorDeleted:
    """An author with no remaining books was removed from the catalogue."""

    __version__ = 1

    author_id: Identifier(required=True)
    deleted_at: DateTime(required=True)
