"""Domain events for the Publisher aggregate."""

from protean.fields import DateTime, Identifier, String

from bookstore.domain import bookstore


@bookstore.event(part_of="Publisher")
class PublisherCreated:
    __version__ = 1

    publisher_id: Identifier(required=True)
    name: String(required=True)


@bookstore.event(part_of="Publisher")
class PublisherUpdated:
    __version__ = 1

    publisher_id: Identifier(required=True)
    name: String(required=True)


@bookstore.event(part_of="Publisher")
class PublisherDeleted:
    __version__ = 1

    publisher_id: Identifier(required=True)
    deleted_at: DateTime(required=True)
