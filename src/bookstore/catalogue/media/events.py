"""Domain events for the Media aggregate."""

from protean.fields import DateTime, Identifier, String

from bookstore.domain import bookstore


@bookstore.event(part_of="Media")
class MediaRegistered:
    __version__ = 1

    media_id: Identifier(required=True)
    url: String(required=True)
    mime_type: String(required=True)


@bookstore.event(part_of="Media")
class MediaDeleted:
    __version__ = 1

    media_id: Identifier(required=True)
    deleted_at: DateTime(required=True)
