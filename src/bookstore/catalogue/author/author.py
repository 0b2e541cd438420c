"""Author aggregate root."""

from protean.fields import DateTime, Identifier, String, Text

from bookstore.domain import bookstore
from bookstore.shared.soft_delete import utcnow


@bookstore.aggregate
class Author:
    name: String(required=True, max_length=255)
    bio: Text()
    image_id: Identifier()
    created_at: DateTime()
    updated_at: DateTime()
    deleted_at: DateTime()

    @classmethod
    def create(cls, name, bio=None, image_id=None):
        from bookstore.catalogue.author.events import AuthorCreated

        now = utcnow()
        author = cls(name=name, bio=bio, image_id=image_id, created_at=now, updated_at=now)
        author.raise_(AuthorCreated(author_id=author.id, name=name))
        return author

    def update_details(self, **changes):
        from bookstore.catalogue.author.events import AuthorUpdated

        for field, value in changes.items():
            setattr(self, field, value)
        self.updated_at = utcnow()
        self.raise_(AuthorUpdated(author_id=self.id, name=self.name))

    def delete(self):
        from bookstore.catalogue.author.events import AuthorDeleted

        now = utcnow()
        self.deleted_at = now
        self.updated_at = now
        self.raise_(AuthorDeleted(author_id=self.id, deleted_at=now))
