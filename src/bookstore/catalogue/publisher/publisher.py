"""Publisher aggregate root."""

from protean.fields import DateTime, String

from bookstore.domain import bookstore
from bookstore.shared.soft_delete import utcnow


@bookstore.aggregate
class Publisher:
    name: String(required=True, max_length=255)
    address: String(max_length=500)
    phone: String(max_length=20)
    email: String(max_length=254)
    website: String(max_length=500)
    created_at: DateTime()
    updated_at: DateTime()
    deleted_at: DateTime()

    @classmethod
    def create(cls, name, address=None, phone=None, email=None, website=None):
        from bookstore.catalogue.publisher.events import PublisherCreated

        now = utcnow()
        publisher = cls(
            name=name,
            address=address,
            phone=phone,
            email=email,
            website=website,
            created_at=now,
            updated_at=now,
        )
        publisher.raise_(PublisherCreated(publisher_id=publisher.id, name=name))
        return publisher

    def update_details(self, **changes):
        from bookstore.catalogue.publisher.events import PublisherUpdated

        for field, value in changes.items():
            setattr(self, field, value)
        self.updated_at = utcnow()
        self.raise_(PublisherUpdated(publisher_id=self.id, name=self.name))

    def delete(self):
        from bookstore.catalogue.publisher.events import PublisherDeleted

        now = utcnow()
        self.deleted_at = now
        self.updated_at = now
        self.raise_(PublisherDeleted(publisher_id=self.id, deleted_at=now))
