"""Category aggregate root."""

from protean.fields import DateTime, Identifier, String, Text

from bookstore.domain import bookstore
from bookstore.shared.soft_delete import utcnow


@bookstore.aggregate
class Category:
    """A storefront grouping of books, addressed publicly by its slug."""

    name: String(required=True, max_length=100)
    slug: String(required=True, max_length=120)
    description: Text()
    image_id: Identifier()
    created_at: DateTime()
    updated_at: DateTime()
    deleted_at: DateTime()

    @classmethod
    def create(cls, name, slug, description=None, image_id=None):
        from bookstore.catalogue.category.events import CategoryCreated

        now = utcnow()
        category = cls(
            name=name,
            slug=slug,
            description=description,
            image_id=image_id,
            created_at=now,
            updated_at=now,
        )
        category.raise_(CategoryCreated(category_id=category.id, name=name, slug=slug))
        return category

    def update_details(self, **changes):
        from bookstore.catalogue.category.events import CategoryUpdated

        for field, value in changes.items():
            setattr(self, field, value)
        self.updated_at = utcnow()
        self.raise_(CategoryUpdated(category_id=self.id, name=self.name, slug=self.slug))

    def delete(self):
        from bookstore.catalogue.category.events import CategoryDeleted

        now = utcnow()
        self.deleted_at = now
        self.updated_at = now
        self.raise_(CategoryDeleted(category_id=self.id, deleted_at=now))
