"""Media aggregate: metadata of an uploaded image.

The file bytes live with the upload service; the catalogue only keeps the
public URL and descriptive metadata that books, authors and categories point
at.
"""

from protean.fields import DateTime, Identifier, Integer, String

from bookstore.domain import bookstore
from bookstore.shared.soft_delete import utcnow


@bookstore.aggregate
class Media:
    filename: String(required=True, max_length=255)
    original_name: String(max_length=255)
    mime_type: String(required=True, max_length=100)
    size: Integer(min_value=0)
    path: String(max_length=500)
    url: String(required=True, max_length=500)
    uploaded_by: Identifier()
    created_at: DateTime()
    deleted_at: DateTime()

    @classmethod
    def register(cls, filename, mime_type, url, original_name=None, size=None, path=None, uploaded_by=None):
        from bookstore.catalogue.media.events import MediaRegistered

        media = cls(
            filename=filename,
            original_name=original_name,
            mime_type=mime_type,
            size=size,
            path=path,
            url=url,
            uploaded_by=uploaded_by,
            created_at=utcnow(),
        )
        media.raise_(MediaRegistered(media_id=media.id, url=url, mime_type=mime_type))
        return media

    def delete(self):
        from bookstore.catalogue.media.events import MediaDeleted

        self.deleted_at = utcnow()
        self.raise_(MediaDeleted(media_id=self.id, deleted_at=self.deleted_at))
