"""Media registration and removal.

Deleting media never touches the books, authors or categories pointing at it;
readers resolve a dangling reference to ``None``.
"""

from protean import handle
from protean.fields import Identifier, Integer, String
from protean.utils.globals import current_domain

from bookstore.catalogue.media.media import Media
from bookstore.domain import bookstore
from bookstore.shared.soft_delete import get_live
from bookstore.utils.logging import get_logger

logger = get_logger(__name__)

MEDIA_NOT_FOUND = "Không tìm thấy media"


@bookstore.command(part_of="Media")
class RegisterMedia:
    filename: String(required=True, max_length=255)
    original_name: String(max_length=255)
    mime_type: String(required=True, max_length=100)
    size: Integer(min_value=0)
    path: String(max_length=500)
    url: String(required=True, max_length=500)
    uploaded_by: Identifier()


@bookstore.command(part_of="Media")
class DeleteMedia:
    media_id: Identifier(required=True)


@bookstore.command_handler(part_of=Media)
class ManageMediaHandler:
    @handle(RegisterMedia)
    def register_media(self, command):
        media = Media.register(
            filename=command.filename,
            original_name=command.original_name,
            mime_type=command.mime_type,
            size=command.size,
            path=command.path,
            url=command.url,
            uploaded_by=command.uploaded_by,
        )
        current_domain.repository_for(Media).add(media)
        return str(media.id)

    @handle(DeleteMedia)
    def delete_media(self, command):
        repo = current_domain.repository_for(Media)
        media = get_live(Media, command.media_id, MEDIA_NOT_FOUND)
        media.delete()
        repo.add(media)
        logger.info("media_deleted", media_id=str(media.id))
