"""Author management: commands and handlers."""

from protean import handle
from protean.fields import Identifier, String, Text
from protean.utils.globals import current_domain

from bookstore.catalogue.author.author import Author
from bookstore.catalogue.deletion import ensure_unused
from bookstore.domain import bookstore
from bookstore.shared.soft_delete import get_live
from bookstore.shared.updates import collect_changes
from bookstore.utils.logging import get_logger

logger = get_logger(__name__)

AUTHOR_NOT_FOUND = "Không tìm thấy tác giả"


@bookstore.command(part_of="Author")
class CreateAuthor:
    name: String(required=True, max_length=255)
    bio: Text()
    image_id: Identifier()


@bookstore.command(part_of="Author")
class UpdateAuthor:
    author_id: Identifier(required=True)
    name: String(max_length=255)
    bio: Text()
    image_id: Identifier()
    cleared_fields: Text()


@bookstore.command(part_of="Author")
class DeleteAuthor:
    author_id: Identifier(required=True)


@bookstore.command_handler(part_of=Author)
class ManageAuthorHandler:
    @handle(CreateAuthor)
    def create_author(self, command):
        author = Author.create(name=command.name, bio=command.bio, image_id=command.image_id)
        current_domain.repository_for(Author).add(author)
        return str(author.id)

    @handle(UpdateAuthor)
    def update_author(self, command):
        repo = current_domain.repository_for(Author)
        author = get_live(Author, command.author_id, AUTHOR_NOT_FOUND)
        author.update_details(**collect_changes(command, ("name", "bio", "image_id"), command.cleared_fields))
        repo.add(author)

    @handle(DeleteAuthor)
    def delete_author(self, command):
        repo = current_domain.repository_for(Author)
        author = get_live(Author, command.author_id, AUTHOR_NOT_FOUND)
        ensure_unused("author_id", author.id, "tác giả")

        author.delete()
        repo.add(author)
        logger.info("author_deleted", author_id=str(author.id))
