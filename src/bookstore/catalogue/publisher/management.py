"""Publisher management: commands and handlers."""

from protean import handle
from protean.fields import Identifier, String, Text
from protean.utils.globals import current_domain

from bookstore.catalogue.deletion import ensure_unused
from bookstore.catalogue.publisher.publisher import Publisher
from bookstore.domain import bookstore
from bookstore.shared.soft_delete import get_live
from bookstore.shared.updates import collect_changes
from bookstore.utils.logging import get_logger

logger = get_logger(__name__)

PUBLISHER_NOT_FOUND = "Không tìm thấy nhà xuất bản"
_FIELDS = ("name", "address", "phone", "email", "website")


@bookstore.command(part_of="Publisher")
class CreatePublisher:
    name: String(required=True, max_length=255)
    address: String(max_length=500)
    phone: String(max_length=20)
    email: String(max_length=254)
    website: String(max_length=500)


@bookstore.command(part_of="Publisher")
class UpdatePublisher:
    publisher_id: Identifier(required=True)
    name: String(max_length=255)
    address: String(max_length=500)
    phone: String(max_length=20)
    email: String(max_length=254)
    website: String(max_length=500)
    cleared_fields: Text()


@bookstore.command(part_of="Publisher")
class DeletePublisher:
    publisher_id: Identifier(required=True)


@bookstore.command_handler(part_of=Publisher)
class ManagePublisherHandler:
    @handle(CreatePublisher)
    def create_publisher(self, command):
        publisher = Publisher.create(**{field: getattr(command, field) for field in _FIELDS})
        current_domain.repository_for(Publisher).add(publisher)
        return str(publisher.id)

    @handle(UpdatePublisher)
    def update_publisher(self, command):
        repo = current_domain.repository_for(Publisher)
        publisher = get_live(Publisher, command.publisher_id, PUBLISHER_NOT_FOUND)
        publisher.update_details(**collect_changes(command, _FIELDS, command.cleared_fields))
        repo.add(publisher)

    @handle(DeletePublisher)
    def delete_publisher(self, command):
        repo = current_domain.repository_for(Publisher)
        publisher = get_live(Publisher, command.publisher_id, PUBLISHER_NOT_FOUND)
        ensure_unused("publisher_id", publisher.id, "nhà xuất bản")

        publisher.delete()
        repo.add(publisher)
        logger.info("publisher_deleted", publisher_id=str(publisher.id))
