"""Address book management: commands and handler.

Every command loads the owning User and lets the aggregate keep the
"at most one default address" rule; the handler's unit of work persists the
demotion of the old default and the promotion of the new one together.
"""

from protean import handle
from protean.fields import Boolean, Identifier, String, Text
from protean.utils.globals import current_domain

from bookstore.domain import bookstore
from bookstore.identity.registration import USER_NOT_FOUND
from bookstore.identity.user import User
from bookstore.shared.soft_delete import get_live
from bookstore.utils.logging import get_logger

logger = get_logger(__name__)


@bookstore.command(part_of="User")
class AddAddress:
    """Add a shipping address; ``is_default`` makes it the checkout default."""

    user_id: Identifier(required=True)
    name: String(required=True, max_length=100)
    phone: String(required=True, max_length=11)
    address: String(required=True, max_length=500)
    note: Text()
    is_default: Boolean(default=False)


@bookstore.command(part_of="User")
class UpdateAddress:
    """Change address fields. Omitted fields are left untouched."""

    user_id: Identifier(required=True)
    address_id: Identifier(required=True)
    name: String(max_length=100)
    phone: String(max_length=11)
    address: String(max_length=500)
    note: Text()
    clear_note: Boolean(default=False)
    is_default: Boolean()


@bookstore.command(part_of="User")
class RemoveAddress:
    user_id: Identifier(required=True)
    address_id: Identifier(required=True)


@bookstore.command(part_of="User")
class SetDefaultAddress:
    user_id: Identifier(required=True)
    address_id: Identifier(required=True)


@bookstore.command_handler(part_of=User)
class ManageAddressesHandler:
    @handle(AddAddress)
    def add_address(self, command):
        repo = current_domain.repository_for(User)
        user = get_live(User, command.user_id, USER_NOT_FOUND)

        address = user.add_address(
            name=command.name,
            phone=command.phone,
            address=command.address,
            note=command.note,
            is_default=bool(command.is_default),
        )
        repo.add(user)

        if command.is_default:
            logger.info("default_address_changed", user_id=str(user.id), address_id=str(address.id))
        return str(address.id)

    @handle(UpdateAddress)
    def update_address(self, command):
        repo = current_domain.repository_for(User)
        user = get_live(User, command.user_id, USER_NOT_FOUND)

        updates = {}
        for field in ("name", "phone", "address", "note", "is_default"):
            value = getattr(command, field, None)
            if value is not None:
                updates[field] = value
        if command.clear_note:
            updates["note"] = None

        address = user.update_address(command.address_id, **updates)
        repo.add(user)

        if updates.get("is_default") is True:
            logger.info("default_address_changed", user_id=str(user.id), address_id=str(address.id))
        return str(address.id)

    @handle(RemoveAddress)
    def remove_address(self, command):
        repo = current_domain.repository_for(User)
        user = get_live(User, command.user_id, USER_NOT_FOUND)

        address = user.remove_address(command.address_id)
        repo.add(user)
        logger.info("address_removed", user_id=str(user.id), address_id=str(address.id))

    @handle(SetDefaultAddress)
    def set_default_address(self, command):
        repo = current_domain.repository_for(User)
        user = get_live(User, command.user_id, USER_NOT_FOUND)

        address = user.set_default_address(command.address_id)
        repo.add(user)
        logger.info("default_address_changed", user_id=str(user.id), address_id=str(address.id))
        return str(address.id)
