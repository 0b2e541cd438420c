"""Domain events for the User aggregate."""

from protean.fields import Boolean, DateTime, Identifier, String

from bookstore.domain import bookstore


@bookstore.event(part_of="User")
class UserRegistered:
    """A new account was created."""

    __version__ = 1

    user_id: Identifier(required=True)
    email: String(required=True)
    name: String(required=True)
    role: String(required=True)
    registered_at: DateTime(required=True)


@bookstore.event(part_of="User")
class UserRoleChanged:
    """An administrator moved a user to a different role."""

    __version__ = 1

    user_id: Identifier(required=True)
    previous_role: String(required=True)
    new_role: String(required=True)


@bookstore.event(part_of="User")
class UserDeleted:
    """A user account was soft-deleted."""

    __version__ = 1

    user_id: Identifier(required=True)
    deleted_at: DateTime(required=True)


@bookstore.event(part_of="User")
class AddressAdded:
    """A shipping address was added to a user's address book."""

    __version__ = 1

    user_id: Identifier(required=True)
    address_id: Identifier(required=True)
    name: String(required=True)
    is_default: Boolean(default=False)


@bookstore.event(part_of="User")
class AddressUpdated:
    """Fields of an existing shipping address were changed."""

    __version__ = 1

    user_id: Identifier(required=True)
    address_id: Identifier(required=True)
    name: String()
    address: String()
    note: String()


@bookstore.event(part_of="User")
class AddressRemoved:
    """A shipping address was soft-deleted."""

    __version__ = 1

    user_id: Identifier(required=True)
    address_id: Identifier(required=True)
    was_default: Boolean(default=False)


@bookstore.event(part_of="User")
class DefaultAddressChanged:
    """A different address became the user's checkout default."""

    __version__ = 1

    user_id: Identifier(required=True)
    address_id: Identifier(required=True)
    previous_default_address_id: Identifier()
