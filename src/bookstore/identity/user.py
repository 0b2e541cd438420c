"""User aggregate root with the Address entity.

The address book lives inside the User aggregate so the single-default rule
is checked against every address of the user in one transactional boundary.
"""

from protean import atomic_change, invariant
from protean.exceptions import ValidationError
from protean.fields import Boolean, DateTime, HasMany, String, Text, ValueObject

from bookstore.domain import bookstore
from bookstore.identity.permissions import UserRole
from bookstore.identity.shared import EmailAddress, PhoneNumber
from bookstore.shared.errors import not_found
from bookstore.shared.soft_delete import is_deleted, live, utcnow

# Sentinel for distinguishing "not provided" from None in partial updates
_UNSET = object()

ADDRESS_NOT_FOUND = "Không tìm thấy địa chỉ"


@bookstore.entity(part_of="User")
class Address:
    """A shipping address in a user's address book.

    ``is_default`` marks the address checkout pre-selects. A soft-deleted
    address keeps its row but is never the default.
    """

    name: String(required=True, max_length=100)
    phone: ValueObject(PhoneNumber, required=True)
    address: String(required=True, max_length=500)
    note: Text()
    is_default: Boolean(default=False)
    created_at: DateTime()
    updated_at: DateTime()
    deleted_at: DateTime()


@bookstore.aggregate
class User:
    """A registered account and its address book."""

    email: ValueObject(EmailAddress, required=True)
    name: String(required=True, max_length=100)
    role: String(choices=UserRole, default=UserRole.CUSTOMER.value)
    addresses: HasMany(Address)
    created_at: DateTime()
    updated_at: DateTime()
    deleted_at: DateTime()

    @invariant.post
    def at_most_one_default_address(self):
        defaults = [a for a in live(self.addresses) if a.is_default]
        if len(defaults) > 1:
            raise ValidationError({"addresses": ["Only one address can be marked as default"]})

    @invariant.post
    def deleted_addresses_are_never_default(self):
        if any(a.is_default and is_deleted(a) for a in self.addresses):
            raise ValidationError({"addresses": ["A deleted address cannot be the default"]})

    @classmethod
    def register(cls, email, name, role=UserRole.CUSTOMER.value):
        from bookstore.identity.events import UserRegistered

        now = utcnow()
        user = cls(
            email=EmailAddress(address=email),
            name=name,
            role=role,
            created_at=now,
            updated_at=now,
        )
        user.raise_(
            UserRegistered(
                user_id=user.id,
                email=email,
                name=name,
                role=user.role,
                registered_at=now,
            )
        )
        return user

    def change_role(self, new_role):
        from bookstore.identity.events import UserRoleChanged

        previous_role = self.role
        self.role = new_role
        self.updated_at = utcnow()

        self.raise_(
            UserRoleChanged(
                user_id=self.id,
                previous_role=previous_role,
                new_role=new_role,
            )
        )

    def delete(self):
        from bookstore.identity.events import UserDeleted

        now = utcnow()
        self.deleted_at = now
        self.updated_at = now
        self.raise_(UserDeleted(user_id=self.id, deleted_at=now))

    # -------------------------------------------------------------------
    # Address book
    # -------------------------------------------------------------------
    def live_addresses(self):
        """Non-deleted addresses, default first, then newest first."""
        newest_first = sorted(live(self.addresses), key=lambda a: a.created_at, reverse=True)
        return sorted(newest_first, key=lambda a: not a.is_default)

    def find_address(self, address_id):
        address = next(
            (a for a in self.addresses if str(a.id) == str(address_id) and not is_deleted(a)),
            None,
        )
        if address is None:
            raise not_found(ADDRESS_NOT_FOUND)
        return address

    def default_address(self):
        return next((a for a in live(self.addresses) if a.is_default), None)

    def _promote(self, address):
        """Demote every other live default, then promote ``address``.

        Callers wrap this in ``atomic_change`` so the invariant is only checked
        once the swap is complete.
        """
        for other in live(self.addresses):
            if other.is_default and str(other.id) != str(address.id):
                other.is_default = False
        address.is_default = True

    def add_address(self, name, phone, address, note=None, is_default=False):
        from bookstore.identity.events import AddressAdded, DefaultAddressChanged

        previous_default = self.default_address()
        now = utcnow()

        with atomic_change(self):
            new_address = Address(
                name=name,
                phone=PhoneNumber(number=phone),
                address=address,
                note=note,
                is_default=False,
                created_at=now,
                updated_at=now,
            )
            self.add_addresses(new_address)
            if is_default:
                self._promote(new_address)

        self.updated_at = now
        self.raise_(
            AddressAdded(
                user_id=self.id,
                address_id=new_address.id,
                name=name,
                is_default=bool(is_default),
            )
        )
        if is_default:
            self.raise_(
                DefaultAddressChanged(
                    user_id=self.id,
                    address_id=new_address.id,
                    previous_default_address_id=previous_default.id if previous_default else None,
                )
            )
        return new_address

    def update_address(
        self,
        address_id,
        name=_UNSET,
        phone=_UNSET,
        address=_UNSET,
        note=_UNSET,
        is_default=_UNSET,
    ):
        from bookstore.identity.events import AddressUpdated

        target = self.find_address(address_id)
        now = utcnow()

        with atomic_change(self):
            if name is not _UNSET:
                target.name = name
            if phone is not _UNSET:
                target.phone = PhoneNumber(number=phone)
            if address is not _UNSET:
                target.address = address
            if note is not _UNSET:
                target.note = note
            if is_default is False:
                target.is_default = False
            target.updated_at = now

        self.raise_(
            AddressUpdated(
                user_id=self.id,
                address_id=target.id,
                name=target.name,
                address=target.address,
                note=target.note,
            )
        )

        if is_default is True:
            self.set_default_address(target.id)
        return target

    def remove_address(self, address_id):
        """Soft-delete an address. A removed default leaves the user with no default."""
        from bookstore.identity.events import AddressRemoved

        target = self.find_address(address_id)
        was_default = bool(target.is_default)
        now = utcnow()

        with atomic_change(self):
            target.is_default = False
            target.deleted_at = now
            target.updated_at = now

        self.raise_(
            AddressRemoved(
                user_id=self.id,
                address_id=target.id,
                was_default=was_default,
            )
        )
        return target

    def set_default_address(self, address_id):
        from bookstore.identity.events import DefaultAddressChanged

        target = self.find_address(address_id)
        previous_default = self.default_address()

        if previous_default is not None and str(previous_default.id) == str(target.id):
            return target

        with atomic_change(self):
            self._promote(target)

        self.raise_(
            DefaultAddressChanged(
                user_id=self.id,
                address_id=target.id,
                previous_default_address_id=previous_default.id if previous_default else None,
            )
        )
        return target
