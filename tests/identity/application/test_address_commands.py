"""Application tests for the address book handlers.

Each command runs in its own unit of work; reloading the user from the
repository shows what was committed.
"""

import pytest
from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from bookstore.identity.addresses import AddAddress, RemoveAddress, SetDefaultAddress, UpdateAddress
from bookstore.identity.registration import RegisterUser
from bookstore.identity.user import User


@pytest.fixture()
def user_id():
    return current_domain.process(
        RegisterUser(email="binh.tran@example.com", name="Trần Thị Bình"),
        asynchronous=False,
    )


def _add(user_id, name="Nhà riêng", is_default=False):
    return current_domain.process(
        AddAddress(
            user_id=user_id,
            name=name,
            phone="0912345678",
            address="45 Trần Hưng Đạo, Hà Nội",
            is_default=is_default,
        ),
        asynchronous=False,
    )


def _reload(user_id):
    return current_domain.repository_for(User).get(user_id)


def _default_ids(user_id):
    return [str(a.id) for a in _reload(user_id).addresses if a.is_default and a.deleted_at is None]


class TestAddAddressHandler:
    def test_add_address_persists(self, user_id):
        address_id = _add(user_id)
        address = _reload(user_id).find_address(address_id)
        assert address.name == "Nhà riêng"
        assert address.is_default is False

    def test_add_default_demotes_persisted_default(self, user_id):
        home = _add(user_id, is_default=True)
        office = _add(user_id, "Công ty", is_default=True)

        assert _default_ids(user_id) == [office]
        assert _reload(user_id).find_address(home).is_default is False

    def test_unknown_user_not_found(self):
        with pytest.raises(ObjectNotFoundError):
            _add("no-such-user")


class TestSetDefaultAddressHandler:
    def test_set_default_swaps(self, user_id):
        home = _add(user_id, is_default=True)
        office = _add(user_id, "Công ty")

        current_domain.process(SetDefaultAddress(user_id=user_id, address_id=office), asynchronous=False)
        assert _default_ids(user_id) == [office]
        assert _reload(user_id).find_address(home).is_default is False

    def test_address_of_other_user_not_found(self, user_id):
        other_id = current_domain.process(
            RegisterUser(email="cuong.le@example.com", name="Lê Văn Cường"), asynchronous=False
        )
        foreign = _add(other_id)

        with pytest.raises(ObjectNotFoundError):
            current_domain.process(SetDefaultAddress(user_id=user_id, address_id=foreign), asynchronous=False)

    def test_failed_promotion_keeps_previous_default(self, user_id, monkeypatch):
        home = _add(user_id, is_default=True)
        office = _add(user_id, "Công ty")

        class _BrokenLogger:
            def info(self, event, **fields):
                raise RuntimeError("log sink unavailable")

        monkeypatch.setattr("bookstore.identity.addresses.logger", _BrokenLogger())
        with pytest.raises(RuntimeError):
            current_domain.process(SetDefaultAddress(user_id=user_id, address_id=office), asynchronous=False)

        assert _default_ids(user_id) == [home]
        assert _reload(user_id).find_address(office).is_default is False


class TestUpdateAddressHandler:
    def test_partial_update_keeps_other_fields(self, user_id):
        home = _add(user_id)
        current_domain.process(UpdateAddress(user_id=user_id, address_id=home, name="Nhà mới"), asynchronous=False)

        address = _reload(user_id).find_address(home)
        assert address.name == "Nhà mới"
        assert address.address == "45 Trần Hưng Đạo, Hà Nội"

    def test_update_is_default_true(self, user_id):
        home = _add(user_id, is_default=True)
        office = _add(user_id, "Công ty")

        current_domain.process(UpdateAddress(user_id=user_id, address_id=office, is_default=True), asynchronous=False)
        assert _default_ids(user_id) == [office]
        assert home not in _default_ids(user_id)

    def test_clear_note(self, user_id):
        home = current_domain.process(
            AddAddress(user_id=user_id, name="Nhà", phone="0912345678", address="1 Hàng Bài", note="Cổng sau"),
            asynchronous=False,
        )
        current_domain.process(UpdateAddress(user_id=user_id, address_id=home, clear_note=True), asynchronous=False)
        assert _reload(user_id).find_address(home).note is None


class TestRemoveAddressHandler:
    def test_remove_default_leaves_no_default(self, user_id):
        home = _add(user_id, is_default=True)
        _add(user_id, "Công ty")

        current_domain.process(RemoveAddress(user_id=user_id, address_id=home), asynchronous=False)

        user = _reload(user_id)
        assert _default_ids(user_id) == []
        assert [a.name for a in user.live_addresses()] == ["Công ty"]

    def test_remove_twice_not_found(self, user_id):
        home = _add(user_id)
        current_domain.process(RemoveAddress(user_id=user_id, address_id=home), asynchronous=False)

        with pytest.raises(ObjectNotFoundError):
            current_domain.process(RemoveAddress(user_id=user_id, address_id=home), asynchronous=False)
