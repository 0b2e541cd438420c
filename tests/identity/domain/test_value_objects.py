"""Tests for EmailAddress and PhoneNumber value objects."""

import pytest
from protean.exceptions import ValidationError

from bookstore.identity.shared import EmailAddress, PhoneNumber


class TestEmailAddress:
    def test_valid_email(self):
        assert EmailAddress(address="an.nguyen@example.com").address == "an.nguyen@example.com"

    @pytest.mark.parametrize("value", ["no-at-sign", "two@@example.com", "a b@example.com", "user@localhost"])
    def test_invalid_email(self, value):
        with pytest.raises(ValidationError):
            EmailAddress(address=value)


class TestPhoneNumber:
    @pytest.mark.parametrize("value", ["0901234567", "09012345678"])
    def test_ten_or_eleven_digits(self, value):
        assert PhoneNumber(number=value).number == value

    @pytest.mark.parametrize("value", ["090123456", "09012a4567", "+84901234567"])
    def test_invalid_phone(self, value):
        with pytest.raises(ValidationError):
            PhoneNumber(number=value)
