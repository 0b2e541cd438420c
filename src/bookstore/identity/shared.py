"""EmailAddress and PhoneNumber value objects."""

import re

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import String

from bookstore.domain import bookstore

_PHONE_PATTERN = re.compile(r"^[0-9]{10,11}$")


@bookstore.value_object
class EmailAddress:
    """A structurally valid email address: one @, non-empty parts, dotted domain."""

    address: String(required=True, max_length=254)

    @invariant.post
    def verify_email_address(self):
        email = self.address
        if email is None:
            return

        if any(ch.isspace() for ch in email) or email.count("@") != 1:
            raise ValidationError({"email": ["Email không hợp lệ"]})

        local_part, domain_part = email.split("@", 1)
        if not local_part or local_part.startswith(".") or local_part.endswith("."):
            raise ValidationError({"email": ["Email không hợp lệ"]})

        if "." not in domain_part or domain_part.startswith(".") or domain_part.endswith("."):
            raise ValidationError({"email": ["Email không hợp lệ"]})

        if ".." in email:
            raise ValidationError({"email": ["Email không hợp lệ"]})


@bookstore.value_object
class PhoneNumber:
    """Domestic phone number: 10 or 11 digits, nothing else."""

    number: String(required=True, max_length=11)

    @invariant.post
    def validate_phone_format(self):
        if self.number is None:
            return
        if not _PHONE_PATTERN.match(self.number):
            raise ValidationError({"phone": ["Số điện thoại không hợp lệ"]})
