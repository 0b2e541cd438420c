"""Domain errors shared across the bookstore areas."""

from protean.exceptions import ObjectNotFoundError, ValidationError


class InUse(ValidationError):
    """Deletion blocked because non-deleted books still reference the record."""

    def __init__(self, noun: str, count: int):
        self.count = count
        super().__init__({"_entity": [f"Không thể xóa {noun} này vì có {count} cuốn sách đang sử dụng"]})


class InsufficientStock(ValidationError):
    """Requested cart quantity exceeds the book's current stock."""

    def __init__(self, available: int):
        self.available = available
        super().__init__({"quantity": [f"Số lượng không đủ. Chỉ còn {available} cuốn"]})


class Forbidden(Exception):
    """The record exists but belongs to another user."""

    def __init__(self, message: str = "Forbidden"):
        self.message = message
        super().__init__(message)


def not_found(message: str) -> ObjectNotFoundError:
    return ObjectNotFoundError({"_entity": [message]})


def first_message(messages) -> str:
    """Flatten a Protean ``{field: [message]}`` payload into its first message."""
    if isinstance(messages, dict):
        for value in messages.values():
            return first_message(value)
        return ""
    if isinstance(messages, list | tuple):
        return first_message(messages[0]) if messages else ""
    return str(messages)
