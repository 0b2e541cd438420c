"""Soft-delete read boundary.

Every persisted record carries a nullable ``deleted_at`` tombstone. Nothing
filters tombstoned records implicitly: reads go through these helpers so the
rule stays visible at each call site.
"""

from datetime import UTC, datetime

from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from bookstore.shared.errors import not_found


def utcnow() -> datetime:
    return datetime.now(UTC)


def is_deleted(record) -> bool:
    return record.deleted_at is not None


def live(records):
    """Drop tombstoned records, preserving order."""
    return [record for record in records if record.deleted_at is None]


def _live_query(element_cls, **criteria):
    """Queryset over non-tombstoned records, filtered in the store."""
    queryset = current_domain.repository_for(element_cls)._dao.query
    return queryset.filter(deleted_at__isnull=True, **criteria)


def find_live(element_cls, **criteria):
    """Every non-tombstoned ``element_cls`` record matching ``criteria``."""
    return _live_query(element_cls, **criteria).limit(None).all().items


def count_live(element_cls, **criteria) -> int:
    return _live_query(element_cls, **criteria).count()


def get_live(element_cls, identifier, message: str):
    """Load a record by id, treating tombstoned records as missing."""
    try:
        record = current_domain.repository_for(element_cls).get(identifier)
    except ObjectNotFoundError:
        raise not_found(message) from None

    if is_deleted(record):
        raise not_found(message)
    return record


def find_live_or_none(element_cls, identifier):
    """Like :func:`get_live` but returns ``None`` for a missing reference."""
    if not identifier:
        return None
    try:
        record = current_domain.repository_for(element_cls).get(identifier)
    except ObjectNotFoundError:
        return None
    return None if is_deleted(record) else record


def find_all(element_cls, **criteria):
    """Query the store including tombstoned records."""
    queryset = current_domain.repository_for(element_cls)._dao.query
    if criteria:
        queryset = queryset.filter(**criteria)
    return list(queryset.limit(None).all().items)
