"""Catalogue bounded context.

Protean's auto-discovery only scans one directory level below the domain
file, so the aggregate packages below are imported here to register their
elements before ``bookstore.init()``.
"""

from bookstore.catalogue.author import author, events, management  # noqa: F401
from bookstore.catalogue.book import book, events, management  # noqa: F401,F811
from bookstore.catalogue.category import category, events, management  # noqa: F401,F811
from bookstore.catalogue.media import events, management, media  # noqa: F401,F811
from bookstore.catalogue.publisher import events, management, publisher  # noqa: F401,F811
from bookstore.catalogue.series import events, management, series  # noqa: F401,F811
