"""Ordering bounded context.

Protean's auto-discovery only scans one directory level below the domain
file, so the cart modules are imported here to register their elements
before ``bookstore.init()``.
"""

from bookstore.ordering.cart import cart, events, items, repository  # noqa: F401
