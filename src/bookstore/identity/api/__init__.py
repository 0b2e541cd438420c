"""Identity API package."""

from bookstore.identity.api.routes import address_router, user_router

__all__ = ["user_router", "address_router"]
