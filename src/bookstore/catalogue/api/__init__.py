"""Catalogue API package."""

from bookstore.catalogue.api.routes import admin_routers, public_router

__all__ = ["admin_routers", "public_router"]
