"""Bookstore FastAPI application.

Every request runs inside the ``bookstore`` domain context so route handlers
can reach repositories and process commands through ``current_domain``.

Usage:
    uvicorn bookstore.app:create_app --factory --host 0.0.0.0 --port 8000 --reload
"""

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from bookstore.domain import bookstore


def create_app(init_domain: bool = True) -> FastAPI:
    """Build the application. Pass ``init_domain=False`` when the caller already initialized the domain."""
    from bookstore.api.errors import register_exception_handlers
    from bookstore.catalogue.api import admin_routers, public_router
    from bookstore.identity.api import address_router, user_router
    from bookstore.ordering.api import cart_router

    if init_domain:
        bookstore.init()

    app = FastAPI(
        title="Bookstore API",
        description="Online bookstore: identity, catalogue and shopping cart",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def domain_context_middleware(request: Request, call_next):
        """Push the Protean domain context for each request."""
        with bookstore.domain_context():
            return await call_next(request)

    register_exception_handlers(app)

    app.include_router(user_router)
    app.include_router(address_router)
    for router in admin_routers:
        app.include_router(router)
    app.include_router(public_router)
    app.include_router(cart_router)

    @app.get("/health")
    async def health():
        return JSONResponse(content={"status": "ok", "domain": bookstore.name})

    return app
