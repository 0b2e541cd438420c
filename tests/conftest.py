import os
from pathlib import Path

import pytest


def pytest_addoption(parser):
    parser.addoption(
        "--env",
        action="store",
        default="test",
        help="Config environment to run tests on",
    )


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their directory location."""
    for item in items:
        test_path = str(Path(item.fspath))

        if "/domain/" in test_path:
            item.add_marker(pytest.mark.domain)
        elif "/application/" in test_path:
            item.add_marker(pytest.mark.application)
        elif "/integration/" in test_path:
            item.add_marker(pytest.mark.integration)
            if not any(m.name == "fast" for m in item.iter_markers()):
                item.add_marker(pytest.mark.slow)


@pytest.fixture(scope="session")
def _bookstore_domain(request):
    """Initialize the bookstore domain once per session."""
    os.environ["PROTEAN_ENV"] = request.config.option.env

    from bookstore.domain import bookstore

    bookstore.init()
    return bookstore


@pytest.fixture(scope="session", autouse=True)
def setup_db(_bookstore_domain):
    from bookstore.utils.db import drop_db, setup_db

    setup_db(_bookstore_domain)

    yield

    drop_db(_bookstore_domain)


@pytest.fixture(autouse=True)
def run_around_tests(_bookstore_domain):
    """Push domain context before each test, cleanup after."""
    ctx = _bookstore_domain.domain_context()
    ctx.push()

    yield

    from protean import current_domain

    for _, provider in current_domain.providers.items():
        provider._data_reset()

    current_domain.event_store.store._data_reset()
    ctx.pop()


@pytest.fixture()
def client(_bookstore_domain):
    """HTTP client against the full application; the domain is already initialized."""
    from fastapi.testclient import TestClient

    from bookstore.app import create_app

    return TestClient(create_app(init_domain=False))


@pytest.fixture()
def staff_headers():
    return {"X-User-Id": "staff-1", "X-User-Role": "STAFF"}


@pytest.fixture()
def customer_headers():
    return {"X-User-Id": "customer-1", "X-User-Role": "CUSTOMER"}


@pytest.fixture()
def make_book():
    """Factory that creates a book through ``CreateBook`` and returns its id."""
    from protean.utils.globals import current_domain

    from bookstore.catalogue.book.management import CreateBook

    def _make_book(**overrides):
        values = {"title": "Dế Mèn phiêu lưu ký", "price": 85000.0, "stock": 10}
        values.update(overrides)
        return current_domain.process(CreateBook(**values), asynchronous=False)

    return _make_book
