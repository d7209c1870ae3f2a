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


def pytest_sessionstart(session):
    """Select the config overlay before the domain module is imported."""
    os.environ["PROTEAN_ENV"] = session.config.option.env
    # Minimum bcrypt cost keeps account fixtures fast
    os.environ.setdefault("BCRYPT_ROUNDS", "4")


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their directory location."""
    for item in items:
        test_path = str(Path(item.fspath))

        if "/domain/" in test_path:
            item.add_marker(pytest.mark.domain)
        elif "/application/" in test_path:
            item.add_marker(pytest.mark.application)
        elif "/bdd/" in test_path:
            item.add_marker(pytest.mark.bdd)
        elif "/integration/" in test_path:
            item.add_marker(pytest.mark.integration)
            # Integration tests are often slower
            if not any(m.name == "fast" for m in item.iter_markers()):
                item.add_marker(pytest.mark.slow)


@pytest.fixture(scope="session")
def _storefront_domain():
    """Initialize the storefront domain once per session."""
    from storefront.bootstrap import init_storefront

    return init_storefront()


@pytest.fixture(scope="session", autouse=True)
def setup_db(_storefront_domain):
    from storefront.utils.db import drop_db, setup_db

    setup_db(_storefront_domain)

    yield

    drop_db(_storefront_domain)


@pytest.fixture(autouse=True)
def run_around_tests(_storefront_domain):
    """Push domain context before each test, cleanup after."""
    ctx = _storefront_domain.domain_context()
    ctx.push()

    yield

    from protean import current_domain

    for _, provider in current_domain.providers.items():
        provider._data_reset()

    current_domain.event_store.store._data_reset()
    ctx.pop()


# ---------------------------------------------------------------------------
# Factories
# ---------------------------------------------------------------------------
DEFAULT_PASSWORD = "Passw0rd!"


@pytest.fixture()
def make_category():
    from protean import current_domain

    from storefront.catalogue.category.category import Category

    def _make(name="Electronics", description=None):
        return current_domain.repository_for(Category).create(name=name, description=description)

    return _make


@pytest.fixture()
def category(make_category):
    return make_category()


@pytest.fixture()
def make_product(category):
    from protean import current_domain

    from storefront.catalogue.product.product import Product

    def _make(name="Widget", price=10.0, stock=5, category_id=None, description=None, image_url=None):
        return current_domain.repository_for(Product).create(
            name=name,
            price=price,
            stock=stock,
            category_id=category_id or category.id,
            description=description,
            image_url=image_url,
        )

    return _make


@pytest.fixture()
def make_user():
    from protean import current_domain

    from storefront.identity.user.user import User

    def _make(username="johndoe", email=None, password=DEFAULT_PASSWORD, name=None, role="customer"):
        return current_domain.repository_for(User).create(
            username=username,
            email=email or f"{username}@example.com",
            password=password,
            name=name,
            role=role,
        )

    return _make


@pytest.fixture()
def user(make_user):
    return make_user()


@pytest.fixture()
def cart(user):
    from protean import current_domain

    from storefront.ordering.cart.cart import Cart

    return current_domain.repository_for(Cart).get_or_create(user.id)
