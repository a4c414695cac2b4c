"""API test fixtures — FastAPI test client bound to the in-memory database.

Invariants:
    - get_db dependency overridden to use the test session factory
    - db_manager patched so readiness probes hit the test engine
    - seed_products inserts a known catalogue; ids are read back after commit
"""

import pytest
from httpx import ASGITransport, AsyncClient

from products_api.infrastructure.database import get_db, DatabaseSessionManager
from products_api.models.product import Product
import products_api.infrastructure.database as db_module
from products_api.main import app


@pytest.fixture
async def client(test_engine, test_session_factory):
    """FastAPI test client with DB dependency overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    original_manager = db_module.db_manager
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    db_module.db_manager = fake_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager


@pytest.fixture
async def seed_product(test_db):
    """A single available product."""
    product = Product(name="Mechanical keyboard", price=120)
    test_db.add(product)
    await test_db.commit()
    return product


@pytest.fixture
async def seed_products(test_db):
    """Six products, two of them unavailable."""
    products = [
        Product(name="Mouse", price=25),
        Product(name="Monitor 49 inches", price=900),
        Product(name="Laptop", price=1500, availability=False),
        Product(name="Headphones", price=200),
        Product(name="Webcam", price=80),
        Product(name="Desk", price=2000, availability=False),
    ]
    test_db.add_all(products)
    await test_db.commit()
    return products
