"""
Pytest configuration and fixtures for tests.

This file is automatically loaded by pytest and provides shared fixtures
and configuration for all tests.
"""

import os
import sys
from datetime import datetime
from unittest.mock import MagicMock

import pytest
import pytest_asyncio
from sqlalchemy import create_engine
from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession, async_sessionmaker
from sqlalchemy.orm import Session

# Set required environment variables before importing app modules
os.environ.setdefault('RUNTIME_ENVIRONMENT', 'TEST')
os.environ.setdefault('DB_URL', 'sqlite+aiosqlite:///:memory:')
os.environ.setdefault('LOG_MASK_SECRETS', 'true')

# Add parent directory to Python path so tests can import modules
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from models import Base, Vendor, Product, Category, ProductCategory
from services.notification import NotificationService


# ============================================================================
# Database Fixtures
# ============================================================================

@pytest.fixture
def engine():
    """Create in-memory SQLite database (sync)."""
    engine = create_engine("sqlite:///:memory:", echo=False)
    Base.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session(engine):
    """Create database session."""
    session = Session(engine)
    yield session
    session.rollback()
    session.close()


@pytest_asyncio.fixture
async def test_engine():
    """Create test database engine (in-memory SQLite, async)."""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        echo=False
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest_asyncio.fixture
async def test_session(test_engine):
    """Create test database session (async)."""
    async_session_maker = async_sessionmaker(
        test_engine,
        class_=AsyncSession,
        expire_on_commit=False
    )

    async with async_session_maker() as session:
        yield session
        await session.rollback()


# ============================================================================
# Catalog Fixtures
# ============================================================================

# id, name, unit price, product type, created at
CATALOG = [
    (1, "Canvas Sneaker", 50.0, "shoes", datetime(2024, 1, 1)),
    (2, "Beach Hat", 20.0, "hats", datetime(2024, 1, 3)),
    (3, "Trail Runner", 120.0, "shoes", datetime(2024, 1, 2)),
    (4, "Anorak", 90.0, "jackets", datetime(2024, 1, 5)),
    (5, "Deck Shoe", 70.0, "shoes", datetime(2024, 1, 4)),
    (6, "Wool Scarf", 30.0, "scarves", datetime(2024, 1, 6)),
]

SUMMER_CATEGORY_ID = 5
WINTER_CATEGORY_ID = 6


@pytest.fixture
def catalog(session):
    """
    Seed a small catalog.

    Category 5 ("summer") holds products 1-5, category 6 ("winter") holds
    product 6. Products 1-3 are sold by vendor "Acme Outdoor".
    """
    session.add(Vendor(id=1, name="Acme Outdoor"))
    session.add(Category(id=SUMMER_CATEGORY_ID, slug="summer", name="Summer"))
    session.add(Category(id=WINTER_CATEGORY_ID, slug="winter", name="Winter"))
    for product_id, name, price, product_type, created_at in CATALOG:
        session.add(Product(
            id=product_id,
            name=name,
            unit_price=price,
            currency="USD",
            in_stock=product_id != 4,
            primary_image=f"https://cdn.example.com/products/{product_id}.jpg",
            product_type=product_type,
            created_at=created_at,
            vendor_id=1 if product_id <= 3 else None
        ))
    session.flush()
    for product_id in range(1, 6):
        session.add(ProductCategory(product_id=product_id, category_id=SUMMER_CATEGORY_ID))
    session.add(ProductCategory(product_id=6, category_id=WINTER_CATEGORY_ID))
    session.commit()
    return session


# ============================================================================
# Notification Fixtures
# ============================================================================

@pytest.fixture
def toast_handler():
    """Register a mock toast handler for the duration of a test."""
    handler = MagicMock(return_value=None)
    NotificationService.set_toast_handler(handler)
    yield handler
    NotificationService.set_toast_handler(None)
