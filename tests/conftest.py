"""
Pytest configuration and fixtures.
"""

import os

import bcrypt

os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("ADMIN_USERNAME", "admin")
TEST_ADMIN_PASSWORD = "test-admin-password"
os.environ["ADMIN_PASSWORD_HASH"] = bcrypt.hashpw(
    TEST_ADMIN_PASSWORD.encode("utf-8"), bcrypt.gensalt(rounds=4)
).decode("utf-8")

from datetime import timedelta
from typing import AsyncGenerator

import pytest
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from lingam.app.main import app
from lingam.app.api.deps import get_services
from lingam.app.core.config import get_settings
from lingam.app.core.database import create_tables
from lingam.app.core.security import Role, ROLE_SCOPES, create_access_token
from lingam.app.schemas.appointments import Appointment
from lingam.app.schemas.customers import Customer
from lingam.app.schemas.testimonials import Testimonial
from lingam.app.services import (
    AppointmentService,
    CustomerService,
    EntityStore,
    KeyValueStorage,
    ServiceRegistry,
    TestimonialService as ModerationService,
    build_services,
)

# Use in-memory SQLite for testing; a new engine means a new empty database
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest.fixture
async def test_engine() -> AsyncGenerator[AsyncEngine, None]:
    engine = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    await create_tables(bind=engine)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(test_engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Returns the session factory for testing."""
    return async_sessionmaker(test_engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
def storage(session_factory) -> KeyValueStorage:
    return KeyValueStorage(session_factory)


@pytest.fixture
async def appointment_store(storage) -> EntityStore[Appointment]:
    store = EntityStore(storage, "test-appointments", Appointment)
    await store.load()
    return store


@pytest.fixture
async def appointment_service(appointment_store) -> AppointmentService:
    return AppointmentService(appointment_store)


@pytest.fixture
async def customer_service(storage) -> CustomerService:
    store = EntityStore(storage, "test-customers", Customer)
    await store.load()
    return CustomerService(store)


@pytest.fixture
async def testimonial_service(storage) -> ModerationService:
    store = EntityStore(storage, "test-testimonials", Testimonial)
    await store.load()
    return ModerationService(store)


@pytest.fixture
async def services(session_factory) -> ServiceRegistry:
    return await build_services(session_factory, get_settings())


@pytest.fixture
async def client(services: ServiceRegistry) -> AsyncGenerator[AsyncClient, None]:
    """
    Test client with the service registry overridden.
    """
    app.dependency_overrides[get_services] = lambda: services

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as c:
        yield c

    app.dependency_overrides.clear()


@pytest.fixture
def admin_headers() -> dict:
    token = create_access_token(
        {"sub": "admin", "role": Role.ADMIN, "scopes": ROLE_SCOPES[Role.ADMIN]},
        expires_delta=timedelta(minutes=5),
    )
    return {"Authorization": f"Bearer {token}"}
