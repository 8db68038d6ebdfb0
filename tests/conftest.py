"""Test configuration and fixtures"""

import pytest
from datetime import datetime, timedelta
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession, async_sessionmaker
from uuid import uuid4

from mybot_api.main import app
from mybot_api.config import Settings
from mybot_api.database import Base, get_db
from mybot_api.models import Restaurant, Call


# Test database URL (use in-memory SQLite for tests)
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"

TEST_API_KEY = "test-api-key"

SEEDED_AT = datetime(2024, 1, 1, 12, 0, 0)


def make_settings(**overrides) -> Settings:
    values = {"database_url": TEST_DATABASE_URL, "mybot_api_key": TEST_API_KEY}
    values.update(overrides)
    return Settings(_env_file=None, **values)


@pytest.fixture
async def test_db():
    """Create test database"""
    engine = create_async_engine(TEST_DATABASE_URL, echo=False)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    session_factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

    async with session_factory() as session:
        yield session

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest.fixture
async def test_restaurant(test_db):
    """Create a test restaurant"""
    restaurant = Restaurant(
        id=uuid4(),
        name="Test Restaurant",
        timezone="America/New_York",
        language_default="en-US",
        public_phone="+15550001111",
        provider="twilio",
        provider_config={"voice": "alice"},
        created_at=SEEDED_AT,
        updated_at=SEEDED_AT,
    )
    test_db.add(restaurant)
    await test_db.commit()

    return restaurant


@pytest.fixture
async def test_calls(test_db, test_restaurant):
    """Two finished calls (60s and 120s, one with a reservation) and one active call"""
    base = datetime(2024, 1, 2, 18, 0, 0)
    calls = [
        Call(
            id=uuid4(),
            restaurant_id=test_restaurant.id,
            started_at=base,
            ended_at=base + timedelta(seconds=60),
            from_phone_e164="+15559876543",
            to_phone_e164="+15550001111",
            language_detected="en",
            flow="reservation",
            outcome="reservation_made",
            reservation_id=uuid4(),
            metadata_json={"party_size": 2},
        ),
        Call(
            id=uuid4(),
            restaurant_id=test_restaurant.id,
            started_at=base + timedelta(hours=1),
            ended_at=base + timedelta(hours=1, seconds=120),
            from_phone_e164="+15551112222",
            to_phone_e164="+15550001111",
            language_detected="es",
            flow="faq",
            outcome="faq_answered",
        ),
        Call(
            id=uuid4(),
            restaurant_id=test_restaurant.id,
            started_at=base + timedelta(hours=2),
            from_phone_e164="+15553334444",
            to_phone_e164="+15550001111",
            flow="greeting",
        ),
    ]

    for call in calls:
        test_db.add(call)

    await test_db.commit()
    return calls


@pytest.fixture
async def client(test_db):
    """Create test client with overridden database and settings"""
    async def override_get_db():
        yield test_db

    app.dependency_overrides[get_db] = override_get_db
    original_settings = app.state.settings
    app.state.settings = make_settings()

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client

    app.dependency_overrides.clear()
    app.state.settings = original_settings


@pytest.fixture
async def authenticated_client(client):
    """Create test client presenting the API key"""
    client.headers["x-api-key"] = TEST_API_KEY
    return client


@pytest.fixture
def api_key():
    return TEST_API_KEY


@pytest.fixture
def use_settings(client):
    """Swap the gate settings for the rest of the test; the client fixture restores them"""
    def apply(**overrides):
        app.state.settings = make_settings(**overrides)
    return apply
