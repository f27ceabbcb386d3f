"""
Pytest configuration and fixtures for testing.
"""
import pytest
from datetime import date
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

import app.models  # noqa: F401
from app.database.session import Base, get_db
from app.models.user import User
from app.models.vehicle import Vehicle
from app.utils.clock import FixedClock, get_clock
from main import app


# Test database URL - using in-memory SQLite for tests
SQLALCHEMY_TEST_DATABASE_URL = "sqlite:///:memory:"

# Every test runs on the same calendar day
TODAY = date(2026, 3, 1)


@pytest.fixture(scope="function")
def test_db():
    """
    Create a fresh test database for each test function.
    """
    engine = create_engine(
        SQLALCHEMY_TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    TestingSessionLocal = sessionmaker(autoflush=False, bind=engine)
    db = TestingSessionLocal()

    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def clock():
    return FixedClock(TODAY)


@pytest.fixture(scope="function")
def client(test_db, clock):
    """
    Create a test client with database and clock overrides.
    """
    def override_get_db():
        try:
            yield test_db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_clock] = lambda: clock

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture(scope="function")
def test_user(test_db):
    user = User(username="9876543210", mobile="9876543210", is_verified=True)
    test_db.add(user)
    test_db.commit()
    test_db.refresh(user)
    return user


@pytest.fixture(scope="function")
def other_user(test_db):
    user = User(username="other@example.com", email="other@example.com", is_verified=True)
    test_db.add(user)
    test_db.commit()
    test_db.refresh(user)
    return user


@pytest.fixture(scope="function")
def make_vehicle(test_db):
    """Factory for vehicles; keyword arguments override the defaults."""
    counter = {"n": 0}

    def _make(user, **overrides):
        counter["n"] += 1
        data = {
            "user_id": user.user_id,
            "make": "Maruti Suzuki",
            "model": "Swift",
            "year": 2021,
            "color": "White",
            "license_plate": f"KA01AB{1000 + counter['n']}",
            "owner_name": "Test Owner",
        }
        data.update(overrides)
        vehicle = Vehicle(**data)
        test_db.add(vehicle)
        test_db.commit()
        test_db.refresh(vehicle)
        return vehicle

    return _make
