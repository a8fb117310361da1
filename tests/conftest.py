"""
Shared fixtures.

Every test gets a fresh in-memory SQLite database. ``StaticPool`` keeps a
single connection so the schema and the rows written by the ``db`` fixture
are visible to the sessions the API opens per request.
"""

import os
from datetime import timedelta

os.environ["DATABASE_URL"] = "sqlite://"
os.environ["SEED_SAMPLE_DATA"] = "false"
os.environ["DB_LOG_SLOW_QUERIES"] = "false"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from dancesite.database import Base, enable_sqlite_foreign_keys, get_db
from dancesite.main import app
from dancesite.models import (
    Booking,
    BookingStatus,
    Client,
    ClientType,
    LocationType,
    ServiceOffering,
    ServiceType,
    utcnow,
)


@pytest.fixture
def engine():
    test_engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    enable_sqlite_foreign_keys(test_engine)
    Base.metadata.create_all(bind=test_engine)
    yield test_engine
    Base.metadata.drop_all(bind=test_engine)
    test_engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db(session_factory) -> Session:
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(session_factory):
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def seeded_client(db: Session) -> Client:
    record = Client(
        id=1,
        name="Test Client",
        email="testclient@example.com",
        phone="+46123456789",
        client_type=ClientType.STUDENT,
        created_at_utc=utcnow(),
    )
    db.add(record)
    db.commit()
    db.refresh(record)
    return record


@pytest.fixture
def seeded_offering(db: Session) -> ServiceOffering:
    record = ServiceOffering(
        id=1,
        name="Private class 60 min",
        service_type=ServiceType.PRIVATE_LESSON,
        base_price_sek=800.0,
        duration_minutes=60,
        is_active=True,
        created_at_utc=utcnow(),
    )
    db.add(record)
    db.commit()
    db.refresh(record)
    return record


@pytest.fixture
def make_booking(db: Session, seeded_client: Client, seeded_offering: ServiceOffering):
    """Insert a booking directly, bypassing the create rules (any status, any date)"""

    def _make(
        status: BookingStatus = BookingStatus.PENDING,
        days_ahead: float = 5,
        created_offset_minutes: float = 0,
        client_id: int = None,
        service_offering_id: int = None,
        **fields,
    ) -> Booking:
        now = utcnow()
        booking = Booking(
            client_id=client_id or seeded_client.id,
            service_offering_id=service_offering_id or seeded_offering.id,
            preferred_date_time=now + timedelta(days=days_ahead),
            location_type=fields.pop("location_type", LocationType.ON_SITE),
            status=status,
            created_at_utc=now + timedelta(minutes=created_offset_minutes),
            **fields,
        )
        db.add(booking)
        db.commit()
        db.refresh(booking)
        return booking

    return _make
