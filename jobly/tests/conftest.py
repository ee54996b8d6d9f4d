"""Test configuration and fixtures."""

import os
from decimal import Decimal

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

os.environ.setdefault("DATABASE_URL", "sqlite:///:memory:")
os.environ["TESTING"] = "true"  # Disable rate limiting in tests
DEFAULT_ADMIN_PASSWORD = os.environ.setdefault("ADMIN_DEFAULT_PASSWORD", "Admin123!")

from jobly.core.auth import create_access_token, get_password_hash  # noqa: E402
from jobly.db import Base, get_db  # noqa: E402
from jobly.db.models import Company, Job, User  # noqa: E402
from jobly.main import app  # noqa: E402 - must set env vars before importing

SQLALCHEMY_DATABASE_URL = "sqlite:///:memory:"

engine = create_engine(
    SQLALCHEMY_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db_session():
    """Create a fresh database session for each test."""
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(db_session):
    """Create a test client with overridden database dependency."""

    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def companies(db_session):
    """Three companies c1..c3 with 1, 2 and 3 employees."""
    rows = [
        Company(
            handle=f"c{n}",
            name=f"C{n}",
            num_employees=n,
            description=f"Desc{n}",
            logo_url=f"http://c{n}.img",
        )
        for n in (1, 2, 3)
    ]
    db_session.add_all(rows)
    db_session.commit()
    return rows


@pytest.fixture
def jobs(db_session, companies):
    """Jobs j1..j3 with salaries 1, 2, 3 and equities 0.01, 0.02, 0."""
    rows = [
        Job(title="j1", salary=1, equity=Decimal("0.01"), company_handle="c1"),
        Job(title="j2", salary=2, equity=Decimal("0.02"), company_handle="c2"),
        Job(title="j3", salary=3, equity=Decimal("0"), company_handle="c3"),
    ]
    db_session.add_all(rows)
    db_session.commit()
    for row in rows:
        db_session.refresh(row)
    return rows


def _make_user(db_session, username: str, password: str, is_admin: bool) -> User:
    user = User(
        username=username,
        password=get_password_hash(password),
        first_name=username.upper(),
        last_name="Tester",
        email=f"{username}@example.com",
        is_admin=is_admin,
    )
    db_session.add(user)
    db_session.commit()
    db_session.refresh(user)
    return user


@pytest.fixture
def admin_user(db_session):
    """Create an admin user for testing."""
    return _make_user(db_session, "admin", DEFAULT_ADMIN_PASSWORD, is_admin=True)


@pytest.fixture
def regular_user(db_session):
    """Create a non-admin user for testing."""
    return _make_user(db_session, "u1", "password1", is_admin=False)


@pytest.fixture
def other_user(db_session):
    """Create a second non-admin user for testing."""
    return _make_user(db_session, "u2", "password2", is_admin=False)


@pytest.fixture
def auth_headers(client, admin_user):
    """Get authentication headers for admin user."""
    response = client.post(
        "/auth/token",
        json={"username": "admin", "password": DEFAULT_ADMIN_PASSWORD},
    )
    token = response.json()["access_token"]
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def user_headers(regular_user):
    """Bearer headers for the non-admin user, minted directly."""
    return {"Authorization": f"Bearer {create_access_token(regular_user)}"}
