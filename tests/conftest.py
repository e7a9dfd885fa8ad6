from __future__ import annotations

import os

os.environ.setdefault("JWT_SECRET_KEY", "test-secret")
os.environ.setdefault("DATABASE_URL", "sqlite://")

from datetime import datetime

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from cattime.core import security
from cattime.core.clock import FixedClock, get_clock
from cattime.db import models
from cattime.db.session import get_db
from cattime.main import app

PASSWORD = "katze123"

ADMIN_ID = 1
EMPLOYEE_ID = 7
COLLEAGUE_ID = 8
COMPANY_ID = 3


@pytest.fixture(scope="session")
def password_hash() -> str:
    return security.get_password_hash(PASSWORD)


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    models.Base.metadata.create_all(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db(session_factory, password_hash):
    session = session_factory()
    session.add_all([
        models.Employee(id=ADMIN_ID, company_id=COMPANY_ID, email="admin@cattime.de", full_name="Ada Admin",
                        hashed_password=password_hash, role="admin"),
        models.Employee(id=EMPLOYEE_ID, company_id=COMPANY_ID, email="mia@cattime.de", full_name="Mia Muster",
                        hashed_password=password_hash, role="employee"),
        models.Employee(id=COLLEAGUE_ID, company_id=COMPANY_ID, email="tom@cattime.de", full_name="Tom Kollege",
                        hashed_password=password_hash, role="employee"),
    ])
    session.commit()
    yield session
    session.close()


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock(datetime(2024, 5, 1, 9, 0, 0))


@pytest.fixture
def client(db, session_factory, clock):
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_clock] = lambda: clock
    yield TestClient(app)
    app.dependency_overrides.clear()


def auth_headers(employee_id: int) -> dict[str, str]:
    return {"Authorization": f"Bearer {security.create_access_token(employee_id)}"}


@pytest.fixture
def employee_headers():
    return auth_headers(EMPLOYEE_ID)


@pytest.fixture
def colleague_headers():
    return auth_headers(COLLEAGUE_ID)


@pytest.fixture
def admin_headers():
    return auth_headers(ADMIN_ID)
