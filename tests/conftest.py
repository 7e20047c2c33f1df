"""Shared fixtures: in-memory SQLite database and an authenticated API client."""

import os

os.environ["DATABASE_URL"] = "sqlite://"
os.environ["JWT_SECRET"] = "test-secret"

from datetime import datetime
from decimal import Decimal

import pytest
from fastapi.testclient import TestClient
from jose import jwt

from database import SessionLocal, drop_db, init_db
from schemas.agreement import AgreementCreate


@pytest.fixture
def db():
    init_db()
    session = SessionLocal()
    try:
        yield session
    finally:
        session.rollback()
        session.close()
        drop_db()


@pytest.fixture
def token():
    return jwt.encode({"id": 1, "role": "admin"}, "test-secret", algorithm="HS256")


@pytest.fixture
def client(token):
    from main import app

    init_db()
    test_client = TestClient(app)
    test_client.headers.update({"Authorization": f"Bearer {token}"})
    try:
        yield test_client
    finally:
        drop_db()


def make_agreement_data(**overrides) -> AgreementCreate:
    data = {
        "property_id": "property-1",
        "landlord_id": "landlord-1",
        "tenant_id": "tenant-1",
        "agent_id": None,
        "monthly_rent": Decimal("1000.00"),
        "currency": "USDC",
        "agent_commission_rate": Decimal("0"),
        "start_date": datetime(2026, 1, 1),
        "end_date": datetime(2027, 1, 1),
    }
    data.update(overrides)
    return AgreementCreate(**data)


@pytest.fixture
def agreement_data():
    return make_agreement_data
