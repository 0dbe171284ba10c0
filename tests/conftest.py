from datetime import datetime, timezone

import mongomock
import pytest
from fastapi.testclient import TestClient

from database import get_db
from main import app, create_token


@pytest.fixture
def db():
    return mongomock.MongoClient()["flourish_test"]


@pytest.fixture
def client(db):
    app.dependency_overrides[get_db] = lambda: db
    yield TestClient(app)
    app.dependency_overrides.clear()


def make_user(db, email="rosa@example.com", is_admin=False, address="12 Sampaguita St, Quezon City"):
    user = {
        "name": "Rosa Dela Cruz",
        "email": email,
        "hashed_password": "x",
        "phone": "09171234567",
        "address": address,
        "is_active": True,
        "is_admin": is_admin,
    }
    user["_id"] = db["user"].insert_one(user).inserted_id
    return user


def auth_headers(user):
    return {"Authorization": f"Bearer {create_token(user)}"}


@pytest.fixture
def customer(db):
    return make_user(db)


@pytest.fixture
def admin(db):
    return make_user(db, email="admin@flourish.ph", is_admin=True)


@pytest.fixture
def roses(db):
    doc = {
        "name": "Classic Red Roses",
        "category": "Bouquets",
        "variations": [{"name": "Small", "price": 500.0}, {"name": "Large", "price": 950.0}],
        "min_price": 500.0,
        "max_price": 950.0,
        "stock": 40,
        "min_stock": 10,
        "status": "In Stock",
        "image_urls": ["https://img.example/roses.jpg"],
        "created_at": datetime.now(timezone.utc),
    }
    return str(db["product"].insert_one(doc).inserted_id)
