from datetime import datetime
from decimal import Decimal

import pytest
from fastapi.testclient import TestClient

from storefront.api import create_app
from storefront.data.database import Database
from storefront.data.models import ProductModel, UserModel
from storefront.domain.schemas import CurrentUser


class RecordingDispatcher:
    """Zamiast Celery: zapamietuje wyslane zmiany statusu."""

    def __init__(self):
        self.calls: list[tuple[int, datetime]] = []

    def __call__(self, order_id: int, due_at: datetime) -> None:
        self.calls.append((order_id, due_at))


@pytest.fixture
def database():
    database = Database("sqlite://")
    database.create_all()
    yield database
    database.drop_all()
    database.dispose()


@pytest.fixture
def db(database):
    with database.session() as session:
        yield session


@pytest.fixture
def dispatcher():
    return RecordingDispatcher()


@pytest.fixture
def users(db):
    customer = UserModel(phone="+48111111111", first_name="Anna")
    other = UserModel(phone="+48222222222", first_name="Piotr")
    admin = UserModel(phone="+48333333333", first_name="Admin", is_admin=True)
    db.add_all([customer, other, admin])
    db.commit()
    return {
        "customer": CurrentUser(id=customer.id),
        "other": CurrentUser(id=other.id),
        "admin": CurrentUser(id=admin.id, is_admin=True),
    }


@pytest.fixture
def products(db):
    aspirin = ProductModel(title="Aspiryna 500 mg", price=Decimal("100.00"), stock=5, category="pain", tags="pain,fever")
    syrup = ProductModel(title="Syrop na kaszel", price=Decimal("25.50"), stock=1, category="cold", tags="cough")
    vitamin = ProductModel(title="Witamina C", price=Decimal("10.00"), stock=10, category="vitamins", description="Na odporność")
    db.add_all([aspirin, syrup, vitamin])
    db.commit()
    return {"aspirin": aspirin.id, "syrup": syrup.id, "vitamin": vitamin.id}


@pytest.fixture
def client(database, dispatcher):
    app = create_app(database=database, dispatcher=dispatcher)
    with TestClient(app) as c:
        yield c
