from datetime import timedelta

import pytest

from storefront.data.database import transaction
from storefront.data.models import StatusChangeModel
from storefront.repos.order_repo import OrderRepo
from storefront.services.order_service import OrderService
from storefront.services.status_scheduler import utcnow
from storefront.tasks import order_status

from helpers import make_order


@pytest.fixture
def worker(monkeypatch, database):
    sent = []
    monkeypatch.setattr(order_status, "dispatch_status_change", lambda order_id, due_at: sent.append(order_id))
    monkeypatch.setattr(order_status.advance_order_status_task, "_database", database)
    monkeypatch.setattr(order_status.sweep_due_status_changes_task, "_database", database)
    return sent


def _overdue_order(db, users, products):
    order = OrderService(db).place_order(users["customer"], make_order([(products["vitamin"], 1, "10")]))
    with transaction(db):
        change = db.query(StatusChangeModel).filter_by(order_id=order.id).one()
        change.due_at = utcnow() - timedelta(seconds=1)
    return order


def test_advance_task_moves_order_and_sends_follow_up(db, users, products, worker):
    order = _overdue_order(db, users, products)

    result = order_status.advance_order_status_task.run(order.id)

    assert result == {"order_id": order.id, "status": "Shipped"}
    assert worker == [order.id]


def test_advance_task_for_missing_order_returns_no_status(worker, database):
    assert order_status.advance_order_status_task.run(31337) == {"order_id": 31337, "status": None}


def test_sweep_task_recovers_overdue_changes(db, users, products, worker, database):
    order = _overdue_order(db, users, products)

    assert order_status.sweep_due_status_changes_task.run() == {"advanced": 1}

    with database.session() as session:
        assert OrderRepo(session).find_by_id(order.id).order_status == "Shipped"
