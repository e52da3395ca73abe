# storefront/tasks/order_status.py
from datetime import datetime

from celery import Task

from storefront.celery_worker import celery_app
from storefront.data.database import Database
from storefront.services.status_scheduler import StatusScheduler
from storefront.utils.retry import broker_retry, db_retry
from storefront.utils.settings import DATABASE_URL, SQL_ECHO
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


class DatabaseTask(Task):
    """Jeden uchwyt Database na proces workera, tworzony przy pierwszym tasku."""

    _database = None

    @property
    def database(self) -> Database:
        if self._database is None:
            self._database = Database(DATABASE_URL, echo=SQL_ECHO)
        return self._database


@broker_retry()
def dispatch_status_change(order_id: int, due_at: datetime) -> None:
    """Wysyla opozniony task zmiany statusu (eta = termin z bazy)."""
    advance_order_status_task.apply_async(args=[order_id], eta=due_at)
    logger.info(f"Task zmiany statusu zamowienia {order_id} wyslany, eta {due_at.isoformat()}")


@celery_app.task(
    base=DatabaseTask,
    bind=True,
    name="storefront.tasks.order_status.advance_order_status_task",
)
def advance_order_status_task(self, order_id: int):
    logger.info(f"Advance order status task started for order {order_id}")

    with self.database.session() as db:
        scheduler = StatusScheduler(db, dispatcher=dispatch_status_change)
        new_status = scheduler.advance(order_id)

    return {"order_id": order_id, "status": new_status.value if new_status else None}


@celery_app.task(
    base=DatabaseTask,
    bind=True,
    name="storefront.tasks.order_status.sweep_due_status_changes_task",
)
def sweep_due_status_changes_task(self):
    logger.info("Sweep due status changes task started")

    try:
        advanced = _sweep(self.database)
    except Exception as e:
        # best effort - nastepny beat sprobuje ponownie
        logger.warning(f"Sweep statusow nie powiodl sie: {e}")
        return {"advanced": 0}

    return {"advanced": advanced}


@db_retry()
def _sweep(database: Database) -> int:
    with database.session() as db:
        scheduler = StatusScheduler(db, dispatcher=dispatch_status_change)
        return scheduler.sweep_due()
