# storefront/celery_worker.py
from celery import Celery

from storefront.utils.settings import (
    CELERY_BROKER_URL,
    CELERY_RESULT_BACKEND,
    ORDER_STATUS_SWEEP_SECONDS,
)

celery_app = Celery(
    "storefront",
    broker=CELERY_BROKER_URL,
    backend=CELERY_RESULT_BACKEND,
)

# WAŻNE: Explicite importuj taski, żeby Celery je zarejestrował
celery_app.conf.imports = ("storefront.tasks.order_status",)

# sweep podnosi zmiany statusu, ktorych taski przepadly (restart, broker)
celery_app.conf.beat_schedule = {
    "advance-due-order-statuses": {
        "task": "storefront.tasks.order_status.sweep_due_status_changes_task",
        "schedule": float(ORDER_STATUS_SWEEP_SECONDS),
    },
}

celery_app.conf.timezone = "UTC"
