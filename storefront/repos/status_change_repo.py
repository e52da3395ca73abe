# storefront/repos/status_change_repo.py
from datetime import datetime

from sqlalchemy import delete, select
from sqlalchemy.orm import Session

from storefront.data.models.status_change import StatusChangeModel
from storefront.domain.status import OrderStatus


class StatusChangeRepo:
    """Zaplanowane zmiany statusu (zamiast timerow w pamieci procesu)."""

    def __init__(self, db: Session):
        self.db = db

    def get_for_order(self, order_id: int) -> StatusChangeModel | None:
        return self.db.execute(
            select(StatusChangeModel).where(StatusChangeModel.order_id == order_id)
        ).scalar_one_or_none()

    def get_due_for_order(self, order_id: int, now: datetime) -> StatusChangeModel | None:
        # porownanie w SQL - sqlite zwraca daty bez strefy
        return self.db.execute(
            select(StatusChangeModel).where(
                StatusChangeModel.order_id == order_id,
                StatusChangeModel.due_at <= now,
            )
        ).scalar_one_or_none()

    def list_due_order_ids(self, now: datetime, limit: int = 100) -> list[int]:
        return list(
            self.db.execute(
                select(StatusChangeModel.order_id)
                .where(StatusChangeModel.due_at <= now)
                .order_by(StatusChangeModel.due_at)
                .limit(limit)
            ).scalars().all()
        )

    def upsert(
        self,
        order_id: int,
        from_status: str,
        to_status: OrderStatus,
        due_at: datetime,
    ) -> StatusChangeModel:
        change = self.get_for_order(order_id)
        if change is None:
            change = StatusChangeModel(order_id=order_id)
            self.db.add(change)

        change.from_status = from_status
        change.to_status = to_status.value
        change.due_at = due_at
        self.db.flush()
        return change

    def remove_for_order(self, order_id: int) -> int:
        return self.db.execute(
            delete(StatusChangeModel).where(StatusChangeModel.order_id == order_id)
        ).rowcount
