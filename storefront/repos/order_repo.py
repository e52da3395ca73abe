# storefront/repos/order_repo.py
from sqlalchemy import delete, select
from sqlalchemy.orm import Session

from storefront.data.models.order import OrderModel
from storefront.data.models.order_item import OrderItemModel
from storefront.data.models.status_change import StatusChangeModel
from storefront.data.models.user import UserModel
from storefront.domain.status import OrderStatus


class OrderRepo:
    """
    Zapis zamowien i ich pozycji.
    Repo tylko flushuje, commit/rollback robi transaction() w serwisie.
    """

    def __init__(self, db: Session):
        self.db = db

    def create(self, order: OrderModel) -> OrderModel:
        # naglowek i pozycje ida jednym flushem w tej samej transakcji
        self.db.add(order)
        self.db.flush()
        return order

    def find_by_id(self, order_id: int) -> OrderModel | None:
        return self.db.get(OrderModel, order_id)

    def find_by_user(self, user_id: int) -> list[OrderModel]:
        return list(
            self.db.execute(
                select(OrderModel)
                .where(OrderModel.user_id == user_id)
                .order_by(OrderModel.created_at.desc(), OrderModel.id.desc())
            ).scalars().all()
        )

    def find_all(self) -> list[OrderModel]:
        return list(
            self.db.execute(
                select(OrderModel).order_by(OrderModel.created_at.desc(), OrderModel.id.desc())
            ).scalars().all()
        )

    def find_all_with_phone(self) -> list[tuple[OrderModel, str | None]]:
        rows = self.db.execute(
            select(OrderModel, UserModel.phone)
            .outerjoin(UserModel, UserModel.id == OrderModel.user_id)
            .order_by(OrderModel.created_at.desc(), OrderModel.id.desc())
        ).all()
        return [(order, phone) for order, phone in rows]

    def update_status(self, order_id: int, status: OrderStatus) -> OrderModel | None:
        order = self.find_by_id(order_id)
        if order:
            order.order_status = status.value
            self.db.flush()
        return order

    def delete(self, order_id: int) -> bool:
        order = self.find_by_id(order_id)
        if not order:
            return False

        # najpierw zalezne wiersze, potem naglowek
        self.db.execute(delete(StatusChangeModel).where(StatusChangeModel.order_id == order_id))
        self.db.execute(delete(OrderItemModel).where(OrderItemModel.order_id == order_id))
        self.db.expunge(order)
        self.db.execute(delete(OrderModel).where(OrderModel.id == order_id))
        return True
