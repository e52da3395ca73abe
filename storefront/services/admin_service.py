# storefront/services/admin_service.py
from decimal import Decimal

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from storefront.data.models.order import OrderModel
from storefront.domain.errors import AccessDeniedError
from storefront.domain.schemas import AdminStats, CurrentUser
from storefront.repos.product_repo import ProductRepo
from storefront.repos.user_repo import UserRepo


class AdminService:
    def __init__(self, db: Session):
        self.db = db
        self.users = UserRepo(db)
        self.products = ProductRepo(db)

    def get_stats(self, user: CurrentUser) -> AdminStats:
        if not user.is_admin:
            raise AccessDeniedError("Brak uprawnień administratora")

        total_orders, total_revenue = self.db.execute(
            select(
                func.count(OrderModel.id),
                func.coalesce(func.sum(OrderModel.total_price), 0),
            )
        ).one()

        return AdminStats(
            users_count=self.users.count(),
            products_count=self.products.count(),
            total_orders=total_orders,
            total_revenue=Decimal(str(total_revenue)).quantize(Decimal("0.01")),
        )
