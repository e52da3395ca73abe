# storefront/repos/product_repo.py
from decimal import Decimal

from sqlalchemy import func, or_, select
from sqlalchemy.orm import Session

from storefront.data.models.product import ProductModel


class ProductRepo:
    def __init__(self, db: Session):
        self.db = db

    def get_product(self, product_id: int) -> ProductModel | None:
        return self.db.get(ProductModel, product_id)

    def list_products(
        self,
        category: str | None = None,
        tag: str | None = None,
        min_price: Decimal | None = None,
        max_price: Decimal | None = None,
        q: str | None = None,
    ) -> list[ProductModel]:
        stmt = select(ProductModel)

        if category:
            stmt = stmt.where(ProductModel.category == category)
        if tag:
            stmt = stmt.where(ProductModel.tags.like(f"%{tag}%"))
        if min_price is not None:
            stmt = stmt.where(ProductModel.price >= min_price)
        if max_price is not None:
            stmt = stmt.where(ProductModel.price <= max_price)
        if q:
            pattern = f"%{q.lower()}%"
            stmt = stmt.where(
                or_(
                    func.lower(ProductModel.title).like(pattern),
                    func.lower(ProductModel.description).like(pattern),
                )
            )

        return list(self.db.execute(stmt.order_by(ProductModel.id)).scalars().all())

    def add_product(self, product: ProductModel) -> ProductModel:
        self.db.add(product)
        self.db.flush()
        return product

    def delete_product(self, product: ProductModel) -> None:
        self.db.delete(product)
        self.db.flush()

    def count(self) -> int:
        return self.db.execute(select(func.count(ProductModel.id))).scalar_one()

    def list_tag_values(self) -> list[str]:
        """Surowe wartosci kolumny tags (lista po przecinku)."""
        return list(
            self.db.execute(
                select(ProductModel.tags)
                .where(ProductModel.tags.is_not(None), ProductModel.tags != "")
                .order_by(ProductModel.id)
            ).scalars().all()
        )

    def price_range(self) -> tuple[Decimal | None, Decimal | None]:
        low, high = self.db.execute(
            select(func.min(ProductModel.price), func.max(ProductModel.price))
        ).one()
        return low, high
