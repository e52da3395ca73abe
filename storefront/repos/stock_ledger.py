# storefront/repos/stock_ledger.py
from sqlalchemy import select, update
from sqlalchemy.orm import Session

from storefront.data.models.product import ProductModel
from storefront.domain.errors import InsufficientStockError, NotFoundError, ValidationError
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


class StockLedger:
    """
    Stan magazynowy produktow.
    Nie robi commita - dziala w transakcji wywolujacego,
    wiec rollback zamowienia cofa tez wszystkie rezerwacje.
    """

    def __init__(self, db: Session):
        self.db = db

    def get_stock(self, product_id: int) -> int | None:
        return self.db.execute(
            select(ProductModel.stock).where(ProductModel.id == product_id)
        ).scalar_one_or_none()

    def reserve(self, product_id: int, quantity: int) -> int:
        if quantity <= 0:
            raise ValidationError("Ilosc musi byc wieksza niz 0")

        # warunkowy update: stock zmniejszany tylko gdy starczy towaru
        # UPDATE products SET stock = stock - 2 WHERE id = 1 AND stock >= 2
        rowcount = self.db.execute(
            update(ProductModel)
            .where(ProductModel.id == product_id, ProductModel.stock >= quantity)
            .values(stock=ProductModel.stock - quantity)
            .execution_options(synchronize_session=False)
        ).rowcount

        if rowcount == 0:
            available = self.get_stock(product_id)
            if available is None:
                raise NotFoundError(f"Produkt {product_id} nie istnieje")
            raise InsufficientStockError(product_id, quantity, available)

        new_stock = self.get_stock(product_id)
        logger.info(f"Zarezerwowano {quantity} szt. produktu {product_id}, pozostalo {new_stock}")
        return new_stock

    def release(self, product_id: int, quantity: int) -> int:
        if quantity <= 0:
            raise ValidationError("Ilosc musi byc wieksza niz 0")

        rowcount = self.db.execute(
            update(ProductModel)
            .where(ProductModel.id == product_id)
            .values(stock=ProductModel.stock + quantity)
            .execution_options(synchronize_session=False)
        ).rowcount

        if rowcount == 0:
            raise NotFoundError(f"Produkt {product_id} nie istnieje")

        new_stock = self.get_stock(product_id)
        logger.info(f"Zwrocono {quantity} szt. produktu {product_id} na stan, teraz {new_stock}")
        return new_stock
