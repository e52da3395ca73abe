# storefront/services/product_service.py
from decimal import Decimal
from typing import List

from sqlalchemy.orm import Session

from storefront.data.database import transaction
from storefront.data.models.product import ProductModel
from storefront.domain.errors import AccessDeniedError, NotFoundError, ValidationError
from storefront.domain.schemas import CurrentUser, PriceRange, ProductCreate, ProductOut, ProductUpdate
from storefront.repos.product_repo import ProductRepo
from storefront.utils.logging import get_logger

logger = get_logger(__name__)

CENT = Decimal("0.01")
DEFAULT_MIN_PRICE = Decimal("0.00")
DEFAULT_MAX_PRICE = Decimal("1000.00")


class ProductService:
    """Katalog produktow: odczyt dla wszystkich, zmiany tylko admin."""

    def __init__(self, db: Session):
        self.db = db
        self.repo = ProductRepo(db)

    #query
    def get_product(self, product_id: int) -> ProductOut:
        product = self.repo.get_product(product_id)
        if not product:
            raise NotFoundError("Produkt nie istnieje")
        return ProductOut.model_validate(product)

    def list_products(
        self,
        category: str | None = None,
        tag: str | None = None,
        min_price: Decimal | None = None,
        max_price: Decimal | None = None,
        q: str | None = None,
    ) -> List[ProductOut]:
        if min_price is not None and max_price is not None and min_price > max_price:
            raise ValidationError("Cena minimalna większa niż maksymalna")

        products = self.repo.list_products(
            category=category,
            tag=tag,
            min_price=min_price,
            max_price=max_price,
            q=q,
        )
        return [ProductOut.model_validate(p) for p in products]

    def list_tags(self) -> List[str]:
        """Unikalne tagi ze wszystkich produktow, w kolejnosci wystapienia."""
        tags: List[str] = []
        for value in self.repo.list_tag_values():
            for tag in value.split(","):
                tag = tag.strip()
                if tag and tag not in tags:
                    tags.append(tag)
        return tags

    def get_price_range(self) -> PriceRange:
        low, high = self.repo.price_range()
        if low is None or high is None:
            # pusty katalog - domyslny zakres dla filtra
            return PriceRange(min_price=DEFAULT_MIN_PRICE, max_price=DEFAULT_MAX_PRICE)
        return PriceRange(min_price=Decimal(low).quantize(CENT), max_price=Decimal(high).quantize(CENT))

    #commands
    def create_product(self, user: CurrentUser, payload: ProductCreate) -> ProductOut:
        self._require_admin(user)

        with transaction(self.db):
            product = self.repo.add_product(ProductModel(**payload.model_dump()))

        logger.info(f"Dodano produkt {product.id} ({product.title}), stan {product.stock}")
        return ProductOut.model_validate(product)

    def update_product(self, user: CurrentUser, product_id: int, payload: ProductUpdate) -> ProductOut:
        self._require_admin(user)

        changes = payload.model_dump(exclude_unset=True)
        for field in ("title", "price", "stock"):
            if field in changes and changes[field] is None:
                raise ValidationError(f"Pole {field} nie może być puste")

        with transaction(self.db):
            product = self.repo.get_product(product_id)
            if not product:
                raise NotFoundError("Produkt nie istnieje")

            for field, value in changes.items():
                setattr(product, field, value)

        logger.info(f"Zaktualizowano produkt {product_id}: {sorted(changes)}")
        return ProductOut.model_validate(product)

    def delete_product(self, user: CurrentUser, product_id: int) -> None:
        self._require_admin(user)

        with transaction(self.db):
            product = self.repo.get_product(product_id)
            if not product:
                raise NotFoundError("Produkt nie istnieje")
            self.repo.delete_product(product)

        logger.info(f"Usunieto produkt {product_id}")

    @staticmethod
    def _require_admin(user: CurrentUser) -> None:
        if not user.is_admin:
            raise AccessDeniedError("Brak uprawnień administratora")
