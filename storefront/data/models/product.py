#storefront/data/models/product.py
from datetime import datetime, timezone

from sqlalchemy import CheckConstraint, Column, DateTime, Integer, Numeric, String, Text

from storefront.data.database import Base


class ProductModel(Base):
    __tablename__ = "products"

    id = Column(Integer, primary_key=True)
    title = Column(String, nullable=False)
    price = Column(Numeric(10, 2), nullable=False)

    article = Column(String, nullable=True)
    manufacturer = Column(String, nullable=True)
    expiration_date = Column("expirationDate", String, nullable=True)
    composition = Column(Text, nullable=True)
    contraindications = Column(Text, nullable=True)
    storage_conditions = Column("storageConditions", Text, nullable=True)
    recommendations = Column(Text, nullable=True)
    instructions = Column(Text, nullable=True)
    tags = Column(String, nullable=True)
    image_url = Column(String, nullable=True)
    description = Column(Text, nullable=True)
    category = Column(String, nullable=True, index=True)

    #stan magazynowy, zmieniany tylko przez admina i rezerwacje przy zamowieniu
    stock = Column(Integer, nullable=False, default=0)

    created_at = Column(DateTime(timezone=True), nullable=False, default=lambda: datetime.now(timezone.utc))

    __table_args__ = (CheckConstraint("stock >= 0", name="ck_products_stock_non_negative"),)
