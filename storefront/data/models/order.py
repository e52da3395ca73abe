from sqlalchemy import Column, Integer, ForeignKey, String, DateTime, Numeric, JSON
from sqlalchemy.orm import relationship
from datetime import datetime, timezone

from storefront.data.database import Base
from storefront.domain.status import OrderStatus


class OrderModel(Base):
    __tablename__ = "orders"

    id = Column(Integer, primary_key=True)
    user_id = Column("userId", Integer, ForeignKey("users.id"), nullable=False, index=True)

    payment_info = Column("paymentInfo", JSON, nullable=True)  # {"method": ..., "status": "pending"}
    items_price = Column("itemsPrice", Numeric(10, 2), nullable=False)
    tax_price = Column("taxPrice", Numeric(10, 2), nullable=False)
    shipping_price = Column("shippingPrice", Numeric(10, 2), nullable=False)
    total_price = Column("totalPrice", Numeric(10, 2), nullable=False)

    order_status = Column("orderStatus", String, nullable=False, default=OrderStatus.PROCESSING.value)
    created_at = Column("createdAt", DateTime(timezone=True), nullable=False, default=lambda: datetime.now(timezone.utc))

    order_items = relationship(
        "OrderItemModel",
        back_populates="order",
        cascade="all, delete-orphan",
        order_by="OrderItemModel.id",
        lazy="selectin",
    )
