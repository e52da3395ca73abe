from sqlalchemy import Column, Integer, ForeignKey, String, DateTime

from storefront.data.database import Base


class StatusChangeModel(Base):
    """Zaplanowana automatyczna zmiana statusu zamowienia (max jedna na zamowienie)."""

    __tablename__ = "order_status_changes"

    id = Column(Integer, primary_key=True)
    order_id = Column(
        "orderId",
        Integer,
        ForeignKey("orders.id", ondelete="CASCADE"),
        nullable=False,
        unique=True,
    )
    from_status = Column("fromStatus", String, nullable=False)
    to_status = Column("toStatus", String, nullable=False)
    due_at = Column("dueAt", DateTime(timezone=True), nullable=False, index=True)
