from datetime import datetime, timezone

from sqlalchemy import CheckConstraint, Column, DateTime, ForeignKey, Integer, Text, UniqueConstraint
from sqlalchemy.orm import relationship

from storefront.data.database import Base

ANONYMOUS_NAME = "Anonimowy użytkownik"


class ReviewModel(Base):
    __tablename__ = "reviews"

    id = Column(Integer, primary_key=True)
    user_id = Column("userId", Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    product_id = Column("productId", Integer, ForeignKey("products.id", ondelete="CASCADE"), nullable=False, index=True)
    rating = Column(Integer, nullable=False)
    comment = Column(Text, nullable=True)
    created_at = Column("createdAt", DateTime(timezone=True), nullable=False, default=lambda: datetime.now(timezone.utc))

    user = relationship("UserModel", lazy="joined")

    __table_args__ = (
        CheckConstraint("rating >= 1 AND rating <= 5", name="ck_reviews_rating_range"),
        # jedna opinia uzytkownika na produkt
        UniqueConstraint("userId", "productId", name="uq_reviews_user_product"),
    )

    @property
    def user_name(self) -> str:
        name = self.user.display_name if self.user else ""
        return name or ANONYMOUS_NAME
