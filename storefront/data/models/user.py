from datetime import datetime, timezone

from sqlalchemy import Boolean, Column, DateTime, Integer, String

from storefront.data.database import Base


class UserModel(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True)
    phone = Column(String, unique=True, nullable=False)
    first_name = Column("firstName", String, nullable=True)
    last_name = Column("lastName", String, nullable=True)
    gender = Column(String, nullable=True)
    is_admin = Column("isAdmin", Boolean, nullable=False, default=False)
    profile_updated_at = Column(
        "profileUpdatedAt", DateTime(timezone=True), nullable=True, default=lambda: datetime.now(timezone.utc)
    )

    @property
    def display_name(self) -> str:
        return f"{self.first_name or ''} {self.last_name or ''}".strip()
