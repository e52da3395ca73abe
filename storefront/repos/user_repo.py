from sqlalchemy import func, select
from sqlalchemy.orm import Session

from storefront.data.models.user import UserModel


class UserRepo:
    def __init__(self, db: Session):
        self.db = db

    def get_user(self, user_id: int) -> UserModel | None:
        return self.db.get(UserModel, user_id)

    def get_by_phone(self, phone: str) -> UserModel | None:
        return self.db.execute(
            select(UserModel).where(UserModel.phone == phone)
        ).scalar_one_or_none()

    def create_user(self, user: UserModel) -> UserModel:
        self.db.add(user)
        self.db.flush()
        return user

    def count(self) -> int:
        return self.db.execute(select(func.count(UserModel.id))).scalar_one()

    def list_users(self) -> list[UserModel]:
        return list(self.db.execute(select(UserModel).order_by(UserModel.id)).scalars().all())

    def delete_user(self, user: UserModel) -> None:
        # opinie znikaja kaskadowo, zamowienia blokuja usuniecie (klucz obcy)
        self.db.delete(user)
        self.db.flush()
