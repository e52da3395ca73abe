from datetime import datetime, timezone
from typing import List

from sqlalchemy.orm import Session

from storefront.data.database import transaction
from storefront.data.models.user import UserModel
from storefront.domain.errors import AccessDeniedError, ConflictError, NotFoundError
from storefront.domain.schemas import CurrentUser, ProfileOut, ProfileUpdate, UserCreate, UserRead
from storefront.repos.user_repo import UserRepo
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


class UserService:
    def __init__(self, db: Session):
        self.db = db
        self.repo = UserRepo(db)

    def create_user(self, payload: UserCreate) -> UserRead:
        if self.repo.get_by_phone(payload.phone):
            raise ConflictError("Użytkownik z tym numerem telefonu już istnieje")

        with transaction(self.db):
            created = self.repo.create_user(
                UserModel(
                    phone=payload.phone,
                    first_name=payload.first_name,
                    last_name=payload.last_name,
                    is_admin=False,
                )
            )

        logger.info(f"Utworzono uzytkownika {created.id}")
        return UserRead.model_validate(created)

    def get_user(self, user_id: int) -> UserRead:
        user = self.repo.get_user(user_id)
        if not user:
            raise NotFoundError("User not found")
        return UserRead.model_validate(user)

    def resolve_caller(self, user_id: int) -> CurrentUser:
        user = self.repo.get_user(user_id)
        if not user:
            raise NotFoundError("User not found")
        return CurrentUser(id=user.id, is_admin=bool(user.is_admin))

    # =====================================================
    # PROFIL
    # =====================================================
    def get_profile(self, caller: CurrentUser) -> ProfileOut:
        user = self.repo.get_user(caller.id)
        if not user:
            raise NotFoundError("Użytkownik nie istnieje")
        return ProfileOut.model_validate(user)

    def update_profile(self, caller: CurrentUser, payload: ProfileUpdate) -> ProfileOut:
        changes = {k: v for k, v in payload.model_dump(exclude_unset=True).items() if v}

        with transaction(self.db):
            user = self.repo.get_user(caller.id)
            if not user:
                raise NotFoundError("Użytkownik nie istnieje")

            for field, value in changes.items():
                setattr(user, field, value)
            user.profile_updated_at = datetime.now(timezone.utc)

        logger.info(f"Zaktualizowano profil uzytkownika {caller.id}: {sorted(changes)}")
        return ProfileOut.model_validate(user)

    def delete_account(self, caller: CurrentUser) -> None:
        with transaction(self.db):
            user = self.repo.get_user(caller.id)
            if not user:
                raise NotFoundError("Użytkownik nie istnieje")
            self.repo.delete_user(user)

        logger.info(f"Uzytkownik {caller.id} usunal swoje konto")

    # =====================================================
    # ADMIN
    # =====================================================
    def list_users(self, caller: CurrentUser) -> List[UserRead]:
        self._require_admin(caller)
        return [UserRead.model_validate(u) for u in self.repo.list_users()]

    def delete_user(self, caller: CurrentUser, user_id: int) -> None:
        self._require_admin(caller)

        with transaction(self.db):
            user = self.repo.get_user(user_id)
            if not user:
                raise NotFoundError("User not found")
            if user.is_admin:
                raise AccessDeniedError("Nie można usunąć administratora")
            self.repo.delete_user(user)

        logger.info(f"Admin {caller.id} usunal uzytkownika {user_id}")

    @staticmethod
    def _require_admin(user: CurrentUser) -> None:
        if not user.is_admin:
            raise AccessDeniedError("Brak uprawnień administratora")
