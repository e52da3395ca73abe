# storefront/api/deps.py
from typing import Iterator

from fastapi import Depends, Header, HTTPException, Request
from sqlalchemy.orm import Session

from storefront.domain.errors import NotFoundError
from storefront.domain.schemas import CurrentUser
from storefront.services.user_service import UserService


def get_db(request: Request) -> Iterator[Session]:
    with request.app.state.database.session() as db:
        yield db


def get_dispatcher(request: Request):
    return request.app.state.dispatcher


def get_current_user(
    x_user_id: int | None = Header(None),
    db: Session = Depends(get_db),
) -> CurrentUser:
    """
    Tozsamosc z warstwy uwierzytelniania (naglowek X-User-Id),
    flaga admina zawsze z bazy.
    """
    if x_user_id is None:
        raise HTTPException(status_code=401, detail="Wymagane zalogowanie")
    try:
        return UserService(db).resolve_caller(x_user_id)
    except NotFoundError:
        raise HTTPException(status_code=401, detail="Nieznany użytkownik")
