from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from storefront.api.deps import get_current_user, get_db
from storefront.domain.errors import NotFoundError, PersistenceError
from storefront.domain.schemas import CurrentUser, DeleteResult, ProfileOut, ProfileUpdate
from storefront.services.user_service import UserService

router = APIRouter(prefix="/profile", tags=["profile"])


@router.get("", response_model=ProfileOut)
def get_profile(
    user: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    try:
        return UserService(db).get_profile(user)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.put("", response_model=ProfileOut)
def update_profile(
    payload: ProfileUpdate,
    user: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    try:
        return UserService(db).update_profile(user, payload)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except PersistenceError:
        raise HTTPException(status_code=500, detail="Błąd przy aktualizacji profilu")


@router.delete("", response_model=DeleteResult)
def delete_account(
    user: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    try:
        UserService(db).delete_account(user)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except PersistenceError:
        # konto ma zamowienia (klucz obcy)
        raise HTTPException(status_code=409, detail="Nie można usunąć konta z zamówieniami")
    return DeleteResult(message="Konto usunięte")
