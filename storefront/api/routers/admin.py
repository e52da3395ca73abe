from typing import List

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from storefront.api.deps import get_current_user, get_db
from storefront.domain.errors import AccessDeniedError, NotFoundError, PersistenceError
from storefront.domain.schemas import AdminStats, CurrentUser, DeleteResult, UserRead
from storefront.services.admin_service import AdminService
from storefront.services.user_service import UserService

router = APIRouter(prefix="/admin", tags=["admin"])


@router.get("/stats", response_model=AdminStats)
def admin_stats(
    user: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    try:
        return AdminService(db).get_stats(user)
    except AccessDeniedError as e:
        raise HTTPException(status_code=403, detail=str(e))


@router.get("/users", response_model=List[UserRead])
def list_users(
    user: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    try:
        return UserService(db).list_users(user)
    except AccessDeniedError as e:
        raise HTTPException(status_code=403, detail=str(e))


@router.delete("/users/{user_id}", response_model=DeleteResult)
def delete_user(
    user_id: int,
    user: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    try:
        UserService(db).delete_user(user, user_id)
    except AccessDeniedError as e:
        raise HTTPException(status_code=403, detail=str(e))
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except PersistenceError:
        raise HTTPException(status_code=409, detail="Nie można usunąć użytkownika z zamówieniami")
    return DeleteResult(message="Użytkownik usunięty")
