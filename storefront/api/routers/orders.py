# storefront/api/routers/orders.py
from typing import List

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from storefront.api.deps import get_current_user, get_db, get_dispatcher
from storefront.domain.errors import (
    AccessDeniedError,
    InsufficientStockError,
    NotFoundError,
    PersistenceError,
    ValidationError,
)
from storefront.domain.schemas import AdminOrderOut, CurrentUser, DeleteResult, OrderCreate, OrderOut, StatusUpdate
from storefront.services.order_service import OrderService

router = APIRouter(prefix="/orders", tags=["orders"])


def get_service(db: Session = Depends(get_db), dispatcher=Depends(get_dispatcher)):
    return OrderService(db, dispatcher=dispatcher)


@router.post("", response_model=OrderOut, status_code=201)
def create_order(
    payload: OrderCreate,
    user: CurrentUser = Depends(get_current_user),
    svc: OrderService = Depends(get_service),
):
    """
    Tworzy zamówienie i rezerwuje stan produktów.
    Status zmienia się potem automatycznie.
    """
    try:
        return svc.place_order(user, payload)
    except (ValidationError, InsufficientStockError) as e:
        raise HTTPException(status_code=400, detail=str(e))
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except PersistenceError:
        raise HTTPException(status_code=500, detail="Błąd przy tworzeniu zamówienia")


@router.get("/me", response_model=List[OrderOut])
def my_orders(
    user: CurrentUser = Depends(get_current_user),
    svc: OrderService = Depends(get_service),
):
    return svc.list_own(user)


@router.get("", response_model=List[AdminOrderOut])
def all_orders(
    user: CurrentUser = Depends(get_current_user),
    svc: OrderService = Depends(get_service),
):
    try:
        return svc.list_all(user)
    except AccessDeniedError as e:
        raise HTTPException(status_code=403, detail=str(e))


@router.get("/{order_id}", response_model=OrderOut)
def get_order(
    order_id: int,
    user: CurrentUser = Depends(get_current_user),
    svc: OrderService = Depends(get_service),
):
    try:
        return svc.get_order(user, order_id)
    except AccessDeniedError as e:
        raise HTTPException(status_code=403, detail=str(e))
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.put("/{order_id}/status", response_model=OrderOut)
def update_order_status(
    order_id: int,
    payload: StatusUpdate,
    user: CurrentUser = Depends(get_current_user),
    svc: OrderService = Depends(get_service),
):
    try:
        return svc.update_status(user, order_id, payload.status)
    except AccessDeniedError as e:
        raise HTTPException(status_code=403, detail=str(e))
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except PersistenceError:
        raise HTTPException(status_code=500, detail="Błąd przy aktualizacji zamówienia")


@router.delete("/{order_id}", response_model=DeleteResult)
def delete_order(
    order_id: int,
    user: CurrentUser = Depends(get_current_user),
    svc: OrderService = Depends(get_service),
):
    try:
        svc.delete_order(user, order_id)
    except AccessDeniedError as e:
        raise HTTPException(status_code=403, detail=str(e))
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except PersistenceError:
        raise HTTPException(status_code=500, detail="Błąd przy usuwaniu zamówienia")
    return DeleteResult(message="Zamówienie usunięte")
