# storefront/api/routers/products.py
from decimal import Decimal
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from storefront.api.deps import get_current_user, get_db
from storefront.domain.errors import AccessDeniedError, NotFoundError, PersistenceError, ValidationError
from storefront.domain.schemas import CurrentUser, DeleteResult, PriceRange, ProductCreate, ProductOut, ProductUpdate
from storefront.services.product_service import ProductService

router = APIRouter(prefix="/products", tags=["products"])


@router.get("", response_model=List[ProductOut])
def list_products(
    category: Optional[str] = None,
    tag: Optional[str] = None,
    min_price: Optional[Decimal] = Query(None, alias="minPrice", ge=0),
    max_price: Optional[Decimal] = Query(None, alias="maxPrice", ge=0),
    q: Optional[str] = None,
    db: Session = Depends(get_db),
):
    try:
        return ProductService(db).list_products(
            category=category,
            tag=tag,
            min_price=min_price,
            max_price=max_price,
            q=q,
        )
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))


# sciezki statyczne przed /{product_id}
@router.get("/tags/all", response_model=List[str])
def list_tags(db: Session = Depends(get_db)):
    return ProductService(db).list_tags()


@router.get("/price-range", response_model=PriceRange)
def price_range(db: Session = Depends(get_db)):
    return ProductService(db).get_price_range()


@router.get("/{product_id}", response_model=ProductOut)
def get_product(product_id: int, db: Session = Depends(get_db)):
    try:
        return ProductService(db).get_product(product_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.post("", response_model=ProductOut, status_code=201)
def create_product(
    payload: ProductCreate,
    user: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    try:
        return ProductService(db).create_product(user, payload)
    except AccessDeniedError as e:
        raise HTTPException(status_code=403, detail=str(e))
    except PersistenceError:
        raise HTTPException(status_code=500, detail="Błąd przy dodawaniu produktu")


@router.put("/{product_id}", response_model=ProductOut)
def update_product(
    product_id: int,
    payload: ProductUpdate,
    user: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    try:
        return ProductService(db).update_product(user, product_id, payload)
    except AccessDeniedError as e:
        raise HTTPException(status_code=403, detail=str(e))
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except PersistenceError:
        raise HTTPException(status_code=500, detail="Błąd przy aktualizacji produktu")


@router.delete("/{product_id}", response_model=DeleteResult)
def delete_product(
    product_id: int,
    user: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    try:
        ProductService(db).delete_product(user, product_id)
    except AccessDeniedError as e:
        raise HTTPException(status_code=403, detail=str(e))
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except PersistenceError:
        # produkt wystepuje w zamowieniach (klucz obcy)
        raise HTTPException(status_code=409, detail="Nie można usunąć produktu użytego w zamówieniach")
    return DeleteResult(message="Produkt usunięty")
