# storefront/api/routers/reviews.py
from typing import List

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from storefront.api.deps import get_current_user, get_db
from storefront.domain.errors import AccessDeniedError, NotFoundError, PersistenceError, ValidationError
from storefront.domain.schemas import CurrentUser, DeleteResult, ReviewCreate, ReviewOut
from storefront.services.review_service import ReviewService

router = APIRouter(prefix="/reviews", tags=["reviews"])


@router.get("/product/{product_id}", response_model=List[ReviewOut])
def product_reviews(product_id: int, db: Session = Depends(get_db)):
    try:
        return ReviewService(db).list_for_product(product_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.post("/product/{product_id}", response_model=ReviewOut, status_code=201)
def create_review(
    product_id: int,
    payload: ReviewCreate,
    user: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    try:
        return ReviewService(db).create_review(user, product_id, payload)
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except PersistenceError:
        raise HTTPException(status_code=500, detail="Błąd przy dodawaniu opinii")


@router.delete("/{review_id}", response_model=DeleteResult)
def delete_review(
    review_id: int,
    user: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    try:
        ReviewService(db).delete_review(user, review_id)
    except AccessDeniedError as e:
        raise HTTPException(status_code=403, detail=str(e))
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except PersistenceError:
        raise HTTPException(status_code=500, detail="Błąd przy usuwaniu opinii")
    return DeleteResult(message="Opinia usunięta")
