# storefront/services/review_service.py
from typing import List

from sqlalchemy.orm import Session

from storefront.data.database import transaction
from storefront.data.models.review import ReviewModel
from storefront.domain.errors import AccessDeniedError, NotFoundError, ValidationError
from storefront.domain.schemas import CurrentUser, ReviewCreate, ReviewOut
from storefront.repos.product_repo import ProductRepo
from storefront.repos.review_repo import ReviewRepo
from storefront.repos.user_repo import UserRepo
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


class ReviewService:
    """
    Opinie o produktach.
    Czytac moze kazdy, dodaje zalogowany (jedna na produkt),
    usuwa autor albo admin.
    """

    def __init__(self, db: Session):
        self.db = db
        self.repo = ReviewRepo(db)
        self.products = ProductRepo(db)
        self.users = UserRepo(db)

    def list_for_product(self, product_id: int) -> List[ReviewOut]:
        if not self.products.get_product(product_id):
            raise NotFoundError("Produkt nie istnieje")
        return [ReviewOut.model_validate(r) for r in self.repo.list_for_product(product_id)]

    def create_review(self, user: CurrentUser, product_id: int, payload: ReviewCreate) -> ReviewOut:
        if not 1 <= payload.rating <= 5:
            raise ValidationError("Ocena musi być od 1 do 5")

        with transaction(self.db):
            if not self.products.get_product(product_id):
                raise NotFoundError("Produkt nie istnieje")

            if self.repo.get_by_user_and_product(user.id, product_id):
                raise ValidationError("Opinia o tym produkcie już została dodana")

            review = self.repo.add_review(
                ReviewModel(
                    user=self.users.get_user(user.id),
                    product_id=product_id,
                    rating=payload.rating,
                    comment=payload.comment,
                )
            )

        logger.info(f"Uzytkownik {user.id} dodal opinie {review.id} o produkcie {product_id}")
        return ReviewOut.model_validate(review)

    def delete_review(self, user: CurrentUser, review_id: int) -> None:
        with transaction(self.db):
            review = self.repo.get_review(review_id)
            if not review:
                raise NotFoundError("Opinia nie istnieje")

            if not user.is_admin and review.user_id != user.id:
                logger.warning(f"Uzytkownik {user.id} probowal usunac cudza opinie {review_id}")
                raise AccessDeniedError("Brak uprawnień do usunięcia opinii")

            self.repo.delete_review(review)

        logger.info(f"Opinia {review_id} usunieta przez {user.id}")
