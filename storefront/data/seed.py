# storefront/data/seed.py
from decimal import Decimal

from storefront.data.database import Database, transaction
from storefront.data.models import ProductModel, UserModel
from storefront.utils.settings import DATABASE_URL
from storefront.utils.logging import get_logger

logger = get_logger(__name__)

PRODUCTS = [
    {"title": "Paracetamol 500 mg, 20 tabl.", "price": Decimal("8.99"), "stock": 120, "category": "pain", "tags": "fever,pain"},
    {"title": "Ibuprofen 200 mg, 24 kaps.", "price": Decimal("12.49"), "stock": 80, "category": "pain", "tags": "pain,inflammation"},
    {"title": "Witamina D3 2000 IU, 60 kaps.", "price": Decimal("24.90"), "stock": 50, "category": "vitamins", "tags": "immunity"},
    {"title": "Syrop na kaszel 150 ml", "price": Decimal("19.99"), "stock": 30, "category": "cold", "tags": "cough,cold"},
]


def seed(database: Database) -> None:
    database.create_all()
    with database.session() as db:
        # not forcing: only seed if empty
        if db.query(ProductModel).first():
            logger.info("Baza ma juz produkty, pomijam seed")
            return

        with transaction(db):
            db.add(UserModel(phone="+48000000000", first_name="Admin", is_admin=True))
            db.add_all([ProductModel(**p) for p in PRODUCTS])

        logger.info(f"Seed: dodano {len(PRODUCTS)} produktow i konto admina")


if __name__ == "__main__":
    seed(Database(DATABASE_URL))
