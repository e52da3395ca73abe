# storefront/domain/errors.py


class StorefrontError(Exception):
    """Bazowy wyjatek domeny sklepu."""


class NotFoundError(StorefrontError):
    pass


class ValidationError(StorefrontError):
    pass


class AccessDeniedError(StorefrontError):
    pass


class PersistenceError(StorefrontError):
    pass


class InsufficientStockError(StorefrontError):
    """Zamowiona ilosc przekracza stan magazynowy produktu."""

    def __init__(self, product_id: int, requested: int, available: int):
        self.product_id = product_id
        self.requested = requested
        self.available = available
        super().__init__(
            f"Niewystarczajacy stan produktu {product_id}: "
            f"zamowiono {requested}, dostepne {available}"
        )


class ConflictError(StorefrontError):
    """Zasob juz istnieje (np. zajety numer telefonu)."""
