# storefront/services/order_service.py
from decimal import Decimal
from typing import List, Optional

from sqlalchemy.orm import Session

from storefront.data.database import transaction
from storefront.data.models.order import OrderModel
from storefront.data.models.order_item import OrderItemModel
from storefront.domain.errors import AccessDeniedError, NotFoundError, ValidationError
from storefront.domain.schemas import AdminOrderOut, CurrentUser, OrderCreate, OrderOut
from storefront.domain.status import OrderStatus, TERMINAL_STATUSES, is_terminal, parse_status
from storefront.repos.order_repo import OrderRepo
from storefront.repos.stock_ledger import StockLedger
from storefront.services.status_scheduler import Dispatcher, StatusScheduler
from storefront.utils.logging import get_logger

logger = get_logger(__name__)

#tolerancja zaokraglen przy sprawdzaniu sum od klienta
PRICE_TOLERANCE = Decimal("0.01")


class OrderService:
    """
    Serwis odpowiedzialny za domenę zamówień.
    Rezerwacja stanu, zapis zamowienia i plan zmiany statusu
    ida w jednej transakcji - albo wszystko, albo nic.
    """

    def __init__(self, db: Session, dispatcher: Optional[Dispatcher] = None):
        self.db = db
        self.repo = OrderRepo(db)
        self.ledger = StockLedger(db)
        self.scheduler = StatusScheduler(db, dispatcher=dispatcher)

    # =====================================================
    # COMMANDS
    # =====================================================
    def place_order(self, user: CurrentUser, payload: OrderCreate) -> OrderOut:
        """
        Use Case: Tworzenie zamówienia.

        1. Walidacja pozycji i sum
        2. Rezerwacja stanu dla kazdej pozycji
        3. Zapis naglowka + pozycji
        4. Plan automatycznej zmiany statusu
        """
        items_price = self._validate(payload)

        with transaction(self.db):
            for item in payload.items:
                self.ledger.reserve(item.product_id, item.quantity)

            order = OrderModel(
                user_id=user.id,
                payment_info={"method": payload.payment_method, "status": "pending"},
                items_price=items_price,
                tax_price=payload.tax_price,
                shipping_price=payload.shipping_price,
                total_price=payload.total_price,
                order_status=OrderStatus.PROCESSING.value,
                order_items=[
                    OrderItemModel(
                        product_id=item.product_id,
                        quantity=item.quantity,
                        price=item.price,
                    )
                    for item in payload.items
                ],
            )
            created = self.repo.create(order)
            change = self.scheduler.schedule_advance(created.id, OrderStatus.PROCESSING)

        logger.info(
            f"Zamowienie {created.id} utworzone dla uzytkownika {user.id}, "
            f"pozycji: {len(payload.items)}, suma: {created.total_price}"
        )

        self.scheduler.arm(change)
        return OrderOut.model_validate(created)

    def update_status(self, user: CurrentUser, order_id: int, status) -> OrderOut:
        self._require_admin(user)

        try:
            new_status = parse_status(status)
        except ValueError:
            raise ValidationError(f"Nieznany status zamowienia: {status}")

        change = None
        with transaction(self.db):
            order = self.repo.find_by_id(order_id)
            if not order:
                raise NotFoundError("Zamówienie nie istnieje")

            old_status = order.order_status

            # towar anulowanego zamowienia wrocil juz na stan
            if old_status == OrderStatus.CANCELLED.value and new_status != OrderStatus.CANCELLED:
                raise ValidationError(f"Zamówienie {order_id} jest anulowane, nie można zmienić statusu")

            # anulowanie aktywnego zamowienia zwraca towar na stan
            if new_status == OrderStatus.CANCELLED and not is_terminal(old_status):
                for item in order.order_items:
                    self.ledger.release(item.product_id, item.quantity)

            self.repo.update_status(order_id, new_status)

            # reczna zmiana zastepuje zaplanowana
            if new_status in TERMINAL_STATUSES:
                self.scheduler.cancel(order_id)
            else:
                change = self.scheduler.schedule_advance(order_id, new_status)

        logger.info(f"Status zamowienia {order_id} zmieniony z {old_status} na {new_status.value}")

        self.scheduler.arm(change)
        return OrderOut.model_validate(order)

    def delete_order(self, user: CurrentUser, order_id: int) -> None:
        self._require_admin(user)

        with transaction(self.db):
            if not self.repo.delete(order_id):
                raise NotFoundError("Zamówienie nie istnieje")

        logger.info(f"Zamowienie {order_id} usuniete")

    # =====================================================
    # QUERY
    # =====================================================
    def get_order(self, user: CurrentUser, order_id: int) -> OrderOut:
        order = self.repo.find_by_id(order_id)

        if not order:
            raise NotFoundError("Zamówienie nie istnieje")

        if not user.is_admin and order.user_id != user.id:
            logger.warning(f"Uzytkownik {user.id} probowal pobrac cudze zamowienie {order_id}")
            raise AccessDeniedError("Brak dostępu do zamówienia")

        return OrderOut.model_validate(order)

    def list_own(self, user: CurrentUser) -> List[OrderOut]:
        return [OrderOut.model_validate(o) for o in self.repo.find_by_user(user.id)]

    def list_all(self, user: CurrentUser) -> List[AdminOrderOut]:
        """Wszystkie zamowienia z telefonem zamawiajacego (panel admina)."""
        self._require_admin(user)
        return [
            AdminOrderOut.model_validate(order).model_copy(update={"user_phone": phone})
            for order, phone in self.repo.find_all_with_phone()
        ]

    # =====================================================
    # HELPERS
    # =====================================================
    @staticmethod
    def _require_admin(user: CurrentUser) -> None:
        if not user.is_admin:
            raise AccessDeniedError("Brak uprawnień administratora")

    @staticmethod
    def _validate(payload: OrderCreate) -> Decimal:
        """Zwraca przeliczona sume pozycji albo ValidationError."""
        if not payload.items:
            raise ValidationError("Nie można utworzyć zamówienia bez produktów")

        for item in payload.items:
            if not item.product_id or not item.quantity or not item.price:
                raise ValidationError("Niepoprawne dane produktów w zamówieniu")
            if item.quantity <= 0 or item.price <= 0:
                raise ValidationError("Ilość i cena muszą być większe niż 0")

        items_price = sum(
            (item.price * item.quantity for item in payload.items), Decimal("0.00")
        )

        # sumy od klienta nie sa zrodlem prawdy - liczymy je po stronie serwera
        if payload.items_price is not None and abs(payload.items_price - items_price) > PRICE_TOLERANCE:
            raise ValidationError(
                f"Suma pozycji {payload.items_price} nie zgadza się z wyliczoną {items_price}"
            )

        expected_total = items_price + payload.tax_price + payload.shipping_price
        if abs(payload.total_price - expected_total) > PRICE_TOLERANCE:
            raise ValidationError(
                f"Kwota całkowita {payload.total_price} nie zgadza się z wyliczoną {expected_total}"
            )

        return items_price
