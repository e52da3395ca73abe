# storefront/services/status_scheduler.py
from datetime import datetime, timedelta, timezone
from typing import Callable, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from storefront.data.database import transaction
from storefront.data.models.status_change import StatusChangeModel
from storefront.domain.errors import StorefrontError
from storefront.domain.status import OrderStatus, is_terminal, next_status, parse_status
from storefront.repos.order_repo import OrderRepo
from storefront.repos.status_change_repo import StatusChangeRepo
from storefront.utils.settings import ORDER_STATUS_DELAY_SECONDS
from storefront.utils.logging import get_logger

logger = get_logger(__name__)

# (order_id, due_at) -> wyslanie opoznionego taska, np. Celery apply_async(eta=...)
Dispatcher = Callable[[int, datetime], None]


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class StatusScheduler:
    """
    Automatyczna zmiana statusu zamowienia po uplywie czasu.

    Zamiast timera w pamieci kazda zaplanowana zmiana to wiersz
    order_status_changes (co, na co, kiedy). Task Celery z eta wykonuje ja
    o czasie, a okresowy sweep podnosi zaleglosci po restarcie workera.
    """

    def __init__(
        self,
        db: Session,
        dispatcher: Optional[Dispatcher] = None,
        delay_seconds: int = ORDER_STATUS_DELAY_SECONDS,
    ):
        self.db = db
        self.repo = StatusChangeRepo(db)
        self.orders = OrderRepo(db)
        self.dispatcher = dispatcher
        self.delay_seconds = delay_seconds

    def schedule_advance(self, order_id: int, current_status, now: datetime | None = None) -> StatusChangeModel | None:
        """
        Zapisuje nastepna zmiane statusu w transakcji wywolujacego.
        Dla statusu koncowego nic nie planuje (i kasuje stary wpis).
        """
        target = next_status(current_status)
        if target is None:
            self.repo.remove_for_order(order_id)
            return None

        # surowa wartosc - advance porownuje ja z aktualnym statusem zamowienia
        source = current_status.value if isinstance(current_status, OrderStatus) else str(current_status)

        due_at = (now or utcnow()) + timedelta(seconds=self.delay_seconds)
        change = self.repo.upsert(order_id, source, target, due_at)

        logger.info(
            f"Zaplanowano zmiane statusu zamowienia {order_id} "
            f"z {source} na {target.value} na {due_at.isoformat()}"
        )
        return change

    def cancel(self, order_id: int) -> None:
        if self.repo.remove_for_order(order_id):
            logger.info(f"Anulowano zaplanowana zmiane statusu zamowienia {order_id}")

    def arm(self, change: StatusChangeModel | None) -> None:
        """
        Po commicie: przekazuje zmiane do dispatchera (fire and forget).
        Blad jest tylko logowany, wpis w bazie zostaje dla sweepa.
        """
        if change is None or self.dispatcher is None:
            return
        try:
            self.dispatcher(change.order_id, change.due_at)
        except Exception as e:
            logger.warning(
                f"Nie udalo sie wyslac zmiany statusu zamowienia {change.order_id}: {e}"
            )

    def advance(self, order_id: int, now: datetime | None = None) -> OrderStatus | None:
        """
        Wykonuje zaplanowana zmiane statusu jesli jest juz wymagalna.
        Zwraca nowy status albo None gdy nic nie zrobiono. Nie rzuca wyjatkow.
        """
        now = now or utcnow()
        follow_up = None

        try:
            with transaction(self.db):
                change = self.repo.get_due_for_order(order_id, now)
                if change is None:
                    logger.info(f"Brak wymagalnej zmiany statusu dla zamowienia {order_id}")
                    return None

                order = self.orders.find_by_id(order_id)
                if order is None:
                    logger.warning(f"Zamowienie {order_id} nie istnieje, pomijam zmiane statusu")
                    self.repo.remove_for_order(order_id)
                    return None

                if order.order_status != change.from_status:
                    # ktos zmienil status recznie w miedzyczasie
                    logger.warning(
                        f"Zamowienie {order_id} ma status {order.order_status} "
                        f"zamiast {change.from_status}, pomijam zmiane statusu"
                    )
                    self.repo.remove_for_order(order_id)
                    return None

                target = parse_status(change.to_status)
                self.orders.update_status(order_id, target)
                self.repo.remove_for_order(order_id)

                if not is_terminal(target):
                    follow_up = self.schedule_advance(order_id, target, now=now)

            logger.info(f"Status zamowienia {order_id} zmieniony na {target.value}")

        except (StorefrontError, SQLAlchemyError, ValueError) as e:
            logger.error(f"Blad przy zmianie statusu zamowienia {order_id}: {e}")
            return None

        self.arm(follow_up)
        return target

    def sweep_due(self, now: datetime | None = None, limit: int = 100) -> int:
        """Podnosi wszystkie zalegle zmiany (np. po restarcie workera)."""
        now = now or utcnow()
        order_ids = self.repo.list_due_order_ids(now, limit=limit)
        # koniec transakcji odczytu przed wlasciwymi zmianami
        self.db.rollback()

        advanced = 0
        for order_id in order_ids:
            if self.advance(order_id, now=now) is not None:
                advanced += 1

        logger.info(f"Sweep statusow: {len(order_ids)} wymagalnych, {advanced} zmienionych")
        return advanced
