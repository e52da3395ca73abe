# storefront/domain/status.py
from enum import Enum


class OrderStatus(str, Enum):
    PROCESSING = "Processing"
    SHIPPED = "Shipped"
    DELIVERED = "Delivered"
    COMPLETED = "Completed"
    CANCELLED = "Cancelled"


TERMINAL_STATUSES = frozenset({OrderStatus.COMPLETED, OrderStatus.CANCELLED})

#automatyczna sciezka zamowienia, Cancelled tylko recznie
_NEXT_STATUS = {
    OrderStatus.PROCESSING: OrderStatus.SHIPPED,
    OrderStatus.SHIPPED: OrderStatus.DELIVERED,
    OrderStatus.DELIVERED: OrderStatus.COMPLETED,
}


def parse_status(value) -> OrderStatus:
    """Zwraca OrderStatus albo ValueError dla nieznanej wartosci."""
    if isinstance(value, OrderStatus):
        return value
    return OrderStatus(value)


def is_terminal(status) -> bool:
    try:
        return parse_status(status) in TERMINAL_STATUSES
    except ValueError:
        return False


def next_status(current) -> OrderStatus | None:
    """
    Nastepny status w automatycznej sekwencji.
    Nieznany status -> Shipped, status koncowy -> None.
    """
    try:
        status = parse_status(current)
    except ValueError:
        return OrderStatus.SHIPPED

    if status in TERMINAL_STATUSES:
        return None
    return _NEXT_STATUS[status]
