from decimal import Decimal

from storefront.data.models import ProductModel
from storefront.domain.schemas import OrderCreate, OrderItemIn


def stock_of(database, product_id):
    with database.session() as session:
        return session.get(ProductModel, product_id).stock


def make_order(items, tax="0.00", shipping="0.00", method="card", total=None):
    """items: lista (product_id, quantity, cena)."""
    lines = [OrderItemIn(product_id=p, quantity=q, price=Decimal(price)) for p, q, price in items]
    items_price = sum((line.price * line.quantity for line in lines), Decimal("0.00"))
    if total is None:
        total = items_price + Decimal(tax) + Decimal(shipping)
    return OrderCreate(
        items=lines,
        tax_price=Decimal(tax),
        shipping_price=Decimal(shipping),
        total_price=Decimal(total),
        payment_method=method,
    )


def auth(user):
    return {"X-User-Id": str(user.id)}
