#import wszystkich modeli zeby SQLAlchemy je zarejestrowal w base metadata

from storefront.data.models.user import UserModel
from storefront.data.models.product import ProductModel
from storefront.data.models.order import OrderModel
from storefront.data.models.order_item import OrderItemModel
from storefront.data.models.status_change import StatusChangeModel
from storefront.data.models.review import ReviewModel

__all__ = ["UserModel", "ProductModel", "OrderModel", "OrderItemModel", "StatusChangeModel", "ReviewModel"]
