# storefront/domain/schemas.py
from pydantic import BaseModel, Field, ConfigDict
from pydantic.alias_generators import to_camel
from typing import List, Literal, Optional
from decimal import Decimal
from datetime import datetime

from storefront.domain.status import OrderStatus


class ApiModel(BaseModel):
    """Baza schematow: camelCase w JSON, snake_case w Pythonie."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


# =====================================================
# USERS
# =====================================================
class UserCreate(ApiModel):
    phone: str = Field(..., min_length=3, max_length=32, description="Numer telefonu (unikalny)")
    first_name: Optional[str] = Field(None, max_length=100)
    last_name: Optional[str] = Field(None, max_length=100)


class UserRead(ApiModel):
    id: int
    phone: str
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    is_admin: bool


class ProfileOut(ApiModel):
    id: int
    phone: str
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    gender: Optional[str] = None
    profile_updated_at: Optional[datetime] = None


class ProfileUpdate(ApiModel):
    """Puste pola zostawiaja poprzednia wartosc."""

    first_name: Optional[str] = Field(None, max_length=100)
    last_name: Optional[str] = Field(None, max_length=100)
    gender: Optional[Literal["male", "female", "other"]] = None


class CurrentUser(BaseModel):
    """Uwierzytelniony wywolujacy (id + flaga admina)."""

    id: int
    is_admin: bool = False


# =====================================================
# PRODUCTS
# =====================================================
class ProductBase(ApiModel):
    title: str = Field(..., min_length=1, max_length=255)
    price: Decimal = Field(..., ge=0, decimal_places=2)
    stock: int = Field(0, ge=0, description="Stan magazynowy (>= 0)")
    category: Optional[str] = None
    article: Optional[str] = None
    manufacturer: Optional[str] = None
    expiration_date: Optional[str] = None
    composition: Optional[str] = None
    contraindications: Optional[str] = None
    storage_conditions: Optional[str] = None
    recommendations: Optional[str] = None
    instructions: Optional[str] = None
    tags: Optional[str] = None
    image_url: Optional[str] = Field(None, alias="image_url")
    description: Optional[str] = None


class ProductCreate(ProductBase):
    pass


class ProductUpdate(ApiModel):
    """Czesciowa aktualizacja: tylko przeslane pola."""

    title: Optional[str] = Field(None, min_length=1, max_length=255)
    price: Optional[Decimal] = Field(None, ge=0, decimal_places=2)
    stock: Optional[int] = Field(None, ge=0)
    category: Optional[str] = None
    article: Optional[str] = None
    manufacturer: Optional[str] = None
    expiration_date: Optional[str] = None
    composition: Optional[str] = None
    contraindications: Optional[str] = None
    storage_conditions: Optional[str] = None
    recommendations: Optional[str] = None
    instructions: Optional[str] = None
    tags: Optional[str] = None
    image_url: Optional[str] = Field(None, alias="image_url")
    description: Optional[str] = None


class ProductOut(ProductBase):
    id: int
    created_at: Optional[datetime] = None


class PriceRange(ApiModel):
    min_price: Decimal
    max_price: Decimal


# =====================================================
# REVIEWS
# =====================================================
class ReviewCreate(ApiModel):
    rating: int = Field(..., ge=1, le=5, description="Ocena 1-5")
    comment: Optional[str] = Field(None, max_length=2000)


class ReviewOut(ApiModel):
    id: int
    user_id: int
    product_id: int
    rating: int
    comment: Optional[str] = None
    created_at: datetime
    user_name: str


# =====================================================
# ORDERS
# =====================================================
class OrderItemIn(ApiModel):
    product_id: int = Field(..., gt=0, description="ID produktu (musi być > 0)")
    quantity: int = Field(..., gt=0, description="Ilość (musi być > 0)")
    price: Decimal = Field(..., gt=0, description="Cena jednostkowa w chwili zakupu")


class OrderCreate(ApiModel):
    """Schema dla tworzenia zamówienia. Pusta lista pozycji odrzucana w serwisie."""

    items: List[OrderItemIn] = Field(default_factory=list)
    items_price: Optional[Decimal] = Field(None, ge=0)
    tax_price: Decimal = Field(Decimal("0.00"), ge=0)
    shipping_price: Decimal = Field(Decimal("0.00"), ge=0)
    total_price: Decimal = Field(..., ge=0)
    payment_method: str = Field(..., min_length=1, max_length=50)


class StatusUpdate(ApiModel):
    status: OrderStatus


class PaymentInfo(ApiModel):
    method: Optional[str] = None
    status: str = "pending"


class OrderItemOut(ApiModel):
    id: int
    order_id: int
    product_id: int
    quantity: int
    price: Decimal


class OrderOut(ApiModel):
    id: int
    user_id: int
    order_items: List[OrderItemOut]
    payment_info: Optional[PaymentInfo] = None
    items_price: Decimal
    tax_price: Decimal
    shipping_price: Decimal
    total_price: Decimal
    order_status: OrderStatus
    created_at: datetime


class AdminOrderOut(OrderOut):
    user_phone: Optional[str] = None


class DeleteResult(ApiModel):
    success: bool = True
    message: str


# =====================================================
# ADMIN
# =====================================================
class AdminStats(ApiModel):
    users_count: int
    products_count: int
    total_orders: int
    total_revenue: Decimal
