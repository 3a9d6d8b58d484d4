"""Pydantic schemas for HTTP API requests and responses."""
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from domain.order import Order, OrderItem, OrderRequest


class OrderItemSchema(BaseModel):
    """Item line as it travels over the wire."""
    model_config = ConfigDict(populate_by_name=True)

    id: str
    product_id: str = Field(..., alias="productId")
    price: float
    quantity: int

    def to_domain(self) -> OrderItem:
        return OrderItem(id=self.id, product_id=self.product_id, price=self.price, quantity=self.quantity)


class CheckoutRequest(BaseModel):
    """Request body for checking out a cart.

    Only shapes are checked here; item rules are enforced by the domain.
    """
    model_config = ConfigDict(populate_by_name=True)

    items: Optional[List[OrderItemSchema]] = None
    coupon_id: Optional[str] = Field(None, alias="couponId")

    def to_domain(self) -> OrderRequest:
        items = [item.to_domain() for item in self.items] if self.items is not None else None
        return OrderRequest(items=items, coupon_id=self.coupon_id)


class OrderSchema(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    items: List[OrderItemSchema]
    total_price: Optional[float] = Field(None, alias="totalPrice")
    payment_method: Optional[str] = Field(None, alias="paymentMethod")

    @classmethod
    def from_domain(cls, order: Order) -> "OrderSchema":
        return cls.model_validate(order.to_payload())


class CheckoutResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    order: OrderSchema
    payment_url: str = Field(..., alias="paymentUrl")
