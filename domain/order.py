from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List, Optional


class ValidationError(ValueError):
    """Raised when order data is invalid."""


@dataclass(frozen=True)
class OrderItem:
    id: str
    product_id: str
    price: float
    quantity: int

    def total(self) -> float:
        return self.quantity * self.price

    def to_payload(self) -> dict:
        return {
            "id": self.id,
            "productId": self.product_id,
            "price": self.price,
            "quantity": self.quantity,
        }

    @classmethod
    def from_payload(cls, data: dict) -> "OrderItem":
        return cls(
            id=data["id"],
            product_id=data["productId"],
            price=data["price"],
            quantity=data["quantity"],
        )


@dataclass(frozen=True)
class Coupon:
    discount: float


@dataclass
class OrderRequest:
    items: Optional[List[OrderItem]] = None
    coupon_id: Optional[str] = None


class Order:
    def __init__(
        self,
        order_id: str,
        items: List[OrderItem],
        total_price: float | None = None,
        payment_method: str | None = None,
    ):
        self.id = order_id
        self.items = items
        self.total_price = total_price
        self.payment_method = payment_method

    @classmethod
    def hydrate(cls, data: dict) -> "Order":
        """Build an order from the body returned by the order API.

        Only ``id`` is guaranteed; the rest default when the server omits them.
        """
        return cls(
            order_id=str(data["id"]),
            items=[OrderItem.from_payload(item) for item in data.get("items") or []],
            total_price=data.get("totalPrice"),
            payment_method=data.get("paymentMethod"),
        )

    def to_payload(self) -> dict:
        return {
            "id": self.id,
            "items": [item.to_payload() for item in self.items],
            "totalPrice": self.total_price,
            "paymentMethod": self.payment_method,
        }

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Order):
            return NotImplemented
        return self.to_payload() == other.to_payload()

    def __repr__(self) -> str:
        return f"Order(id={self.id!r}, total_price={self.total_price!r})"


def validate_items(items: Optional[List[OrderItem]]) -> List[OrderItem]:
    if not items:
        raise ValidationError("Order items are required")
    if any(not math.isfinite(item.price) or item.price <= 0 or item.quantity <= 0 for item in items):
        raise ValidationError("Order items are invalid")
    return items


def subtotal(items: List[OrderItem]) -> float:
    return sum(item.total() for item in items)


def apply_coupon(amount: float, coupon: Coupon | None) -> float:
    """Subtract the coupon discount, never going below zero."""
    if coupon is None:
        raise ValidationError("Invalid coupon")
    return max(0, amount - coupon.discount)
