from __future__ import annotations

from typing import Protocol

from domain.order import (
    Coupon,
    Order,
    OrderRequest,
    ValidationError,
    apply_coupon,
    subtotal,
    validate_items,
)
from domain.payment import PaymentLink, build_payment_method, payment_url
from infrastructure.config import get_payment_base_url
from infrastructure.logging import get_logger
from infrastructure.metrics import metrics

logger = get_logger("checkout-service")


class OrderGateway(Protocol):
    async def get_coupon(self, coupon_id: str) -> Coupon | None: ...
    async def create_order(self, payload: dict) -> dict: ...


class Navigator(Protocol):
    def open(self, url: str, target: str = "_blank") -> object: ...


class PaymentService:
    def __init__(self, navigator: Navigator, base_url: str | None = None):
        self.navigator = navigator
        self.base_url = base_url or get_payment_base_url()

    def build_payment_method(self, total_price: float) -> str:
        return build_payment_method(total_price)

    def pay_via_link(self, order: Order) -> PaymentLink:
        url = payment_url(self.base_url, order.id)
        self.navigator.open(url, "_blank")
        metrics.increment("payment_links_opened_total")
        logger.info("Payment link opened", order_id=order.id, url=url)
        return PaymentLink(order=order, url=url)


class OrderService:
    def __init__(self, payment_service: PaymentService, gateway: OrderGateway):
        self.payment_service = payment_service
        self.gateway = gateway

    async def process(self, order: OrderRequest) -> PaymentLink:
        """Validate, price and submit the order, then send the user to pay.

        Returns whatever ``PaymentService.pay_via_link`` returns.
        """
        items = validate_items(order.items)
        total_price = subtotal(items)

        if order.coupon_id:
            coupon = await self.gateway.get_coupon(order.coupon_id)
            try:
                total_price = apply_coupon(total_price, coupon)
            except ValidationError:
                metrics.increment("coupons_rejected_total")
                logger.warning("Coupon rejected", coupon_id=order.coupon_id)
                raise
            metrics.increment("coupons_applied_total")

        payment_method = self.payment_service.build_payment_method(total_price)

        payload = {"items": [item.to_payload() for item in items]}
        if order.coupon_id:
            payload["couponId"] = order.coupon_id
        payload["totalPrice"] = total_price
        payload["paymentMethod"] = payment_method

        created = await self.gateway.create_order(payload)
        metrics.increment("orders_submitted_total")
        created_order = Order.hydrate(created)
        logger.info(
            "Order submitted",
            order_id=created_order.id,
            total_price=total_price,
            payment_method=payment_method,
        )

        return self.payment_service.pay_via_link(created_order)
