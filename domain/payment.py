from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from urllib.parse import urlencode

from domain.order import Order


class PaymentMethod(str, Enum):
    CREDIT = "CREDIT"
    PAYPAY = "PAYPAY"
    AUPAY = "AUPAY"


# Tiers are disabled once the total goes strictly above the limit.
PAYPAY_LIMIT = 500_000
AUPAY_LIMIT = 300_000


@dataclass(frozen=True)
class PaymentLink:
    order: Order
    url: str


def build_payment_method(total_price: float) -> str:
    methods = [PaymentMethod.CREDIT]
    if total_price <= PAYPAY_LIMIT:
        methods.append(PaymentMethod.PAYPAY)
    if total_price <= AUPAY_LIMIT:
        methods.append(PaymentMethod.AUPAY)
    return ",".join(method.value for method in methods)


def payment_url(base_url: str, order_id: str) -> str:
    return f"{base_url.rstrip('/')}/pay?{urlencode({'orderId': order_id})}"
