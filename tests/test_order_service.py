from typing import Dict, List

import pytest

from application.use_cases import OrderService, PaymentService
from domain.order import Coupon, Order, OrderItem, OrderRequest, ValidationError
from infrastructure.browser import LinkRecorder
from infrastructure.metrics import metrics


class InMemoryGateway:
    def __init__(self, coupons: Dict[str, Coupon] | None = None, created: dict | None = None):
        self.coupons = coupons or {}
        self.created = created or {"id": "order123"}
        self.coupon_lookups: List[str] = []
        self.submitted: List[dict] = []

    async def get_coupon(self, coupon_id: str) -> Coupon | None:
        self.coupon_lookups.append(coupon_id)
        return self.coupons.get(coupon_id)

    async def create_order(self, payload: dict) -> dict:
        self.submitted.append(payload)
        return self.created


class RecordingPaymentService(PaymentService):
    def __init__(self):
        super().__init__(LinkRecorder(), base_url="https://payment.example.com")
        self.totals: List[float] = []
        self.paid: List[Order] = []

    def build_payment_method(self, total_price: float) -> str:
        self.totals.append(total_price)
        return "mock-payment-method"

    def pay_via_link(self, order: Order):
        self.paid.append(order)
        return super().pay_via_link(order)


@pytest.fixture(autouse=True)
def reset_metrics():
    metrics.reset()
    yield
    metrics.reset()


@pytest.fixture
def payment_service():
    return RecordingPaymentService()


def item(price, quantity, item_id="1", product_id="product 1"):
    return OrderItem(id=item_id, product_id=product_id, price=price, quantity=quantity)


@pytest.mark.asyncio
async def test_process_rejects_missing_items(payment_service):
    service = OrderService(payment_service, InMemoryGateway())

    with pytest.raises(ValidationError, match="Order items are required"):
        await service.process(OrderRequest())


@pytest.mark.asyncio
async def test_process_rejects_invalid_items(payment_service):
    gateway = InMemoryGateway()
    service = OrderService(payment_service, gateway)

    with pytest.raises(ValidationError, match="Order items are invalid"):
        await service.process(OrderRequest(items=[item(price=0, quantity=1)]))

    assert gateway.submitted == []


@pytest.mark.asyncio
async def test_process_calculates_total_price(payment_service):
    gateway = InMemoryGateway()
    service = OrderService(payment_service, gateway)

    await service.process(
        OrderRequest(items=[item(100, 2), item(50, 1, item_id="2", product_id="p2")])
    )

    assert payment_service.totals == [250]
    assert gateway.coupon_lookups == []


@pytest.mark.asyncio
async def test_process_applies_valid_coupon(payment_service):
    gateway = InMemoryGateway(coupons={"123": Coupon(discount=50)})
    service = OrderService(payment_service, gateway)

    await service.process(OrderRequest(items=[item(100, 1)], coupon_id="123"))

    assert gateway.coupon_lookups == ["123"]
    assert payment_service.totals == [50]
    assert metrics.get("coupons_applied_total") == 1


@pytest.mark.asyncio
async def test_process_rejects_invalid_coupon(payment_service):
    gateway = InMemoryGateway()
    service = OrderService(payment_service, gateway)

    with pytest.raises(ValidationError, match="Invalid coupon"):
        await service.process(OrderRequest(items=[item(20, 1)], coupon_id="AAA"))

    assert gateway.submitted == []
    assert payment_service.paid == []
    assert metrics.get("coupons_rejected_total") == 1


@pytest.mark.asyncio
async def test_process_clamps_total_at_zero(payment_service):
    gateway = InMemoryGateway(coupons={"BBB": Coupon(discount=100)})
    service = OrderService(payment_service, gateway)

    await service.process(OrderRequest(items=[item(50, 1)], coupon_id="BBB"))

    assert payment_service.totals == [0]


@pytest.mark.asyncio
async def test_process_sends_order_payload(payment_service):
    gateway = InMemoryGateway(coupons={"123": Coupon(discount=100)})
    service = OrderService(payment_service, gateway)

    await service.process(OrderRequest(items=[item(100, 1)], coupon_id="123"))

    assert gateway.submitted == [
        {
            "items": [{"id": "1", "productId": "product 1", "price": 100, "quantity": 1}],
            "couponId": "123",
            "totalPrice": 0,
            "paymentMethod": "mock-payment-method",
        }
    ]
    assert metrics.get("orders_submitted_total") == 1


@pytest.mark.asyncio
async def test_process_omits_coupon_from_payload_without_coupon(payment_service):
    gateway = InMemoryGateway()
    service = OrderService(payment_service, gateway)

    await service.process(OrderRequest(items=[item(100, 2)]))

    assert "couponId" not in gateway.submitted[0]
    assert gateway.submitted[0]["totalPrice"] == 200


@pytest.mark.asyncio
async def test_process_pays_created_order(payment_service):
    gateway = InMemoryGateway(created={"id": "order123"})
    service = OrderService(payment_service, gateway)

    link = await service.process(OrderRequest(items=[item(100, 1)]))

    assert payment_service.paid == [Order("order123", items=[])]
    assert link.url == "https://payment.example.com/pay?orderId=order123"
    assert link.order.id == "order123"
    assert metrics.get("payment_links_opened_total") == 1


@pytest.mark.asyncio
async def test_process_propagates_gateway_failure(payment_service):
    class FailingGateway(InMemoryGateway):
        async def create_order(self, payload: dict) -> dict:
            raise ConnectionError("order API down")

    service = OrderService(payment_service, FailingGateway())

    with pytest.raises(ConnectionError):
        await service.process(OrderRequest(items=[item(100, 1)]))

    assert payment_service.paid == []


@pytest.mark.asyncio
@pytest.mark.parametrize("price", [float("nan"), float("inf")])
async def test_process_rejects_non_finite_price(payment_service, price):
    gateway = InMemoryGateway()
    service = OrderService(payment_service, gateway)

    with pytest.raises(ValidationError, match="Order items are invalid"):
        await service.process(OrderRequest(items=[item(price, 1)]))

    assert gateway.submitted == []
    assert payment_service.totals == []
