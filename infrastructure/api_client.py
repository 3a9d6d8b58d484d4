"""HTTP gateway to the remote order and coupon API."""
from __future__ import annotations

from typing import Optional

import httpx

from domain.order import Coupon
from infrastructure.config import get_api_base_url
from infrastructure.logging import get_logger

logger = get_logger("checkout-service.api")


class OrderApiClient:
    """Talks to ``/coupons/{id}`` and ``/order`` on the order API host.

    Failures are not retried; ``httpx`` errors reach the caller unchanged.
    """

    def __init__(self, base_url: Optional[str] = None, client: Optional[httpx.AsyncClient] = None):
        self.base_url = (base_url or get_api_base_url()).rstrip("/")
        self._owns_client = client is None
        self.client = client or httpx.AsyncClient()

    async def __aenter__(self) -> "OrderApiClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_client:
            await self.client.aclose()

    async def get_coupon(self, coupon_id: str) -> Coupon | None:
        response = await self.client.get(f"{self.base_url}/coupons/{coupon_id}")
        if response.status_code == httpx.codes.NOT_FOUND:
            logger.info("Coupon not found", coupon_id=coupon_id)
            return None
        response.raise_for_status()

        data = response.json()
        discount = data.get("discount") if isinstance(data, dict) else None
        if discount is None:
            return None
        return Coupon(discount=float(discount))

    async def create_order(self, payload: dict) -> dict:
        response = await self.client.post(
            f"{self.base_url}/order",
            json=payload,
            headers={"Content-Type": "application/json"},
        )
        response.raise_for_status()
        return response.json()
