from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI, HTTPException, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import HTMLResponse, PlainTextResponse

from app.errors import (
    generic_error_handler,
    request_validation_error_handler,
    upstream_error_handler,
    validation_error_handler,
)
from app.schemas import CheckoutRequest, CheckoutResponse, OrderSchema
from application.use_cases import OrderGateway, OrderService, PaymentService
from domain.order import ValidationError
from infrastructure.api_client import OrderApiClient
from infrastructure.browser import LinkRecorder
from infrastructure.config import get_service_name
from infrastructure.logging import get_logger
from infrastructure.metrics import metrics
from ui.page import page_markup

logger = get_logger(get_service_name())

# Gateway to the order API (initialized at startup)
api_client: OrderGateway | None = None


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Open the order API client for the lifetime of the app."""
    global api_client

    client = OrderApiClient()
    api_client = client
    logger.info("Checkout service started", api_base_url=client.base_url)

    yield

    await client.aclose()
    api_client = None


app = FastAPI(title="Checkout Service", version="0.1.0", lifespan=lifespan)

app.add_exception_handler(ValidationError, validation_error_handler)
app.add_exception_handler(RequestValidationError, request_validation_error_handler)
app.add_exception_handler(httpx.HTTPError, upstream_error_handler)
app.add_exception_handler(Exception, generic_error_handler)


@app.get("/health")
async def health() -> dict:
    return {"service": get_service_name(), "status": "ok"}


@app.get("/metrics", response_class=PlainTextResponse)
async def get_metrics() -> str:
    return metrics.get_prometheus_text()


@app.get("/", response_class=HTMLResponse)
async def index() -> str:
    return page_markup()


@app.post(
    "/checkout",
    response_model=CheckoutResponse,
    response_model_by_alias=True,
    status_code=status.HTTP_201_CREATED,
)
async def checkout(request: CheckoutRequest) -> CheckoutResponse:
    """Price and submit the cart, answering with the created order and its payment link."""
    if not api_client:
        raise HTTPException(status_code=500, detail="Order API client not initialized")

    # Record the payment link instead of opening a browser on the server
    service = OrderService(PaymentService(LinkRecorder()), api_client)
    link = await service.process(request.to_domain())

    return CheckoutResponse(order=OrderSchema.from_domain(link.order), payment_url=link.url)
