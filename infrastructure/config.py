import logging
import os

DEFAULT_API_BASE_URL = "https://67eb7353aa794fb3222a4c0e.mockapi.io"
DEFAULT_PAYMENT_BASE_URL = "https://payment.example.com"


def get_service_name() -> str:
    return os.getenv("APP__SERVICE_NAME", "checkout-service")


def get_api_base_url() -> str:
    return os.getenv("APP__API_BASE_URL", DEFAULT_API_BASE_URL)


def get_payment_base_url() -> str:
    return os.getenv("APP__PAYMENT_BASE_URL", DEFAULT_PAYMENT_BASE_URL)


def get_log_level() -> int:
    name = os.getenv("APP__LOG_LEVEL", "INFO").upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.INFO
