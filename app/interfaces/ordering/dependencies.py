"""
Dependency injection for the ordering bounded context.

Provides FastAPI dependency functions that wire infrastructure
adapters into use cases via constructor injection.
These are the composition root for the ordering context.

The database engine and both HTTP adapters are built once per process
and shared by every request; close_http_clients() releases the HTTP
connection pools at application shutdown.
"""

from functools import lru_cache

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine

from app.application.ordering.place_order import (
    NotificationFailurePolicy,
    PlaceOrderUseCase,
)
from app.core.config import settings
from app.infrastructure.ordering.customer_repository import CustomerRepositoryAdapter
from app.infrastructure.ordering.email_notification_adapter import (
    HttpEmailNotificationAdapter,
)
from app.infrastructure.ordering.fulfillment_adapter import HttpOrderFulfillmentAdapter
from app.infrastructure.ordering.product_repository import ProductRepositoryAdapter
from app.infrastructure.ordering.tax_rate_repository import TaxRateRepositoryAdapter


@lru_cache(maxsize=1)
def _get_db_engine() -> Engine:
    """Build a SQLAlchemy engine from application settings."""
    return create_engine(settings.database_url, pool_pre_ping=True)


@lru_cache(maxsize=1)
def _get_fulfillment_adapter() -> HttpOrderFulfillmentAdapter:
    """Build the fulfillment service client from application settings."""
    return HttpOrderFulfillmentAdapter(
        base_url=settings.fulfillment_base_url,
        timeout=settings.fulfillment_timeout_seconds,
    )


@lru_cache(maxsize=1)
def _get_notification_adapter() -> HttpEmailNotificationAdapter:
    """Build the email delivery client from application settings."""
    return HttpEmailNotificationAdapter(
        url=settings.notification_url,
        timeout=settings.notification_timeout_seconds,
    )


def close_http_clients() -> None:
    """Close the shared HTTP clients and drop them from the cache."""
    if _get_fulfillment_adapter.cache_info().currsize:
        _get_fulfillment_adapter().close()
    if _get_notification_adapter.cache_info().currsize:
        _get_notification_adapter().close()
    _get_fulfillment_adapter.cache_clear()
    _get_notification_adapter.cache_clear()


def get_place_order_use_case() -> PlaceOrderUseCase:
    """Build PlaceOrderUseCase with its infrastructure dependencies."""
    engine = _get_db_engine()
    return PlaceOrderUseCase(
        product_repo=ProductRepositoryAdapter(engine=engine),
        customer_repo=CustomerRepositoryAdapter(engine=engine),
        tax_rate_port=TaxRateRepositoryAdapter(engine=engine),
        fulfillment_port=_get_fulfillment_adapter(),
        notification_port=_get_notification_adapter(),
        notification_failure_policy=NotificationFailurePolicy(
            settings.notification_failure_policy
        ),
    )
