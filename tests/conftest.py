"""
Shared fixtures for the ordering test suites.

Fakes implement the domain port ABCs and record every call,
so tests can assert on orchestration without real infrastructure.
"""

from decimal import Decimal
from typing import Optional

import pytest

from app.application.ordering.place_order import PlaceOrderUseCase
from app.domain.ordering.entities import (
    Customer,
    Order,
    OrderConfirmation,
    TaxEntry,
)
from app.domain.ordering.ports import (
    CustomerRepository,
    NotificationPort,
    OrderFulfillmentPort,
    ProductRepository,
    TaxRatePort,
)

CUSTOMER_ID = 42


class FakeProductRepository(ProductRepository):
    def __init__(self, out_of_stock: set[str] | None = None) -> None:
        self.out_of_stock: set[str] = set(out_of_stock or ())
        self.calls: list[str] = []

    def is_in_stock(self, sku: str) -> bool:
        self.calls.append(sku)
        return sku not in self.out_of_stock


class FakeCustomerRepository(CustomerRepository):
    def __init__(self, customers: dict[int, Customer] | None = None) -> None:
        self.customers: dict[int, Customer] = dict(customers or {})
        self.calls: list[int] = []

    def get(self, customer_id: int) -> Optional[Customer]:
        self.calls.append(customer_id)
        return self.customers.get(customer_id)


class FakeTaxRatePort(TaxRatePort):
    def __init__(self, entries: list[TaxEntry] | None = None) -> None:
        self.entries: list[TaxEntry] = list(entries or [])
        self.calls: list[tuple[str, str]] = []

    def get_tax_entries(self, postal_code: str, country: str) -> list[TaxEntry]:
        self.calls.append((postal_code, country))
        return list(self.entries)


class FakeFulfillmentPort(OrderFulfillmentPort):
    def __init__(self, confirmation: OrderConfirmation) -> None:
        self.confirmation = confirmation
        self.error: Exception | None = None
        self.orders: list[Order] = []

    def fulfill(self, order: Order) -> OrderConfirmation:
        self.orders.append(order)
        if self.error is not None:
            raise self.error
        return self.confirmation


class FakeNotificationPort(NotificationPort):
    def __init__(self) -> None:
        self.error: Exception | None = None
        self.sent: list[tuple[int, int]] = []

    def send_order_confirmation_email(self, customer_id: int, order_id: int) -> None:
        self.sent.append((customer_id, order_id))
        if self.error is not None:
            raise self.error


@pytest.fixture
def customer() -> Customer:
    return Customer(
        customer_id=CUSTOMER_ID,
        name="Ada Lovelace",
        email_address="ada@example.com",
        postal_code="98101",
        country="US",
    )


@pytest.fixture
def product_repo() -> FakeProductRepository:
    return FakeProductRepository()


@pytest.fixture
def customer_repo(customer: Customer) -> FakeCustomerRepository:
    return FakeCustomerRepository({CUSTOMER_ID: customer})


@pytest.fixture
def tax_port() -> FakeTaxRatePort:
    return FakeTaxRatePort([TaxEntry(description="WA state", rate=Decimal("0.098"))])


@pytest.fixture
def fulfillment_port() -> FakeFulfillmentPort:
    # Identifiers deliberately differ from the submitted order's customer id.
    return FakeFulfillmentPort(
        OrderConfirmation(order_id=1001, order_number="ORD-1001", customer_id=7)
    )


@pytest.fixture
def notification_port() -> FakeNotificationPort:
    return FakeNotificationPort()


@pytest.fixture
def use_case(
    product_repo: FakeProductRepository,
    customer_repo: FakeCustomerRepository,
    tax_port: FakeTaxRatePort,
    fulfillment_port: FakeFulfillmentPort,
    notification_port: FakeNotificationPort,
) -> PlaceOrderUseCase:
    return PlaceOrderUseCase(
        product_repo=product_repo,
        customer_repo=customer_repo,
        tax_rate_port=tax_port,
        fulfillment_port=fulfillment_port,
        notification_port=notification_port,
    )
