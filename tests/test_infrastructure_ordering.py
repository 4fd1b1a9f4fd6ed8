"""
Tests for the ordering infrastructure adapters.

SQL adapters run against an in-memory SQLite database.
HTTP adapters run against httpx.MockTransport; no network calls.
"""

import json
from datetime import date
from decimal import Decimal

import httpx
import pytest
from sqlalchemy import create_engine, text
from sqlalchemy.pool import StaticPool

from app.domain.ordering.entities import Order, OrderItem, Product, TaxEntry
from app.infrastructure.ordering.customer_repository import CustomerRepositoryAdapter
from app.infrastructure.ordering.email_notification_adapter import (
    HttpEmailNotificationAdapter,
)
from app.infrastructure.ordering.fulfillment_adapter import HttpOrderFulfillmentAdapter
from app.infrastructure.ordering.product_repository import ProductRepositoryAdapter
from app.infrastructure.ordering.tax_rate_repository import TaxRateRepositoryAdapter

SCHEMA = [
    """
    CREATE TABLE product_stock (
        sku TEXT PRIMARY KEY,
        quantity_on_hand INTEGER NOT NULL
    )
    """,
    """
    CREATE TABLE customers (
        id INTEGER PRIMARY KEY,
        name TEXT,
        email_address TEXT,
        address_line1 TEXT,
        address_line2 TEXT,
        city TEXT,
        state_or_province TEXT,
        postal_code TEXT,
        country TEXT
    )
    """,
    """
    CREATE TABLE tax_rates (
        description TEXT NOT NULL,
        rate TEXT NOT NULL,
        country TEXT NOT NULL,
        postal_code TEXT
    )
    """,
]


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    with engine.begin() as conn:
        for statement in SCHEMA:
            conn.execute(text(statement))
        conn.execute(
            text("INSERT INTO product_stock (sku, quantity_on_hand) VALUES (:sku, :qty)"),
            [{"sku": "apple", "qty": 3}, {"sku": "pear", "qty": 0}],
        )
        conn.execute(
            text(
                "INSERT INTO customers (id, name, email_address, address_line1, "
                "address_line2, city, state_or_province, postal_code, country) "
                "VALUES (42, 'Ada Lovelace', 'ada@example.com', '1 Main St', NULL, "
                "'Seattle', 'WA', '98101', 'US')"
            )
        )
        conn.execute(
            text(
                "INSERT INTO tax_rates (description, rate, country, postal_code) "
                "VALUES (:description, :rate, :country, :postal_code)"
            ),
            [
                {"description": "Federal", "rate": "0.05", "country": "US", "postal_code": None},
                {"description": "Seattle", "rate": "0.048", "country": "US", "postal_code": "98101"},
                {"description": "Portland", "rate": "0.03", "country": "US", "postal_code": "97201"},
                {"description": "VAT", "rate": "0.2", "country": "FR", "postal_code": None},
            ],
        )
    yield engine
    engine.dispose()


def _order() -> Order:
    return Order(
        customer_id=42,
        items=(
            OrderItem(
                product=Product(sku="apple", price=Decimal("2.50"), name="Apple"),
                quantity=2,
            ),
        ),
    )


class TestProductRepositoryAdapter:
    """Tests for stock lookups."""

    def test_positive_stock_is_in_stock(self, engine) -> None:
        assert ProductRepositoryAdapter(engine).is_in_stock("apple") is True

    def test_zero_stock_is_out_of_stock(self, engine) -> None:
        assert ProductRepositoryAdapter(engine).is_in_stock("pear") is False

    def test_unknown_sku_is_out_of_stock(self, engine) -> None:
        assert ProductRepositoryAdapter(engine).is_in_stock("durian") is False


class TestCustomerRepositoryAdapter:
    """Tests for customer lookups."""

    def test_get_existing_customer(self, engine) -> None:
        customer = CustomerRepositoryAdapter(engine).get(42)
        assert customer is not None
        assert customer.customer_id == 42
        assert customer.postal_code == "98101"
        assert customer.country == "US"
        assert customer.city == "Seattle"
        assert customer.address_line2 == ""

    def test_get_missing_customer_returns_none(self, engine) -> None:
        assert CustomerRepositoryAdapter(engine).get(999) is None


class TestTaxRateRepositoryAdapter:
    """Tests for tax entry resolution."""

    def test_country_wide_and_postal_code_rates(self, engine) -> None:
        entries = TaxRateRepositoryAdapter(engine).get_tax_entries("98101", "US")
        assert entries == [
            TaxEntry(description="Federal", rate=Decimal("0.05")),
            TaxEntry(description="Seattle", rate=Decimal("0.048")),
        ]

    def test_other_postal_code_gets_country_rate_only(self, engine) -> None:
        entries = TaxRateRepositoryAdapter(engine).get_tax_entries("10001", "US")
        assert [e.description for e in entries] == ["Federal"]

    def test_unknown_country_has_no_taxes(self, engine) -> None:
        assert TaxRateRepositoryAdapter(engine).get_tax_entries("1000", "BE") == []


class TestHttpOrderFulfillmentAdapter:
    """Tests for the fulfillment service client."""

    def test_fulfill_posts_order_and_parses_confirmation(self) -> None:
        captured: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            captured.append(request)
            return httpx.Response(
                201,
                json={
                    "order_id": 1001,
                    "order_number": "ORD-1001",
                    "customer_id": 42,
                    "estimated_delivery_date": "2026-11-02",
                },
            )

        client = httpx.Client(
            transport=httpx.MockTransport(handler), base_url="http://fulfillment.test"
        )
        adapter = HttpOrderFulfillmentAdapter("http://fulfillment.test", client=client)

        confirmation = adapter.fulfill(_order())

        assert confirmation.order_id == 1001
        assert confirmation.order_number == "ORD-1001"
        assert confirmation.customer_id == 42
        assert confirmation.estimated_delivery_date == date(2026, 11, 2)

        request = captured[0]
        assert request.method == "POST"
        assert request.url == "http://fulfillment.test/orders"
        assert "x-order-event" not in request.headers
        assert json.loads(request.content) == {
            "customer_id": 42,
            "items": [
                {"sku": "apple", "name": "Apple", "unit_price": "2.50", "quantity": 2}
            ],
        }

    def test_missing_delivery_date(self) -> None:
        client = httpx.Client(
            transport=httpx.MockTransport(
                lambda request: httpx.Response(
                    200,
                    json={"order_id": 1, "order_number": "ORD-1", "customer_id": 42},
                )
            ),
            base_url="http://fulfillment.test",
        )
        adapter = HttpOrderFulfillmentAdapter("http://fulfillment.test", client=client)
        assert adapter.fulfill(_order()).estimated_delivery_date is None

    def test_error_status_raises(self) -> None:
        client = httpx.Client(
            transport=httpx.MockTransport(lambda request: httpx.Response(503)),
            base_url="http://fulfillment.test",
        )
        adapter = HttpOrderFulfillmentAdapter("http://fulfillment.test", client=client)
        with pytest.raises(httpx.HTTPStatusError):
            adapter.fulfill(_order())


class TestHttpEmailNotificationAdapter:
    """Tests for the confirmation email client."""

    def test_sends_template_and_identifiers(self) -> None:
        captured: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            captured.append(request)
            return httpx.Response(202)

        client = httpx.Client(transport=httpx.MockTransport(handler))
        adapter = HttpEmailNotificationAdapter("http://mail.test/emails", client=client)

        adapter.send_order_confirmation_email(customer_id=42, order_id=1001)

        assert str(captured[0].url) == "http://mail.test/emails"
        assert json.loads(captured[0].content) == {
            "template": "order_confirmation",
            "customer_id": 42,
            "order_id": 1001,
        }

    def test_error_status_raises(self) -> None:
        client = httpx.Client(
            transport=httpx.MockTransport(lambda request: httpx.Response(500))
        )
        adapter = HttpEmailNotificationAdapter("http://mail.test/emails", client=client)
        with pytest.raises(httpx.HTTPStatusError):
            adapter.send_order_confirmation_email(customer_id=42, order_id=1001)


class TestHttpAdapterLifecycle:
    """Tests for releasing HTTP connection pools."""

    def test_fulfillment_adapter_close(self) -> None:
        client = httpx.Client(
            transport=httpx.MockTransport(lambda request: httpx.Response(200)),
            base_url="http://fulfillment.test",
        )
        HttpOrderFulfillmentAdapter("http://fulfillment.test", client=client).close()
        assert client.is_closed

    def test_notification_adapter_close(self) -> None:
        client = httpx.Client(
            transport=httpx.MockTransport(lambda request: httpx.Response(202))
        )
        HttpEmailNotificationAdapter("http://mail.test/emails", client=client).close()
        assert client.is_closed
