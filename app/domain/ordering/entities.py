"""
Domain entities for the ordering bounded context.

Entities represent core business objects with identity and lifecycle.
They contain no framework imports and no IO operations.
All monetary amounts are Decimal; binary floats are never used for money.
"""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from typing import Optional


@dataclass(frozen=True)
class Product:
    """A sellable product identified by its SKU.

    Stock availability is not stored here; it is reported by the
    ProductRepository port at placement time.
    """

    sku: str
    price: Decimal
    name: str = ""

    def __post_init__(self) -> None:
        if self.price < 0:
            raise ValueError(f"Product price must be non-negative: {self.sku}")


@dataclass(frozen=True)
class OrderItem:
    """A product reference with a positive quantity."""

    product: Product
    quantity: int

    def __post_init__(self) -> None:
        if self.quantity <= 0:
            raise ValueError(
                f"Order item quantity must be positive: {self.product.sku}"
            )

    @property
    def line_total(self) -> Decimal:
        return self.product.price * self.quantity


@dataclass(frozen=True)
class Order:
    """A proposed order submitted for placement.

    A missing customer_id is a valid state, distinct from an id
    that cannot be resolved to a customer.
    """

    customer_id: Optional[int]
    items: tuple[OrderItem, ...] = ()


@dataclass(frozen=True)
class Customer:
    """A customer record owned by the customer store.

    Only postal_code and country take part in order placement;
    they select the tax jurisdiction.
    """

    customer_id: int
    postal_code: str
    country: str
    name: str = ""
    email_address: str = ""
    address_line1: str = ""
    address_line2: str = ""
    city: str = ""
    state_or_province: str = ""


@dataclass(frozen=True)
class TaxEntry:
    """A named tax rate, e.g. Decimal("0.098") for 9.8%."""

    description: str
    rate: Decimal


@dataclass(frozen=True)
class OrderConfirmation:
    """Identifiers assigned by the fulfillment system to an accepted order."""

    order_id: int
    order_number: str
    customer_id: int
    estimated_delivery_date: Optional[date] = None


@dataclass(frozen=True)
class OrderSummary:
    """Outcome of a successful order placement.

    Identifiers come from the OrderConfirmation, never from the
    submitted Order.
    """

    order_id: int
    order_number: str
    customer_id: int
    items: tuple[OrderItem, ...]
    net_total: Decimal
    taxes: tuple[TaxEntry, ...] = field(default_factory=tuple)
    total: Decimal = Decimal("0")
    estimated_delivery_date: Optional[date] = None
