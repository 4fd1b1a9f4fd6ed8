"""
Data Transfer Objects for the ordering application layer.

DTOs carry data between the interface and application layers.
They are plain dataclasses with no behavior.
"""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal


@dataclass(frozen=True)
class OrderLineCommand:
    """A single requested order line.

    Attributes:
        sku: Product SKU.
        unit_price: Price of one unit.
        quantity: Number of units (positive).
        name: Optional product name.
    """

    sku: str
    unit_price: Decimal
    quantity: int
    name: str = ""


@dataclass(frozen=True)
class PlaceOrderCommand:
    """Input DTO for placing an order.

    Attributes:
        customer_id: Customer placing the order, or None if unknown.
        lines: Requested order lines in submission order.
    """

    customer_id: int | None
    lines: tuple[OrderLineCommand, ...]


@dataclass(frozen=True)
class OrderLineResult:
    """Output DTO for an echoed order line."""

    sku: str
    name: str
    unit_price: Decimal
    quantity: int


@dataclass(frozen=True)
class TaxResult:
    """Output DTO for an applied tax entry."""

    description: str
    rate: Decimal


@dataclass(frozen=True)
class PlaceOrderResult:
    """Output DTO for a placed order.

    Attributes:
        order_id: Identifier assigned by fulfillment.
        order_number: Human-readable order number assigned by fulfillment.
        customer_id: Customer id as recorded by fulfillment.
        lines: The ordered lines.
        net_total: Sum of price × quantity.
        taxes: Applied tax entries.
        total: Sum of rate × net total over the applied taxes.
        estimated_delivery_date: Delivery estimate, if fulfillment gave one.
    """

    order_id: int
    order_number: str
    customer_id: int
    lines: list[OrderLineResult]
    net_total: Decimal
    taxes: list[TaxResult]
    total: Decimal
    estimated_delivery_date: date | None = None
