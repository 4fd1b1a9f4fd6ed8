"""
Pydantic schemas for ordering API request/response validation.

These schemas enforce input validation and define the API contract.
All fields use strict typing with constraints.
No business logic belongs here.
"""

from datetime import date
from decimal import Decimal

from pydantic import BaseModel, Field

SKU_DESCRIPTION = "Product stock-keeping unit"
SKU_MIN_LEN = 1
SKU_MAX_LEN = 64


class OrderLineRequest(BaseModel):
    """A single order line in a placement request.

    Attributes:
        sku: Product SKU (1-64 chars).
        name: Optional product name.
        unit_price: Price of one unit (non-negative).
        quantity: Number of units (at least 1).
    """

    sku: str = Field(
        ...,
        min_length=SKU_MIN_LEN,
        max_length=SKU_MAX_LEN,
        description=SKU_DESCRIPTION,
    )
    name: str = Field("", max_length=200, description="Product name")
    unit_price: Decimal = Field(..., ge=0, description="Price of one unit")
    quantity: int = Field(..., ge=1, description="Number of units ordered")


class PlaceOrderRequest(BaseModel):
    """Request schema for the order placement endpoint.

    Attributes:
        customer_id: Customer placing the order. May be null; a null
            customer is rejected by order validation, not by the schema.
        items: Order lines.
    """

    customer_id: int | None = Field(None, description="Customer identifier")
    items: list[OrderLineRequest] = Field(default_factory=list)


class OrderLineItem(BaseModel):
    """An echoed order line in the response."""

    sku: str
    name: str
    unit_price: Decimal
    quantity: int


class TaxItem(BaseModel):
    """An applied tax entry in the response."""

    description: str
    rate: Decimal


class OrderSummaryResponse(BaseModel):
    """Response schema for a placed order."""

    order_id: int
    order_number: str
    customer_id: int
    items: list[OrderLineItem]
    net_total: Decimal
    taxes: list[TaxItem]
    total: Decimal
    estimated_delivery_date: date | None = None


class HealthResponse(BaseModel):
    """Response schema for the health check endpoint."""

    status: str
    version: str


class ErrorResponse(BaseModel):
    """Standard error response returned by all error handlers."""

    error: str
    detail: str | None = None
