"""
FastAPI router for the ordering bounded context.

All routes delegate to use cases. No business logic here.
Input validation is handled by Pydantic schemas.
Error mapping is handled by centralized error handlers.
"""

from fastapi import APIRouter, Depends, Request

from app.application.ordering.dtos import OrderLineCommand, PlaceOrderCommand
from app.application.ordering.place_order import PlaceOrderUseCase
from app.interfaces.ordering.dependencies import get_place_order_use_case
from app.interfaces.ordering.schemas import (
    ErrorResponse,
    OrderLineItem,
    OrderSummaryResponse,
    PlaceOrderRequest,
    TaxItem,
)
from app.shared.security.rate_limiting import limiter, order_rate_limit

router = APIRouter(prefix="/orders", tags=["orders"])


@router.post(
    "",
    status_code=201,
    response_model=OrderSummaryResponse,
    responses={
        422: {"model": ErrorResponse},
        429: {"model": ErrorResponse},
        502: {"model": ErrorResponse},
    },
    summary="Place an order",
    description=(
        "Validate an order, submit it to fulfillment, compute totals "
        "with the customer's taxes and send the confirmation email."
    ),
)
@limiter.limit(order_rate_limit)
def place_order(
    request: Request,
    payload: PlaceOrderRequest,
    use_case: PlaceOrderUseCase = Depends(get_place_order_use_case),
) -> OrderSummaryResponse:
    """Place an order and return its summary."""
    command = PlaceOrderCommand(
        customer_id=payload.customer_id,
        lines=tuple(
            OrderLineCommand(
                sku=line.sku,
                unit_price=line.unit_price,
                quantity=line.quantity,
                name=line.name,
            )
            for line in payload.items
        ),
    )
    result = use_case.execute(command)
    return OrderSummaryResponse(
        order_id=result.order_id,
        order_number=result.order_number,
        customer_id=result.customer_id,
        items=[
            OrderLineItem(
                sku=line.sku,
                name=line.name,
                unit_price=line.unit_price,
                quantity=line.quantity,
            )
            for line in result.lines
        ],
        net_total=result.net_total,
        taxes=[TaxItem(description=t.description, rate=t.rate) for t in result.taxes],
        total=result.total,
        estimated_delivery_date=result.estimated_delivery_date,
    )
