"""
Use case: Place an order.

Input: PlaceOrderCommand (customer_id, lines)
Output: PlaceOrderResult
Side effects: Order submitted to fulfillment; confirmation email sent.
Failure cases: InvalidOrderError (no side effects). Collaborator errors
    propagate unchanged; fulfillment may already have happened when
    tax lookup or notification fails.
"""

import logging
from enum import Enum

from app.application.ordering.dtos import (
    OrderLineResult,
    PlaceOrderCommand,
    PlaceOrderResult,
    TaxResult,
)
from app.domain.ordering.entities import Order, OrderItem, OrderSummary, Product
from app.domain.ordering.errors import InvalidOrderError
from app.domain.ordering.order_validation import OrderValidator
from app.domain.ordering.ports import (
    CustomerRepository,
    NotificationPort,
    OrderFulfillmentPort,
    ProductRepository,
    TaxRatePort,
)
from app.domain.ordering.pricing import calculate_grand_total, calculate_net_total

logger = logging.getLogger(__name__)


class NotificationFailurePolicy(Enum):
    """What to do when the confirmation email cannot be sent.

    PROPAGATE re-raises the sender's error to the caller.
    BEST_EFFORT logs it and still returns the summary.
    """

    PROPAGATE = "propagate"
    BEST_EFFORT = "best_effort"


class PlaceOrderUseCase:
    """Orchestrates validation, fulfillment, pricing and notification.

    Every collaborator is injected; the use case keeps no state
    between calls.
    """

    def __init__(
        self,
        product_repo: ProductRepository,
        customer_repo: CustomerRepository,
        tax_rate_port: TaxRatePort,
        fulfillment_port: OrderFulfillmentPort,
        notification_port: NotificationPort,
        notification_failure_policy: NotificationFailurePolicy = (
            NotificationFailurePolicy.PROPAGATE
        ),
    ) -> None:
        self._validator = OrderValidator(product_repo, customer_repo)
        self._tax_rate_port = tax_rate_port
        self._fulfillment_port = fulfillment_port
        self._notification_port = notification_port
        self._notification_failure_policy = notification_failure_policy

    def execute(self, command: PlaceOrderCommand) -> PlaceOrderResult:
        """Run the place-order use case.

        Args:
            command: The customer and the requested order lines.

        Returns:
            The placed order's summary.

        Raises:
            InvalidOrderError: If any validation check fails.
        """
        summary = self.place_order(_to_order(command))
        return _to_result(summary)

    def place_order(self, order: Order) -> OrderSummary:
        """Validate, fulfill, price and confirm a domain order.

        Args:
            order: The proposed order.

        Returns:
            The OrderSummary built from the fulfillment confirmation.

        Raises:
            InvalidOrderError: If any validation check fails.
        """
        logger.info(
            "Placing order for customer=%s with %d item(s)",
            order.customer_id,
            len(order.items),
        )

        validation = self._validator.validate(order)
        if not validation.is_valid:
            raise InvalidOrderError(list(validation.reasons))
        customer = validation.customer

        confirmation = self._fulfillment_port.fulfill(order)
        logger.info(
            "Order fulfilled: order_id=%d, order_number=%s",
            confirmation.order_id,
            confirmation.order_number,
        )

        net_total = calculate_net_total(order.items)
        taxes = tuple(
            self._tax_rate_port.get_tax_entries(customer.postal_code, customer.country)
        )
        if not taxes:
            logger.warning(
                "No tax entries for country=%s; order total is zero",
                customer.country,
            )
        total = calculate_grand_total(net_total, taxes)

        summary = OrderSummary(
            order_id=confirmation.order_id,
            order_number=confirmation.order_number,
            customer_id=confirmation.customer_id,
            items=order.items,
            net_total=net_total,
            taxes=taxes,
            total=total,
            estimated_delivery_date=confirmation.estimated_delivery_date,
        )

        self._notify(summary)
        return summary

    def _notify(self, summary: OrderSummary) -> None:
        try:
            self._notification_port.send_order_confirmation_email(
                summary.customer_id, summary.order_id
            )
        except Exception:
            policy = self._notification_failure_policy
            if policy is NotificationFailurePolicy.PROPAGATE:
                raise
            logger.exception(
                "Confirmation email failed for order_id=%d; order stands",
                summary.order_id,
            )


def _to_order(command: PlaceOrderCommand) -> Order:
    """Map the command DTO to a domain Order."""
    return Order(
        customer_id=command.customer_id,
        items=tuple(
            OrderItem(
                product=Product(sku=line.sku, price=line.unit_price, name=line.name),
                quantity=line.quantity,
            )
            for line in command.lines
        ),
    )


def _to_result(summary: OrderSummary) -> PlaceOrderResult:
    """Map a domain OrderSummary to the output DTO."""
    return PlaceOrderResult(
        order_id=summary.order_id,
        order_number=summary.order_number,
        customer_id=summary.customer_id,
        lines=[
            OrderLineResult(
                sku=item.product.sku,
                name=item.product.name,
                unit_price=item.product.price,
                quantity=item.quantity,
            )
            for item in summary.items
        ],
        net_total=summary.net_total,
        taxes=[TaxResult(description=t.description, rate=t.rate) for t in summary.taxes],
        total=summary.total,
        estimated_delivery_date=summary.estimated_delivery_date,
    )
