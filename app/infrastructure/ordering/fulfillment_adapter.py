"""
Adapter: Order fulfillment service client.

Implements OrderFulfillmentPort over HTTP.
Posts validated orders to the fulfillment service and reads back
the identifiers it assigns.
"""

import logging
from datetime import date
from typing import Any, Optional

import httpx

from app.domain.ordering.entities import Order, OrderConfirmation
from app.domain.ordering.ports import OrderFulfillmentPort

logger = logging.getLogger(__name__)


def _order_to_dict(order: Order) -> dict[str, Any]:
    """Serialize an Order for JSON transport. Prices travel as strings."""
    return {
        "customer_id": order.customer_id,
        "items": [
            {
                "sku": item.product.sku,
                "name": item.product.name,
                "unit_price": str(item.product.price),
                "quantity": item.quantity,
            }
            for item in order.items
        ],
    }


def _confirmation_from_dict(payload: dict[str, Any]) -> OrderConfirmation:
    delivery = payload.get("estimated_delivery_date")
    return OrderConfirmation(
        order_id=int(payload["order_id"]),
        order_number=str(payload["order_number"]),
        customer_id=int(payload["customer_id"]),
        estimated_delivery_date=date.fromisoformat(delivery) if delivery else None,
    )


class HttpOrderFulfillmentAdapter(OrderFulfillmentPort):
    """Submits orders to the fulfillment service's REST API.

    Transport and HTTP status errors are raised as httpx exceptions.

    Args:
        base_url: Root URL of the fulfillment service.
        timeout: HTTP timeout in seconds.
        client: Optional preconfigured httpx.Client (used by tests).
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 10.0,
        client: Optional[httpx.Client] = None,
    ) -> None:
        self._client = client or httpx.Client(base_url=base_url, timeout=timeout)

    def fulfill(self, order: Order) -> OrderConfirmation:
        response = self._client.post("/orders", json=_order_to_dict(order))
        response.raise_for_status()
        confirmation = _confirmation_from_dict(response.json())
        logger.debug("Fulfillment accepted order_id=%d", confirmation.order_id)
        return confirmation

    def close(self) -> None:
        """Release the underlying connection pool."""
        self._client.close()
