"""
Adapter: Order confirmation email sender.

Implements NotificationPort by posting to the email delivery
service's HTTP endpoint. Only identifiers are sent; the delivery
service resolves addresses and renders the template.
"""

import logging
from typing import Optional

import httpx

from app.domain.ordering.ports import NotificationPort

logger = logging.getLogger(__name__)

ORDER_CONFIRMATION_TEMPLATE = "order_confirmation"


class HttpEmailNotificationAdapter(NotificationPort):
    """Requests order confirmation emails over HTTP.

    Args:
        url: Full URL of the email delivery endpoint.
        timeout: HTTP timeout in seconds.
        client: Optional preconfigured httpx.Client (used by tests).
    """

    def __init__(
        self,
        url: str,
        timeout: float = 10.0,
        client: Optional[httpx.Client] = None,
    ) -> None:
        self._url = url
        self._client = client or httpx.Client(timeout=timeout)

    def send_order_confirmation_email(self, customer_id: int, order_id: int) -> None:
        response = self._client.post(
            self._url,
            json={
                "template": ORDER_CONFIRMATION_TEMPLATE,
                "customer_id": customer_id,
                "order_id": order_id,
            },
        )
        response.raise_for_status()
        logger.info("Confirmation email requested for order_id=%d", order_id)

    def close(self) -> None:
        """Release the underlying connection pool."""
        self._client.close()
