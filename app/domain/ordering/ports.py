"""
Port interfaces (ABCs) for the ordering bounded context.

Ports define the contracts that the domain requires from the outside world.
Infrastructure adapters implement these interfaces.
The domain layer never depends on concrete implementations.
"""

from abc import ABC, abstractmethod
from typing import Optional

from app.domain.ordering.entities import (
    Customer,
    Order,
    OrderConfirmation,
    TaxEntry,
)


class ProductRepository(ABC):
    """Port for querying product availability."""

    @abstractmethod
    def is_in_stock(self, sku: str) -> bool:
        """Return True if the product with this SKU can be sold now."""
        raise NotImplementedError


class CustomerRepository(ABC):
    """Port for retrieving customer records."""

    @abstractmethod
    def get(self, customer_id: int) -> Optional[Customer]:
        """Return the customer with this ID, or None if it does not exist."""
        raise NotImplementedError


class TaxRatePort(ABC):
    """Port for resolving the taxes that apply to a jurisdiction."""

    @abstractmethod
    def get_tax_entries(self, postal_code: str, country: str) -> list[TaxEntry]:
        """Return the tax entries for an address.

        Args:
            postal_code: Postal code of the customer address.
            country: Country of the customer address.

        Returns:
            Zero or more TaxEntry records. An empty list means no tax applies.
        """
        raise NotImplementedError


class OrderFulfillmentPort(ABC):
    """Port for handing a validated order to the fulfillment system.

    Fulfillment has an external side effect: the order is recorded
    and shipped by the fulfillment system.
    """

    @abstractmethod
    def fulfill(self, order: Order) -> OrderConfirmation:
        """Submit the order and return the identifiers it was assigned.

        Raises:
            Any transport or service error. Callers do not translate it.
        """
        raise NotImplementedError


class NotificationPort(ABC):
    """Port for notifying a customer about a placed order."""

    @abstractmethod
    def send_order_confirmation_email(self, customer_id: int, order_id: int) -> None:
        """Send the order confirmation email to the customer."""
        raise NotImplementedError
