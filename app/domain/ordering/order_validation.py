"""
Domain service: Order validation.

Runs every business check against a proposed order and reports all
failures together instead of stopping at the first one.

Checks:
    - Order items are unique by product SKU
    - Every ordered product is in stock
    - The customer id is present and resolves to a customer

Failure reasons are collected per call and returned in a fresh
OrderValidation value. The validator itself holds no per-order state,
so one instance can serve concurrent placements.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from app.domain.ordering.entities import Customer, Order, OrderItem
from app.domain.ordering.ports import CustomerRepository, ProductRepository

logger = logging.getLogger(__name__)

DUPLICATE_SKU_REASON = "order items are not unique by SKU."
OUT_OF_STOCK_REASON = "not all products are in stock."
INVALID_CUSTOMER_REASON = "the customer is null or cannot be retrieved."


@dataclass(frozen=True)
class OrderValidation:
    """Result of validating one order.

    Attributes:
        reasons: Failure reasons in check order. Empty when valid.
        customer: The customer fetched during validation, if any.
    """

    reasons: tuple[str, ...] = ()
    customer: Optional[Customer] = None

    @property
    def is_valid(self) -> bool:
        return not self.reasons


class OrderValidator:
    """Validates proposed orders against products and customers."""

    def __init__(
        self,
        product_repo: ProductRepository,
        customer_repo: CustomerRepository,
    ) -> None:
        self._product_repo = product_repo
        self._customer_repo = customer_repo

    def validate(self, order: Order) -> OrderValidation:
        """Run all checks against the order.

        Args:
            order: The proposed order.

        Returns:
            An OrderValidation holding every failed reason and the
            resolved customer (None when the customer check failed).
        """
        reasons: list[str] = []

        if not self._items_are_unique(order.items):
            reasons.append(DUPLICATE_SKU_REASON)

        if not self._items_are_in_stock(order.items):
            reasons.append(OUT_OF_STOCK_REASON)

        customer = self._resolve_customer(order.customer_id)
        if customer is None:
            reasons.append(INVALID_CUSTOMER_REASON)

        if reasons:
            logger.info(
                "Order for customer=%s failed %d validation check(s)",
                order.customer_id,
                len(reasons),
            )

        return OrderValidation(reasons=tuple(reasons), customer=customer)

    @staticmethod
    def _items_are_unique(items: tuple[OrderItem, ...]) -> bool:
        skus = [item.product.sku for item in items]
        return len(skus) == len(set(skus))

    def _items_are_in_stock(self, items: tuple[OrderItem, ...]) -> bool:
        # One aggregate reason is reported, so the first miss settles it.
        for item in items:
            if not self._product_repo.is_in_stock(item.product.sku):
                logger.debug("SKU out of stock: %s", item.product.sku)
                return False
        return True

    def _resolve_customer(self, customer_id: Optional[int]) -> Optional[Customer]:
        if customer_id is None:
            return None
        return self._customer_repo.get(customer_id)
