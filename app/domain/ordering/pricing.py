"""
Domain service: Order pricing.

Pure monetary arithmetic on Decimal values. No IO, no rounding.

Taxes are additive: each entry's rate is applied to the net total
independently and the results are summed. With no tax entries the
grand total is zero.
"""

from decimal import Decimal
from typing import Iterable

from app.domain.ordering.entities import OrderItem, TaxEntry

ZERO = Decimal("0")


def calculate_net_total(items: Iterable[OrderItem]) -> Decimal:
    """Return the sum of price × quantity over all order items."""
    return sum((item.line_total for item in items), ZERO)


def calculate_grand_total(net_total: Decimal, taxes: Iterable[TaxEntry]) -> Decimal:
    """Return the sum of rate × net total over all tax entries.

    Args:
        net_total: The order's net total.
        taxes: Tax entries applicable to the customer's jurisdiction.

    Returns:
        The grand total, Decimal("0") when there are no tax entries.
    """
    return sum((entry.rate * net_total for entry in taxes), ZERO)
