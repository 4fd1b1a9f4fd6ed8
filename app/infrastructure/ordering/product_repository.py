"""
Adapter: Product stock repository.

Implements ProductRepository port.
Reads stock levels from the product_stock table.
"""

import logging

from sqlalchemy import text
from sqlalchemy.engine import Engine

from app.domain.ordering.ports import ProductRepository

logger = logging.getLogger(__name__)


class ProductRepositoryAdapter(ProductRepository):
    """Reads product availability from the order database.

    A SKU is in stock when it has a product_stock row with a
    positive quantity_on_hand. Unknown SKUs are out of stock.
    """

    def __init__(self, engine: Engine) -> None:
        self._engine = engine

    def is_in_stock(self, sku: str) -> bool:
        query = text(
            """
            SELECT quantity_on_hand
            FROM product_stock
            WHERE sku = :sku
            """
        )

        with self._engine.connect() as conn:
            row = conn.execute(query, {"sku": sku}).fetchone()

        if row is None:
            logger.debug("No stock record for sku=%s", sku)
            return False
        return row[0] > 0
