"""
Adapter: Tax rate repository.

Implements TaxRatePort.
Resolves tax entries for an address from the tax_rates table.
"""

import logging
from decimal import Decimal

from sqlalchemy import text
from sqlalchemy.engine import Engine

from app.domain.ordering.entities import TaxEntry
from app.domain.ordering.ports import TaxRatePort

logger = logging.getLogger(__name__)


class TaxRateRepositoryAdapter(TaxRatePort):
    """Reads tax rates from the order database.

    A tax_rates row applies when its country matches and its
    postal_code either matches or is NULL (country-wide tax).
    """

    def __init__(self, engine: Engine) -> None:
        self._engine = engine

    def get_tax_entries(self, postal_code: str, country: str) -> list[TaxEntry]:
        """Return the tax entries for an address.

        Args:
            postal_code: Postal code of the customer address.
            country: Country of the customer address.

        Returns:
            List of TaxEntry ordered by description. May be empty.
        """
        query = text(
            """
            SELECT description, rate
            FROM tax_rates
            WHERE country = :country
              AND (postal_code = :postal_code OR postal_code IS NULL)
            ORDER BY description
            """
        )

        with self._engine.connect() as conn:
            rows = conn.execute(
                query, {"country": country, "postal_code": postal_code}
            ).fetchall()

        entries = [
            TaxEntry(description=row[0], rate=Decimal(str(row[1]))) for row in rows
        ]
        logger.debug(
            "Resolved %d tax entries for country=%s", len(entries), country
        )
        return entries
