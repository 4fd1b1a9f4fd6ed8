"""
Adapter: Customer repository.

Implements CustomerRepository port.
Reads customer records from the customers table.
"""

from typing import Optional

from sqlalchemy import text
from sqlalchemy.engine import Engine

from app.domain.ordering.entities import Customer
from app.domain.ordering.ports import CustomerRepository


class CustomerRepositoryAdapter(CustomerRepository):
    """Reads customers from the order database.

    Implements the CustomerRepository port defined in the domain layer.
    """

    def __init__(self, engine: Engine) -> None:
        self._engine = engine

    def get(self, customer_id: int) -> Optional[Customer]:
        """Return a customer by its ID, or None if not found.

        Args:
            customer_id: ID of the customer to retrieve.

        Returns:
            Customer entity or None.
        """
        query = text(
            """
            SELECT id, name, email_address, address_line1, address_line2,
                   city, state_or_province, postal_code, country
            FROM customers
            WHERE id = :customer_id
            """
        )

        with self._engine.connect() as conn:
            row = conn.execute(query, {"customer_id": customer_id}).fetchone()

        if row is None:
            return None

        return Customer(
            customer_id=row[0],
            name=row[1] or "",
            email_address=row[2] or "",
            address_line1=row[3] or "",
            address_line2=row[4] or "",
            city=row[5] or "",
            state_or_province=row[6] or "",
            postal_code=row[7] or "",
            country=row[8] or "",
        )
