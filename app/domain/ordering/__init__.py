"""
Ordering bounded context — domain layer.

This module contains all domain logic for order placement:
- Order validation (SKU uniqueness, stock, customer)
- Monetary totals (net total, tax-based grand total)
- Collaborator ports (products, customers, taxes, fulfillment, notification)
"""
