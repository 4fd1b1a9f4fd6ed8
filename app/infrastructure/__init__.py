"""
Infrastructure layer package.

Contains concrete implementations (adapters) of the ports
defined in the domain layer: SQL repositories over the order
database and HTTP clients for the fulfillment and email services.
"""
