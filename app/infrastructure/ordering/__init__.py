"""
Infrastructure adapters for the ordering bounded context.

Each adapter implements a domain port (ABC) and connects
to an external system: the order database, the fulfillment
service, or the email delivery service.
"""
