"""
Domain-specific errors for the ordering bounded context.

All errors raised from the domain layer must be defined here.
These are mapped to HTTP responses at the interface layer.
No framework imports allowed.
"""

REASON_DELIMITER = "\n"


class OrderingDomainError(Exception):
    """Base error for all ordering domain errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)


class InvalidOrderError(OrderingDomainError):
    """Raised when an order fails one or more validation checks.

    The message lists every failed check, each reason terminated
    by REASON_DELIMITER.
    """

    def __init__(self, reasons: list[str]) -> None:
        super().__init__("".join(f"{reason}{REASON_DELIMITER}" for reason in reasons))
        self.reasons = tuple(reasons)
