"""Custom exception hierarchy for atm-sim."""

from decimal import Decimal


class ATMError(Exception):
    """Base exception for all atm-sim errors."""


class ConfigurationError(ATMError):
    """Raised when configuration is invalid or missing."""


class InvalidAmountError(ATMError):
    """Raised when an account is asked to apply a non-positive amount."""


class InsufficientFundsError(ATMError):
    """Raised when a withdrawal would drive the balance negative."""

    def __init__(self, requested: Decimal, available: Decimal) -> None:
        super().__init__(f"Requested {requested} exceeds available balance {available}")
        self.requested = requested
        self.available = available


class SessionTerminatedError(ATMError):
    """Raised when an operation is attempted on a terminated session."""
