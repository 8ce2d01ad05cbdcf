"""Domain models for the ATM simulator."""

from atm_sim.models.account import Account
from atm_sim.models.enums import (
    AmountStatus,
    AuthResult,
    MenuChoice,
    OperationStatus,
    PinStatus,
    SessionState,
    TransactionType,
)
from atm_sim.models.transaction import Transaction

__all__ = [
    "Account",
    "AmountStatus",
    "AuthResult",
    "MenuChoice",
    "OperationStatus",
    "PinStatus",
    "SessionState",
    "Transaction",
    "TransactionType",
]
