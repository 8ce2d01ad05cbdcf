"""Enumeration types for the ATM domain."""

from enum import Enum, IntEnum


class TransactionType(str, Enum):
    INITIAL = "INITIAL"
    DEPOSIT = "DEPOSIT"
    WITHDRAWAL = "WITHDRAWAL"
    BALANCE_INQUIRY = "BALANCE_INQUIRY"
    WITHDRAWAL_FAILED = "WITHDRAWAL_FAILED"
    CANCELLED = "CANCELLED"


class AuthResult(str, Enum):
    GRANTED = "GRANTED"
    DENIED = "DENIED"


class PinStatus(str, Enum):
    OK = "OK"
    EMPTY = "EMPTY"
    FORMAT_ERROR = "FORMAT_ERROR"


class AmountStatus(str, Enum):
    OK = "OK"
    EMPTY = "EMPTY"
    FORMAT_ERROR = "FORMAT_ERROR"
    RANGE_ERROR = "RANGE_ERROR"


class OperationStatus(str, Enum):
    SUCCESS = "SUCCESS"
    EMPTY = "EMPTY"
    FORMAT_ERROR = "FORMAT_ERROR"
    RANGE_ERROR = "RANGE_ERROR"
    INSUFFICIENT_FUNDS = "INSUFFICIENT_FUNDS"
    CANCELLED = "CANCELLED"

    @property
    def is_input_error(self) -> bool:
        """Whether the caller should re-prompt for the amount."""
        return self in (
            OperationStatus.EMPTY,
            OperationStatus.FORMAT_ERROR,
            OperationStatus.RANGE_ERROR,
        )


class SessionState(str, Enum):
    ACTIVE = "ACTIVE"
    TERMINATED = "TERMINATED"


class MenuChoice(IntEnum):
    CHECK_BALANCE = 1
    DEPOSIT = 2
    WITHDRAW = 3
    VIEW_HISTORY = 4
    EXIT = 5

    @property
    def label(self) -> str:
        return _MENU_LABELS[self]


_MENU_LABELS = {
    MenuChoice.CHECK_BALANCE: "Check Balance",
    MenuChoice.DEPOSIT: "Deposit Money",
    MenuChoice.WITHDRAW: "Withdraw Money",
    MenuChoice.VIEW_HISTORY: "View Transaction History",
    MenuChoice.EXIT: "Exit",
}
