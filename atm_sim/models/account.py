"""Account model for the ATM domain."""

from dataclasses import dataclass
from decimal import Decimal

from atm_sim.exceptions import InsufficientFundsError, InvalidAmountError
from atm_sim.money import DEFAULT_PLACES, quantize


@dataclass
class Account:
    """The single in-memory account a session operates on.

    ``balance`` is re-quantized half-up after every mutation and can never
    go negative.
    """

    balance: Decimal
    decimal_places: int = DEFAULT_PLACES

    def __post_init__(self) -> None:
        if self.balance < 0:
            raise InvalidAmountError(f"Opening balance must not be negative: {self.balance}")
        self.balance = quantize(self.balance, self.decimal_places)

    def can_withdraw(self, amount: Decimal) -> bool:
        return amount <= self.balance

    def deposit(self, amount: Decimal) -> Decimal:
        """Add ``amount`` and return the new balance."""
        self._check_positive(amount)
        self.balance = quantize(self.balance + amount, self.decimal_places)
        return self.balance

    def withdraw(self, amount: Decimal) -> Decimal:
        """Subtract ``amount`` and return the new balance.

        Raises
        ------
        InsufficientFundsError
            If ``amount`` exceeds the balance.
        """
        self._check_positive(amount)
        if not self.can_withdraw(amount):
            raise InsufficientFundsError(amount, self.balance)
        self.balance = quantize(self.balance - amount, self.decimal_places)
        return self.balance

    @staticmethod
    def _check_positive(amount: Decimal) -> None:
        if amount <= 0:
            raise InvalidAmountError(f"Amount must be positive: {amount}")
