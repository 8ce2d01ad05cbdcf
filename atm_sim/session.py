"""Authenticated ATM session: the menu loop and balance operations."""

import logging
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Callable

from atm_sim.config import ATMConfig
from atm_sim.console import Console
from atm_sim.exceptions import SessionTerminatedError
from atm_sim.models import Account, Transaction
from atm_sim.models.enums import (
    AmountStatus,
    MenuChoice,
    OperationStatus,
    SessionState,
    TransactionType,
)
from atm_sim.money import format_money
from atm_sim.validation import AmountResult, parse_amount

logger = logging.getLogger(__name__)

CANCEL_TOKEN = "cancel"

_AMOUNT_STATUS_TO_OPERATION = {
    AmountStatus.EMPTY: OperationStatus.EMPTY,
    AmountStatus.FORMAT_ERROR: OperationStatus.FORMAT_ERROR,
    AmountStatus.RANGE_ERROR: OperationStatus.RANGE_ERROR,
}


@dataclass(frozen=True)
class OperationResult:
    """Outcome of a deposit or withdrawal request."""

    status: OperationStatus
    amount: Decimal | None
    balance: Decimal

    @property
    def succeeded(self) -> bool:
        return self.status is OperationStatus.SUCCESS


class Session:
    """Transaction engine for one authenticated user.

    The session owns the account and its audit log. Callers reach the
    balance only through the operations below; every user action that
    reaches an outcome (success, insufficient funds, cancellation) is
    appended to :attr:`history`. Input errors are re-prompts, not outcomes,
    and are never recorded.

    Parameters
    ----------
    config : ATMConfig
        Limits, opening balance and display settings.
    console : Console
        Input source and output sink.
    clock : Callable[[], datetime]
        Timestamp source for transaction records.
    """

    def __init__(
        self,
        config: ATMConfig,
        console: Console,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self.config = config
        self.console = console
        self.clock = clock
        self._account = Account(config.initial_balance, config.decimal_places)
        self._history: list[Transaction] = []
        self._state = SessionState.ACTIVE

        if config.record_initial_balance:
            self._record(TransactionType.INITIAL, self._account.balance, "Initial balance setup")

    @property
    def balance(self) -> Decimal:
        return self._account.balance

    @property
    def history(self) -> tuple[Transaction, ...]:
        return tuple(self._history)

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def is_active(self) -> bool:
        return self._state is SessionState.ACTIVE

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    def check_balance(self) -> Decimal:
        """Show the current balance and record the inquiry."""
        self._ensure_active()
        self._show_balance()
        self._record(TransactionType.BALANCE_INQUIRY, None, "Checked balance")
        return self.balance

    def deposit(self, raw_amount: str) -> OperationResult:
        """Validate ``raw_amount`` and add it to the balance."""
        self._ensure_active()
        parsed = self._parse(raw_amount)
        if not parsed.ok:
            return self._reject_input(parsed)

        amount = parsed.amount
        self._account.deposit(amount)
        self.console.write(f"{self._money(amount)} deposited successfully.")
        self._record(TransactionType.DEPOSIT, amount, "Deposit")
        self._show_balance()
        return OperationResult(OperationStatus.SUCCESS, amount, self.balance)

    def withdraw(self, raw_amount: str) -> OperationResult:
        """Validate ``raw_amount`` and take it from the balance if it is covered."""
        self._ensure_active()
        parsed = self._parse(raw_amount)
        if not parsed.ok:
            return self._reject_input(parsed)

        amount = parsed.amount
        if not self._account.can_withdraw(amount):
            self.console.write(f"Insufficient funds. Available: {self._money(self.balance)}")
            self._record(
                TransactionType.WITHDRAWAL_FAILED,
                amount,
                "Attempted withdrawal with insufficient funds",
            )
            return OperationResult(OperationStatus.INSUFFICIENT_FUNDS, amount, self.balance)

        self._account.withdraw(amount)
        self.console.write(f"{self._money(amount)} withdrawn successfully.")
        self._record(TransactionType.WITHDRAWAL, amount, "Withdrawal")
        self._show_balance()
        return OperationResult(OperationStatus.SUCCESS, amount, self.balance)

    def cancel(self, operation: str) -> OperationResult:
        """Abandon a pending deposit or withdrawal without touching the balance."""
        self._ensure_active()
        self.console.write("Transaction cancelled.")
        self._record(TransactionType.CANCELLED, None, f"{operation} cancelled")
        return OperationResult(OperationStatus.CANCELLED, None, self.balance)

    def view_history(self) -> tuple[Transaction, ...]:
        """Show the audit log in insertion order. Viewing is not itself recorded."""
        self._ensure_active()
        self.console.write("")
        self.console.write("--- TRANSACTION HISTORY ---")
        if not self._history:
            self.console.write("No transactions yet.")
        for transaction in self._history:
            self.console.write(transaction.render(self.config.currency_symbol, self.config.decimal_places))
        return self.history

    def exit(self) -> None:
        """Say goodbye and terminate the session."""
        self._ensure_active()
        self.console.write("Thank you for using the ATM. Goodbye!")
        self._state = SessionState.TERMINATED
        logger.info("Session terminated with balance %s", self.balance)

    # ------------------------------------------------------------------
    # Interactive loop
    # ------------------------------------------------------------------

    def run(self) -> None:
        """Drive the menu loop until the user exits or input ends."""
        self._ensure_active()
        while self.is_active:
            self._show_menu()
            choice = self.read_menu_choice()
            if choice is None:
                logger.info("Input closed at the menu")
                self.exit()
                break
            self.dispatch(choice)

    def dispatch(self, choice: MenuChoice) -> None:
        if choice is MenuChoice.CHECK_BALANCE:
            self.check_balance()
        elif choice is MenuChoice.DEPOSIT:
            self.prompt_amount("Enter deposit amount: ", self.deposit, "Deposit")
        elif choice is MenuChoice.WITHDRAW:
            self.prompt_amount("Enter withdrawal amount: ", self.withdraw, "Withdrawal")
        elif choice is MenuChoice.VIEW_HISTORY:
            self.view_history()
        elif choice is MenuChoice.EXIT:
            self.exit()

    def read_menu_choice(self) -> MenuChoice | None:
        """Read lines until one names a menu entry. Returns None at end of input."""
        low, high = min(MenuChoice), max(MenuChoice)
        while True:
            line = self.console.read_line("Enter your choice: ")
            if line is None:
                return None

            text = line.strip()
            if not text:
                self.console.write("Input cannot be empty. Please enter a number.")
                continue

            try:
                value = int(text)
            except ValueError:
                logger.debug("Non-numeric menu input: %r", text)
                self.console.write("Invalid input. Enter a numeric value (e.g., 1, 2, 3).")
                continue

            if low <= value <= high:
                return MenuChoice(value)

            logger.debug("Menu choice out of range: %d", value)
            self.console.write(
                f"Invalid choice. Please enter a number between {int(low)} and {int(high)}."
            )

    def prompt_amount(
        self,
        prompt: str,
        operation: Callable[[str], OperationResult],
        label: str,
    ) -> OperationResult:
        """Collect an amount for ``operation``, re-prompting on input errors.

        Typing ``cancel`` (any case) or closing input abandons the operation.
        """
        while True:
            line = self.console.read_line(f"{prompt}{self.config.currency_symbol}")
            if line is None or line.strip().lower() == CANCEL_TOKEN:
                return self.cancel(label)

            result = operation(line)
            if not result.status.is_input_error:
                return result

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _parse(self, raw_amount: str) -> AmountResult:
        return parse_amount(
            raw_amount,
            self.config.min_amount,
            self.config.max_transaction_limit,
            self.config.decimal_places,
        )

    def _reject_input(self, parsed: AmountResult) -> OperationResult:
        if parsed.status is AmountStatus.EMPTY:
            self.console.write("Amount cannot be empty.")
        elif parsed.status is AmountStatus.FORMAT_ERROR:
            self.console.write("Invalid amount format. Use numbers like 50.00.")
        else:
            self.console.write(
                f"Invalid amount. Must be between {self._money(self.config.min_amount)} "
                f"and {self._money(self.config.max_transaction_limit)}."
            )
        return OperationResult(_AMOUNT_STATUS_TO_OPERATION[parsed.status], parsed.amount, self.balance)

    def _record(self, transaction_type: TransactionType, amount: Decimal | None, description: str) -> None:
        transaction = Transaction(
            timestamp=self.clock(),
            transaction_type=transaction_type,
            amount=amount,
            description=description,
        )
        self._history.append(transaction)
        logger.info(
            "Recorded %s transaction",
            transaction_type.value,
            extra={"extra": transaction.to_dict()},
        )

    def _show_balance(self) -> None:
        self.console.write(f"Current balance: {self._money(self.balance)}")

    def _show_menu(self) -> None:
        self.console.write("")
        self.console.write("--- ATM MENU ---")
        for choice in MenuChoice:
            self.console.write(f"{int(choice)}. {choice.label}")

    def _money(self, value: Decimal) -> str:
        return format_money(value, self.config.currency_symbol, self.config.decimal_places)

    def _ensure_active(self) -> None:
        if not self.is_active:
            raise SessionTerminatedError("Session has been terminated")
