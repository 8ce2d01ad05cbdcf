"""Transaction audit record."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal

from atm_sim.models.enums import TransactionType
from atm_sim.money import DEFAULT_PLACES, format_money
from atm_sim.serialization import to_dict

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


@dataclass(frozen=True)
class Transaction:
    """Immutable record of one completed, failed or cancelled action."""

    timestamp: datetime
    transaction_type: TransactionType
    amount: Decimal | None  # None for balance inquiries and cancellations
    description: str

    def render(self, currency_symbol: str = "$", places: int = DEFAULT_PLACES) -> str:
        """Format as a single history line."""
        amount = format_money(self.amount, currency_symbol, places) if self.amount is not None else "N/A"
        return (
            f"[{self.timestamp.strftime(TIMESTAMP_FORMAT)}] "
            f"{self.transaction_type.value:<18} {amount:<10} {self.description}"
        )

    def to_dict(self) -> dict:
        return to_dict(self)
