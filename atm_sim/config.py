"""Configuration management for atm-sim."""

from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation

from atm_sim.exceptions import ConfigurationError
from atm_sim.money import to_money
from atm_sim.validation import PIN_PATTERN


@dataclass(frozen=True)
class ATMConfig:
    """Immutable settings shared by the authenticator and the session.

    Money fields accept ``Decimal``, ``int`` or ``str`` and are stored as
    ``Decimal`` quantized to ``decimal_places``.
    """

    reference_pin: str = field(default="1234", repr=False)
    max_pin_attempts: int = 3
    min_amount: Decimal = Decimal("1.00")
    max_transaction_limit: Decimal = Decimal("10000.00")
    initial_balance: Decimal = Decimal("1000.00")
    decimal_places: int = 2
    currency_symbol: str = "$"
    record_initial_balance: bool = True
    log_level: str = "WARNING"
    log_format: str = "standard"

    def __post_init__(self) -> None:
        for name in ("min_amount", "max_transaction_limit", "initial_balance"):
            raw = getattr(self, name)
            try:
                value = to_money(raw, self.decimal_places)
            except TypeError as exc:
                raise ConfigurationError(f"{name} must be a Decimal, int or str, not {raw!r}") from exc
            except (InvalidOperation, ValueError) as exc:
                raise ConfigurationError(f"{name} is not a valid amount: {raw!r}") from exc
            # Frozen dataclass: bypass __setattr__ for normalization.
            object.__setattr__(self, name, value)

    def validate(self) -> "ATMConfig":
        """Check cross-field constraints.

        Returns
        -------
        ATMConfig
            ``self``, so calls can be chained.

        Raises
        ------
        ConfigurationError
            If any setting is out of range.
        """
        if not PIN_PATTERN.fullmatch(self.reference_pin):
            raise ConfigurationError("Reference PIN must be exactly 4 digits")
        if self.max_pin_attempts < 1:
            raise ConfigurationError("max_pin_attempts must be at least 1")
        if self.decimal_places < 0:
            raise ConfigurationError("decimal_places must not be negative")
        if self.min_amount <= 0:
            raise ConfigurationError("min_amount must be positive")
        if self.max_transaction_limit < self.min_amount:
            raise ConfigurationError("max_transaction_limit must not be below min_amount")
        if self.initial_balance < 0:
            raise ConfigurationError("initial_balance must not be negative")
        return self

    @classmethod
    def from_env(cls) -> "ATMConfig":
        """Create config from environment variables."""
        import os

        try:
            max_attempts = int(os.getenv("ATM_MAX_PIN_ATTEMPTS", "3"))
        except ValueError as exc:
            raise ConfigurationError("ATM_MAX_PIN_ATTEMPTS must be an integer") from exc

        return cls(
            reference_pin=os.getenv("ATM_PIN", "1234"),
            max_pin_attempts=max_attempts,
            min_amount=os.getenv("ATM_MIN_AMOUNT", "1.00"),
            max_transaction_limit=os.getenv("ATM_MAX_AMOUNT", "10000.00"),
            initial_balance=os.getenv("ATM_INITIAL_BALANCE", "1000.00"),
            currency_symbol=os.getenv("ATM_CURRENCY_SYMBOL", "$"),
            record_initial_balance=os.getenv("ATM_RECORD_INITIAL", "true").lower() == "true",
            log_level=os.getenv("LOG_LEVEL", "WARNING"),
            log_format=os.getenv("LOG_FORMAT", "standard"),
        )
