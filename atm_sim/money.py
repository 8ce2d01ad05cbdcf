"""Fixed-point money helpers.

Every amount that reaches the account goes through :func:`quantize`, so a
single rounding rule (half-up to ``places`` fractional digits) applies to
parsing, deposits, withdrawals and recorded transactions alike.
"""

from decimal import ROUND_HALF_UP, Decimal

DEFAULT_PLACES = 2


def quantize(value: Decimal, places: int = DEFAULT_PLACES) -> Decimal:
    """Round ``value`` half-up to ``places`` fractional digits."""
    return value.quantize(Decimal(1).scaleb(-places), rounding=ROUND_HALF_UP)


def to_money(value: Decimal | int | str, places: int = DEFAULT_PLACES) -> Decimal:
    """Coerce an int, string or Decimal to a quantized Decimal.

    Floats are rejected: they cannot represent most cent values exactly.
    """
    if isinstance(value, float):
        raise TypeError("Money values must not be floats; use Decimal or str")
    return quantize(Decimal(value), places)


def format_money(value: Decimal, symbol: str = "$", places: int = DEFAULT_PLACES) -> str:
    """Render an amount with a leading currency marker, e.g. ``$1000.00``."""
    return f"{symbol}{quantize(value, places)}"
