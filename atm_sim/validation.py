"""Input validation for PINs and monetary amounts.

Invalid input is expected and frequent, so these functions report the
outcome as a status value instead of raising.
"""

import re
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

from atm_sim.models.enums import AmountStatus, PinStatus
from atm_sim.money import DEFAULT_PLACES, quantize

PIN_PATTERN = re.compile(r"[0-9]{4}")
# Plain decimal notation with optional sign and exponent; no digit grouping.
AMOUNT_PATTERN = re.compile(r"[+-]?([0-9]+(\.[0-9]*)?|\.[0-9]+)([eE][+-]?[0-9]+)?")


def check_pin_format(pin: str) -> PinStatus:
    """Classify a trimmed PIN submission as OK, EMPTY or FORMAT_ERROR."""
    if not pin:
        return PinStatus.EMPTY
    if not PIN_PATTERN.fullmatch(pin):
        return PinStatus.FORMAT_ERROR
    return PinStatus.OK


@dataclass(frozen=True)
class AmountResult:
    """Outcome of parsing a user-entered amount."""

    status: AmountStatus
    amount: Decimal | None = None

    @property
    def ok(self) -> bool:
        return self.status is AmountStatus.OK


def parse_amount(
    raw: str,
    minimum: Decimal,
    maximum: Decimal,
    places: int = DEFAULT_PLACES,
) -> AmountResult:
    """Parse ``raw`` as a monetary amount within ``[minimum, maximum]``.

    The value is rounded before the bounds check, so ``"0.995"`` becomes
    ``1.00`` and passes a ``1.00`` minimum.

    Parameters
    ----------
    raw : str
        Text entered by the user. Surrounding whitespace is ignored.
    minimum, maximum : Decimal
        Inclusive transaction bounds.
    places : int
        Number of fractional digits to keep.

    Returns
    -------
    AmountResult
        ``OK`` with the quantized amount, or the reason it was rejected.
    """
    text = raw.strip()
    if not text:
        return AmountResult(AmountStatus.EMPTY)

    if not AMOUNT_PATTERN.fullmatch(text):
        return AmountResult(AmountStatus.FORMAT_ERROR)

    value = Decimal(text)

    try:
        amount = quantize(value, places)
    except InvalidOperation:
        # Too many digits for the decimal context, e.g. "1e100".
        return AmountResult(AmountStatus.RANGE_ERROR)

    if amount < minimum or amount > maximum:
        return AmountResult(AmountStatus.RANGE_ERROR, amount)

    return AmountResult(AmountStatus.OK, amount)
