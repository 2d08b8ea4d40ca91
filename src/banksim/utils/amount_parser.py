"""Amount parsing utilities."""

from decimal import Context, Decimal, ROUND_HALF_EVEN, getcontext
import re
import sys

from banksim.domain.errors import InvalidFormatError

CENT = Decimal("0.01")

# Amounts beyond the double range would be infinite as floats.
MAX_MAGNITUDE = Decimal(sys.float_info.max)

# A floating-point literal, optionally surrounded by whitespace.
_FLOAT_RE = re.compile(r"\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?\s*")


def parse_amount(amount_str: str) -> Decimal:
    """Parse an amount string into a Decimal.

    Accepts plain and exponent notation ("100", "100.50", "-5", ".5", "1e3")
    with surrounding whitespace. Anything after the number other than
    whitespace makes the input invalid, as do "nan", "inf" and numbers too
    large for a double.

    Args:
        amount_str: Amount string as typed by the user

    Returns:
        Decimal amount, unrounded

    Raises:
        InvalidFormatError: If amount string cannot be parsed
    """
    if amount_str is None or not _FLOAT_RE.fullmatch(amount_str):
        raise InvalidFormatError(f"Invalid amount '{amount_str}': enter a number")
    amount = Decimal(amount_str.strip())
    if abs(amount) > MAX_MAGNITUDE:
        raise InvalidFormatError(f"Invalid amount '{amount_str.strip()}': number is too large")
    return amount


def to_cents(amount: Decimal) -> Decimal:
    """Round an amount to cent precision (half to even).

    Precision grows with the magnitude of the amount, so large values round
    without overflowing the default 28-digit context.
    """
    context = Context(prec=max(getcontext().prec, amount.adjusted() + 3))
    return amount.quantize(CENT, rounding=ROUND_HALF_EVEN, context=context)
