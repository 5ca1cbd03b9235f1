"""Currency formatting for display."""

from decimal import ROUND_HALF_UP, Decimal

from src.domain.constants import DEFAULT_CURRENCY
from src.utils.decimal_utils import coerce_decimal

MASKED_AMOUNT = "$ •••••"

_SYMBOLS = {
    "CLP": "$",
    "USD": "US$",
    "EUR": "€",
}

_COMPACT_STEPS = (
    (Decimal("1000000"), "M"),
    (Decimal("1000"), "mil"),
)


def format_currency(
    amount,
    currency: str = DEFAULT_CURRENCY,
    *,
    with_decimals: bool = False,
    compact: bool = False,
    show_sensitive_data: bool = True,
) -> str:
    """Format an amount with es-CL separators and a currency symbol.

    Args:
        amount: Numeric amount to format.
        currency: Currency code (CLP, USD or EUR).
        with_decimals: Keep two decimals instead of rounding to units.
        compact: Use short notation such as ``$1,2 M``.
        show_sensitive_data: When False, return a masked placeholder.

    Returns:
        str: Display string, for example ``$1.234.567`` or ``-US$12,50``.
    """
    if not show_sensitive_data:
        return MASKED_AMOUNT
    value = coerce_decimal(amount)
    symbol = _SYMBOLS.get(currency.upper(), f"{currency.upper()} ")
    sign = "-" if value < 0 else ""
    magnitude = abs(value)

    if compact:
        for threshold, suffix in _COMPACT_STEPS:
            if magnitude >= threshold:
                scaled = (magnitude / threshold).quantize(
                    Decimal("0.1"),
                    rounding=ROUND_HALF_UP,
                )
                text = _group(scaled, 1).rstrip("0").rstrip(",")
                return f"{sign}{symbol}{text} {suffix}"

    places = 2 if with_decimals else 0
    return f"{sign}{symbol}{_group(magnitude, places)}"


def _group(value: Decimal, places: int) -> str:
    quantum = Decimal(1).scaleb(-places)
    rounded = value.quantize(quantum, rounding=ROUND_HALF_UP)
    text = f"{rounded:,.{places}f}"
    return text.replace(",", "_").replace(".", ",").replace("_", ".")


__all__ = ["format_currency", "MASKED_AMOUNT"]
