"""Amount parsing utilities."""

from decimal import Decimal, InvalidOperation

# uint256 amounts have at most 78 digits
MAX_AMOUNT_DIGITS = 100


def parse_amount(amount_str: str) -> int:
    """Parse a token amount string into an int of base units.

    Handles various formats:
    - "1000000000000"
    - "1_000_000_000_000"
    - "1,000,000,000,000"
    - "1000000e6" (scientific notation, must resolve to a whole number)

    Args:
        amount_str: Amount string

    Returns:
        Non-negative integer amount

    Raises:
        ValueError: If amount string cannot be parsed, is fractional or negative
    """
    if not amount_str or not amount_str.strip():
        raise ValueError("Empty amount string")

    amount_str = amount_str.strip().replace(",", "").replace("_", "")

    # Plain integers skip Decimal entirely
    if amount_str.isdigit():
        return int(amount_str)

    try:
        amount = Decimal(amount_str)
    except InvalidOperation as e:
        raise ValueError(f"Could not parse amount '{amount_str}'") from e

    if not amount.is_finite():
        raise ValueError(f"Could not parse amount '{amount_str}'")
    if amount.adjusted() > MAX_AMOUNT_DIGITS:
        raise ValueError(f"Amount '{amount_str}' is too large")
    if amount != amount.to_integral_value():
        raise ValueError(f"Amount '{amount_str}' is not a whole number of base units")
    if amount < 0:
        raise ValueError(f"Amount '{amount_str}' must not be negative")
    return int(amount)
