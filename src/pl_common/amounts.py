"""Integer arithmetic utilities for base-unit asset amounts.

All amounts, shares and balances are int base units. No float, no Decimal.
Rates are whole percents stored as unsigned 8-bit values.
"""

MAX_RATE = 255


def validate_rate(name: str, rate: int) -> None:
    """Validate that a percent rate fits the [0, 255] range."""
    if not (0 <= rate <= MAX_RATE):
        raise ValueError(f"{name} must be between 0 and {MAX_RATE}, got {rate}")


def ceil_div(numerator: int, denominator: int) -> int:
    """Integer ceiling division for non-negative operands.

    Using integer ceiling: (a + b - 1) // b
    """
    if denominator <= 0:
        raise ZeroDivisionError("denominator must be positive")
    return (numerator + denominator - 1) // denominator

