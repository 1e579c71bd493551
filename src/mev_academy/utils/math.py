"""
Numeric helpers for the analysis and aggregation code.

Keeps division, rounding and unit conversion in one place so every
endpoint treats edge cases (empty lists, zero denominators) alike.
"""

from typing import Final

from mev_academy.config.constants import WEI_PER_ETH, WEI_PER_GWEI


# Epsilon for floating point comparisons
EPSILON: Final[float] = 1e-10


def safe_divide(numerator: float, denominator: float, default: float = 0.0) -> float:
    """
    Safely divide two numbers, returning default on division by zero.

    Args:
        numerator: The dividend.
        denominator: The divisor.
        default: Value to return if denominator is zero.

    Returns:
        Result of division or default value.
    """
    if abs(denominator) < EPSILON:
        return default
    return numerator / denominator


def percentage(part: float, whole: float) -> float:
    """Share of ``part`` in ``whole`` as a percentage, 0.0 for an empty whole."""
    return safe_divide(part, whole) * 100.0


def clamp(value: float, lower: float, upper: float) -> float:
    """Clamp a value into [lower, upper]."""
    return max(lower, min(upper, value))


def round2(value: float) -> float:
    """Round to two decimals for display values."""
    return round(value, 2)


def wei_to_gwei(wei: int | float) -> float:
    """
    Convert a wei amount to gwei.

    Example:
        >>> wei_to_gwei(50_000_000_000)
        50.0
    """
    return wei / WEI_PER_GWEI


def wei_to_eth(wei: int | float) -> float:
    """Convert a wei amount to ether."""
    return wei / WEI_PER_ETH


def parse_int(value: str | int, default: int = 0) -> int:
    """
    Parse a decimal or 0x-prefixed hex integer.

    Args:
        value: Integer or its string form.
        default: Returned for empty strings.

    Raises:
        ValueError: If the string is not an integer.
    """
    if isinstance(value, int):
        return value
    text = value.strip()
    if not text:
        return default
    if text.lower().startswith("0x"):
        return int(text, 16)
    return int(text)
