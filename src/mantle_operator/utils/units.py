"""
Exact conversions between decimal amounts and integer base units.

Amounts are handled as ``Decimal`` under a widened context so that full
uint256 values survive the round trip without float rounding.
"""

from __future__ import annotations

from decimal import Decimal, InvalidOperation, localcontext
from typing import Union

from mantle_operator.errors import InvalidAmountError

Amount = Union[str, int, float, Decimal]

# Enough digits for any uint256 plus 36 decimals
_PRECISION = 120


def to_decimal(amount: Amount) -> Decimal:
    """Parse ``amount`` into a finite, non-negative Decimal."""
    try:
        # str() first so floats keep their shortest repr instead of binary noise
        value = amount if isinstance(amount, Decimal) else Decimal(str(amount).strip())
    except (InvalidOperation, ValueError, TypeError):
        raise InvalidAmountError(str(amount), reason="must be a decimal number") from None
    if not value.is_finite():
        raise InvalidAmountError(str(amount), reason="must be finite")
    if value < 0:
        raise InvalidAmountError(str(amount), reason="cannot be negative")
    return value


def to_base_units(amount: Amount, decimals: int) -> int:
    """
    Convert a decimal amount to integer base units.

    Args:
        amount: Human-readable amount (e.g. ``"1.5"``)
        decimals: Token decimals

    Returns:
        Amount in base units

    Raises:
        InvalidAmountError: If the amount is negative, not a number, or has
            more fractional digits than ``decimals`` allows

    Example:
        >>> to_base_units("1.5", 6)
        1500000
    """
    value = to_decimal(amount)
    with localcontext() as ctx:
        ctx.prec = _PRECISION
        scaled = value.scaleb(decimals)
        if scaled != scaled.to_integral_value():
            raise InvalidAmountError(
                str(amount),
                reason=f"more than {decimals} decimal places",
            )
        return int(scaled)


def from_base_units(value: int, decimals: int) -> Decimal:
    """
    Convert integer base units to a decimal amount.

    Example:
        >>> from_base_units(1_500_000, 6)
        Decimal('1.500000')
    """
    with localcontext() as ctx:
        ctx.prec = _PRECISION
        return Decimal(int(value)).scaleb(-decimals)


__all__ = ["Amount", "to_decimal", "to_base_units", "from_base_units"]
