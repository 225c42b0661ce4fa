"""Balancer Fixed Point (Bfp) math library.

This module implements 18-decimal fixed-point arithmetic with the same
truncating semantics as Balancer's on-chain FixedPoint.sol. Money-like
values never pass through float: balances, prices, weights and rates are
all stored as integers scaled by 10^18.
"""

from __future__ import annotations

from decimal import Decimal, InvalidOperation
from typing import ClassVar

from liquidity.errors import DivisionByZero

__all__ = [
    # Classes
    "Bfp",
    # Functions
    "bfp_sum",
    "format_fixed",
    # Constants
    "ONE_18",
    "SCALING_DECIMALS",
]

SCALING_DECIMALS = 18
ONE_18 = 10**SCALING_DECIMALS


def format_fixed(value: int, decimals: int = SCALING_DECIMALS) -> str:
    """Format a scaled integer as a decimal string.

    Trailing zeros of the fractional part are dropped, but at least one
    fractional digit is always kept.

    Examples:
        format_fixed(640000 * 10**18) == "640000.0"
        format_fixed(1_230_000_000_000_000_000) == "1.23"
    """
    negative = value < 0
    whole, fraction = divmod(abs(value), 10**decimals)
    fraction_str = str(fraction).rjust(decimals, "0").rstrip("0") or "0"
    return f"{'-' if negative else ''}{whole}.{fraction_str}"


class Bfp:
    """18-decimal fixed-point number stored as int.

    All values are stored as integers scaled by 10^18.
    Example: 1.5 is stored as 1_500_000_000_000_000_000
    """

    ONE: ClassVar[int] = ONE_18

    __slots__ = ("value",)
    __hash__ = None  # type: ignore[assignment]  # Unhashable since we define __eq__

    def __init__(self, value: int) -> None:
        """Create Bfp from raw scaled value."""
        self.value = value

    @classmethod
    def from_wei(cls, wei: int) -> Bfp:
        """Create from raw wei value (already scaled to 18 decimals)."""
        return cls(wei)

    @classmethod
    def from_int(cls, i: int) -> Bfp:
        """Create from integer (will be scaled by 10^18)."""
        return cls(i * cls.ONE)

    @classmethod
    def from_decimal(cls, d: Decimal | str) -> Bfp:
        """Create from a decimal or decimal string (will be scaled by 10^18).

        Digits beyond the 18th decimal place are truncated, never rounded.
        Requires a finite, non-negative input.
        """
        try:
            d = Decimal(d)
        except InvalidOperation as err:
            raise ValueError(f"Bfp.from_decimal requires a decimal value, got {d!r}") from err
        if not d.is_finite():
            raise ValueError(f"Bfp.from_decimal requires a finite value, got {d}")
        if d < 0:
            raise ValueError(f"Bfp.from_decimal requires non-negative input, got {d}")
        # Integer arithmetic on the exact digits; Decimal context precision
        # would round long inputs and overflow on quantize
        _, digits, exponent = d.as_tuple()
        mantissa = int("".join(map(str, digits)))
        shift = exponent + SCALING_DECIMALS
        if shift >= 0:
            return cls(mantissa * 10**shift)
        return cls(mantissa // 10**-shift)

    @classmethod
    def from_amount(cls, amount: int, decimals: int) -> Bfp:
        """Create from a raw token amount in the token's native decimals.

        For 6-decimal tokens like USDC the amount is scaled up by 10^12;
        tokens with more than 18 decimals lose their extra precision.
        """
        if decimals < 0:
            raise ValueError(f"Token decimals must be non-negative, got {decimals}")
        if decimals <= SCALING_DECIMALS:
            return cls(amount * 10 ** (SCALING_DECIMALS - decimals))
        return cls(amount // 10 ** (decimals - SCALING_DECIMALS))

    def to_decimal(self) -> Decimal:
        """Convert to Decimal for display."""
        return Decimal(self.value) / Decimal(self.ONE)

    def format(self) -> str:
        """Render as a decimal string without trailing zero padding."""
        return format_fixed(self.value)

    def mul_down(self, other: Bfp) -> Bfp:
        """Multiply with floor rounding: (a * b) // 10^18"""
        return Bfp((self.value * other.value) // self.ONE)

    def div_down(self, other: Bfp) -> Bfp:
        """Divide with floor rounding: (a * 10^18) // b"""
        if other.value == 0:
            raise DivisionByZero("Bfp division by zero")
        return Bfp((self.value * self.ONE) // other.value)

    def add(self, other: Bfp) -> Bfp:
        """Add two Bfp values."""
        return Bfp(self.value + other.value)

    def is_zero(self) -> bool:
        return self.value == 0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Bfp):
            return NotImplemented
        return self.value == other.value

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Bfp):
            return NotImplemented
        return self.value < other.value

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Bfp):
            return NotImplemented
        return self.value <= other.value

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Bfp):
            return NotImplemented
        return self.value > other.value

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Bfp):
            return NotImplemented
        return self.value >= other.value

    def __repr__(self) -> str:
        return f"Bfp({self.value})"

    def __str__(self) -> str:
        return self.format()


def bfp_sum(values: list[Bfp]) -> Bfp:
    """Sum a list of Bfp values (exact, no rounding)."""
    return Bfp(sum(v.value for v in values))
