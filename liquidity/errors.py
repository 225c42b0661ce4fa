"""Liquidity engine error classes.

Every failure of a valuation call is reported as a subclass of
LiquidityError so callers can tell a bad snapshot from an unsupported pool
or missing price data.
"""


class LiquidityError(Exception):
    """Base error for liquidity valuation."""

    pass


class UnsupportedPoolType(LiquidityError):
    """Pool type tag does not map to any valuator."""

    pass


class InsufficientPriceData(LiquidityError):
    """More token prices are missing than the valuator can impute."""

    pass


class LiquidityArithmeticError(LiquidityError, ArithmeticError):
    """Degenerate fixed-point operation."""

    pass


class DivisionByZero(LiquidityArithmeticError):
    """Division by a zero weight, balance or rate."""

    pass


class MalformedSnapshot(LiquidityError):
    """Pool snapshot violates a structural invariant."""

    pass


class UnknownToken(LiquidityError):
    """Token metadata (decimals) could not be found for a pool token."""

    pass


class PoolNotFound(LiquidityError):
    """Pool provider has no snapshot for the requested id or address."""

    pass
