"""Resolved per-token values fed to the pool valuators."""

from __future__ import annotations

from dataclasses import dataclass

from liquidity.math import Bfp


@dataclass(frozen=True)
class ResolvedToken:
    """A pool token with its human-scale balance and optional USD price.

    Attributes:
        address: Token address (lowercase)
        balance: Balance divided by 10^decimals, as Bfp
        price_rate: Exchange rate of a wrapped token to its underlying
            (1.0 for plain tokens)
        weight: Normalized weight for weighted pools, None otherwise
        price: USD unit price, or None when no price is known
        symbol: Token symbol, for logging only
    """

    address: str
    balance: Bfp
    price_rate: Bfp
    weight: Bfp | None
    price: Bfp | None
    symbol: str | None = None

    @property
    def has_price(self) -> bool:
        return self.price is not None

    def usable_balance(self, rate_adjusted: bool = False) -> Bfp:
        """Balance used for valuation, optionally scaled by the price rate."""
        if rate_adjusted:
            return self.balance.mul_down(self.price_rate)
        return self.balance

    def value(self, rate_adjusted: bool = False) -> Bfp | None:
        """USD value of the balance, or None when the price is unknown."""
        if self.price is None:
            return None
        return self.usable_balance(rate_adjusted).mul_down(self.price)
