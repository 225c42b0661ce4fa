"""Stable pool liquidity.

Stable pool tokens are assumed to trade at parity, so an unpriced token is
valued at the average unit price of the priced tokens.
"""

from __future__ import annotations

import structlog

from liquidity.config import DEFAULT_LIQUIDITY_CONFIG, LiquidityConfig
from liquidity.math import Bfp, bfp_sum
from liquidity.models import PoolKind
from liquidity.pools.base import BaseValuator
from liquidity.pools.types import ResolvedToken

logger = structlog.get_logger()


class StablePoolLiquidity(BaseValuator):
    """Valuator for stable pools (plain balances)."""

    kind = PoolKind.STABLE
    rate_adjusted = False

    def __init__(self, config: LiquidityConfig = DEFAULT_LIQUIDITY_CONFIG) -> None:
        self._max_missing = config.stable_max_missing_prices

    def calc_total(self, tokens: list[ResolvedToken]) -> Bfp:
        """Sum balance * price, imputing missing prices by average.

        Formula for an unpriced token m:
            avg_price = known_value / known_balance
            value_m = balance_m * avg_price

        Raises:
            InsufficientPriceData: If no token is priced or too many are not
            DivisionByZero: If the priced tokens have zero total balance
        """
        priced, unpriced = self._split_by_price(tokens)
        known_value = bfp_sum([self._value(t) for t in priced])
        if not unpriced:
            return known_value

        self._check_imputable(priced, unpriced, self._max_missing)
        known_balance = bfp_sum([t.usable_balance(self.rate_adjusted) for t in priced])
        avg_price = known_value.div_down(known_balance)

        total = known_value
        for token in unpriced:
            imputed = token.usable_balance(self.rate_adjusted).mul_down(avg_price)
            logger.debug(
                "stable_value_imputed",
                pool_kind=self.kind.value,
                token=token.address,
                symbol=token.symbol,
                avg_price=avg_price.format(),
                value=imputed.format(),
            )
            total = total.add(imputed)
        return total

    def _value(self, token: ResolvedToken) -> Bfp:
        value = token.value(self.rate_adjusted)
        assert value is not None  # only called for priced tokens
        return value
