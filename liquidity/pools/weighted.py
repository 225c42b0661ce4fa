"""Weighted pool liquidity.

In a weighted pool every token holds a fixed share of the pool's value,
so value_i / weight_i is the same for all tokens. When all prices are
known the liquidity is simply the sum of token values. A missing price is
imputed from the priced tokens through their weights.
"""

from __future__ import annotations

import structlog

from liquidity.config import DEFAULT_LIQUIDITY_CONFIG, LiquidityConfig
from liquidity.errors import MalformedSnapshot
from liquidity.math import Bfp, bfp_sum
from liquidity.models import PoolKind
from liquidity.pools.base import BaseValuator
from liquidity.pools.types import ResolvedToken

logger = structlog.get_logger()


class WeightedPoolLiquidity(BaseValuator):
    """Valuator for weighted (constant-weight product) pools."""

    kind = PoolKind.WEIGHTED

    def __init__(self, config: LiquidityConfig = DEFAULT_LIQUIDITY_CONFIG) -> None:
        self._max_missing = config.weighted_max_missing_prices

    def calc_total(self, tokens: list[ResolvedToken]) -> Bfp:
        """Sum token values, imputing missing ones by weight.

        Formula for an unpriced token m:
            value_m = known_value * weight_m / known_weight

        where known_value and known_weight are summed over the priced
        tokens. For a two-token pool this is value_known * w_m / w_known.

        Raises:
            InsufficientPriceData: If no token is priced or too many are not
            DivisionByZero: If the priced tokens carry zero total weight
        """
        priced, unpriced = self._split_by_price(tokens)
        known_value = bfp_sum([self._value(t) for t in priced])
        if not unpriced:
            return known_value

        self._check_imputable(priced, unpriced, self._max_missing)
        known_weight = bfp_sum([self._weight(t) for t in priced])

        total = known_value
        for token in unpriced:
            imputed = known_value.mul_down(self._weight(token)).div_down(known_weight)
            logger.debug(
                "weighted_value_imputed",
                token=token.address,
                symbol=token.symbol,
                weight=self._weight(token).format(),
                value=imputed.format(),
            )
            total = total.add(imputed)
        return total

    @staticmethod
    def _value(token: ResolvedToken) -> Bfp:
        value = token.value()
        assert value is not None  # only called for priced tokens
        return value

    @staticmethod
    def _weight(token: ResolvedToken) -> Bfp:
        if token.weight is None:
            raise MalformedSnapshot(f"Weighted pool token {token.address} has no weight")
        return token.weight
