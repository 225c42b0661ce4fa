"""Meta stable pool liquidity.

Two-token stable pools where one token is a rate-bearing wrapper of the
other (e.g. wstETH/WETH). The wrapped balance is converted to underlying
units with its price rate before pricing. No imputation is attempted.
"""

from __future__ import annotations

from liquidity.errors import InsufficientPriceData
from liquidity.math import Bfp, bfp_sum
from liquidity.models import PoolKind
from liquidity.pools.base import BaseValuator
from liquidity.pools.types import ResolvedToken


class MetaStablePoolLiquidity(BaseValuator):
    """Valuator for meta stable pools."""

    kind = PoolKind.META_STABLE

    def calc_total(self, tokens: list[ResolvedToken]) -> Bfp:
        """Sum rate-adjusted balance * price over both tokens.

        Raises:
            InsufficientPriceData: If either token has no price
        """
        values: list[Bfp] = []
        for token in tokens:
            value = token.value(rate_adjusted=True)
            if value is None:
                raise InsufficientPriceData(
                    f"MetaStable pool requires a price for every token, missing {token.address}"
                )
            values.append(value)
        return bfp_sum(values)
