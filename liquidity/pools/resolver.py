"""Token value resolution.

Turns a pool snapshot into ResolvedToken entries: raw balances scaled by
token decimals, per-token price rates and weights, and USD prices where
one is available. A missing price is recorded as None and left to the
valuator's imputation rules.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

import structlog

from liquidity.config import DEFAULT_LIQUIDITY_CONFIG, LiquidityConfig
from liquidity.errors import UnknownToken
from liquidity.math import Bfp
from liquidity.pools.types import ResolvedToken

if TYPE_CHECKING:
    from liquidity.models import PoolSnapshot
    from liquidity.providers import PoolProvider, PriceProvider, TokenProvider

logger = structlog.get_logger()

# Values a nested pool at the given depth; supplied by the engine
SubPoolValuer = Callable[["PoolSnapshot", int], Bfp]

ONE = Bfp(Bfp.ONE)


class TokenValueResolver:
    """Resolve balances and prices for the tokens of a pool.

    When a token has no price but is itself a pool known to the pool
    provider (e.g. a linear pool BPT inside a boosted pool), its unit price
    is derived from that pool's liquidity divided by its total shares.
    That price already reflects the sub-pool's own rates, so the token's
    price rate is reset to 1.
    """

    def __init__(
        self,
        tokens: TokenProvider,
        prices: PriceProvider,
        pools: PoolProvider | None = None,
        sub_pool_valuer: SubPoolValuer | None = None,
        config: LiquidityConfig = DEFAULT_LIQUIDITY_CONFIG,
    ) -> None:
        self._tokens = tokens
        self._prices = prices
        self._pools = pools
        self._sub_pool_valuer = sub_pool_valuer
        self._config = config

    def resolve(self, pool: PoolSnapshot, depth: int = 0) -> list[ResolvedToken]:
        """Resolve every token of the pool except the pool's own BPT.

        Args:
            pool: Validated snapshot
            depth: Nesting depth of this pool (0 for the pool being valued)

        Returns:
            Resolved tokens in snapshot order

        Raises:
            UnknownToken: If the token provider has no decimals for a token
        """
        n = pool.token_count
        weights = pool.weights if pool.weights is not None else (None,) * n
        rates = pool.price_rates if pool.price_rates is not None else (None,) * n

        resolved: list[ResolvedToken] = []
        for address, raw_balance, weight, rate in zip(
            pool.tokens, pool.balances, weights, rates, strict=True
        ):
            # Pre-minted BPT held by the pool itself is not an asset of the pool
            if address == pool.address:
                logger.debug("pool_token_excluded", pool=pool.id, token=address)
                continue

            info = self._tokens.get_token(address)
            if info is None:
                raise UnknownToken(f"No token metadata for {address} in pool {pool.id}")

            price_rate = Bfp.from_decimal(rate) if rate is not None else ONE
            price = self._direct_price(address)
            if price is None:
                price = self._nested_pool_price(address, depth)
                if price is not None:
                    # Liquidity per share is already the USD value of one BPT
                    price_rate = ONE

            resolved.append(
                ResolvedToken(
                    address=address,
                    balance=Bfp.from_amount(int(raw_balance), info.decimals),
                    price_rate=price_rate,
                    weight=Bfp.from_decimal(weight) if weight is not None else None,
                    price=price,
                    symbol=info.symbol,
                )
            )
        return resolved

    def _direct_price(self, address: str) -> Bfp | None:
        price_info = self._prices.get_price(address)
        if price_info is None or not price_info.is_known:
            return None
        return Bfp.from_decimal(price_info.usd)

    def _nested_pool_price(self, address: str, depth: int) -> Bfp | None:
        """Price a pool token as its pool's liquidity per share."""
        if self._pools is None or self._sub_pool_valuer is None:
            return None

        sub_pool = self._pools.get_pool(address)
        if sub_pool is None or sub_pool.total_shares is None:
            return None

        if depth >= self._config.max_nesting_depth:
            logger.debug(
                "nested_pool_depth_exceeded",
                token=address,
                max_depth=self._config.max_nesting_depth,
            )
            return None

        total_shares = Bfp.from_decimal(sub_pool.total_shares)
        if total_shares.is_zero():
            return None

        liquidity = self._sub_pool_valuer(sub_pool, depth + 1)
        price = liquidity.div_down(total_shares)
        logger.debug(
            "nested_pool_priced",
            token=address,
            sub_pool=sub_pool.id,
            liquidity=liquidity.format(),
            price=price.format(),
        )
        return price
