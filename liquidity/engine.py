"""Liquidity engine: the public entry point for pool valuation.

Given a pool snapshot, the engine classifies the pool, checks its
structure, resolves token balances and prices through the providers and
routes the result to the valuator for the pool's kind.

Usage:
    engine = LiquidityEngine(tokens=token_provider, prices=price_provider)
    liquidity = engine.get_liquidity(pool)  # e.g. "640000.0"
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog

from liquidity.config import DEFAULT_LIQUIDITY_CONFIG, LiquidityConfig
from liquidity.errors import PoolNotFound
from liquidity.pools import (
    TokenValueResolver,
    ValuatorRegistry,
    classify_pool,
    validate_snapshot,
)

if TYPE_CHECKING:
    from liquidity.math import Bfp
    from liquidity.models import PoolSnapshot
    from liquidity.providers import PoolProvider, PriceProvider, TokenProvider

logger = structlog.get_logger()


class LiquidityEngine:
    """Compute USD liquidity of Balancer pools.

    The engine holds no mutable state: every call works on its own
    snapshot and allocates its own results, so one instance can serve
    concurrent callers.
    """

    def __init__(
        self,
        tokens: TokenProvider,
        prices: PriceProvider,
        pools: PoolProvider | None = None,
        config: LiquidityConfig = DEFAULT_LIQUIDITY_CONFIG,
        registry: ValuatorRegistry | None = None,
    ) -> None:
        """Initialize the engine.

        Args:
            tokens: Source of token decimals
            prices: Source of USD prices
            pools: Optional source of pool snapshots, used to look pools up
                by id and to price tokens that are themselves pools
            config: Valuation limits and tolerances
            registry: Valuators per pool kind (defaults to the standard set)
        """
        self._pools = pools
        self._config = config
        self._registry = registry if registry is not None else ValuatorRegistry.default(config)
        self._resolver = TokenValueResolver(
            tokens=tokens,
            prices=prices,
            pools=pools,
            sub_pool_valuer=self._value_pool,
            config=config,
        )

    def get_liquidity(self, pool: PoolSnapshot) -> str:
        """Return the pool's USD liquidity as a decimal string.

        Raises:
            UnsupportedPoolType: Pool type has no valuator
            MalformedSnapshot: Snapshot violates a structural invariant
            UnknownToken: Token decimals are not available
            InsufficientPriceData: Too many token prices are missing
            LiquidityArithmeticError: Degenerate arithmetic (zero divisor)
        """
        return self.get_liquidity_value(pool).format()

    def get_liquidity_value(self, pool: PoolSnapshot) -> Bfp:
        """Return the pool's USD liquidity as 18-decimal fixed-point."""
        return self._value_pool(pool, 0)

    def get_liquidity_by_id(self, id_or_address: str) -> str:
        """Look a pool up through the pool provider and value it.

        Raises:
            PoolNotFound: If no pool provider is configured or the pool is unknown
        """
        pool = self._pools.get_pool(id_or_address) if self._pools is not None else None
        if pool is None:
            raise PoolNotFound(f"Pool not found: {id_or_address}")
        return self.get_liquidity(pool)

    def _value_pool(self, pool: PoolSnapshot, depth: int) -> Bfp:
        kind = classify_pool(pool.pool_type)
        validate_snapshot(pool, kind, self._config)
        tokens = self._resolver.resolve(pool, depth)
        liquidity = self._registry.get(kind).calc_total(tokens)
        logger.debug(
            "pool_liquidity_computed",
            pool=pool.id,
            kind=kind.value,
            depth=depth,
            token_count=len(tokens),
            liquidity=liquidity.format(),
        )
        return liquidity
