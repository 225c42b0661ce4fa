"""Pool classification, token resolution and per-type valuation.

Pool types supported:
- Weighted (incl. Investment and LiquidityBootstrapping)
- Stable
- MetaStable (rate-bearing wrapper / underlying pairs)
- PhantomStable (boosted and composable stable pools)
"""

from liquidity.pools.base import BaseValuator, PoolValuator
from liquidity.pools.classifier import POOL_TYPE_KINDS, classify_pool
from liquidity.pools.metastable import MetaStablePoolLiquidity
from liquidity.pools.phantom_stable import PhantomStablePoolLiquidity
from liquidity.pools.registry import ValuatorRegistry
from liquidity.pools.resolver import TokenValueResolver
from liquidity.pools.stable import StablePoolLiquidity
from liquidity.pools.types import ResolvedToken
from liquidity.pools.validation import validate_snapshot
from liquidity.pools.weighted import WeightedPoolLiquidity

__all__ = [
    # Classification
    "POOL_TYPE_KINDS",
    "classify_pool",
    # Validation
    "validate_snapshot",
    # Resolution
    "ResolvedToken",
    "TokenValueResolver",
    # Valuators
    "PoolValuator",
    "BaseValuator",
    "WeightedPoolLiquidity",
    "StablePoolLiquidity",
    "MetaStablePoolLiquidity",
    "PhantomStablePoolLiquidity",
    "ValuatorRegistry",
]
