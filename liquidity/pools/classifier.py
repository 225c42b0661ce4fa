"""Pool type classification.

Maps the pool type tag reported by the data source to one of the four
valuation strategies. Unknown tags are rejected: routing an unrecognized
pool to a default valuator would yield a plausible but wrong figure.
"""

from liquidity.errors import UnsupportedPoolType
from liquidity.models import PoolKind

# Balancer subgraph poolType values and the strategy that values them
POOL_TYPE_KINDS: dict[str, PoolKind] = {
    "Weighted": PoolKind.WEIGHTED,
    "Investment": PoolKind.WEIGHTED,
    "LiquidityBootstrapping": PoolKind.WEIGHTED,
    "Stable": PoolKind.STABLE,
    "MetaStable": PoolKind.META_STABLE,
    "PhantomStable": PoolKind.PHANTOM_STABLE,
    "StablePhantom": PoolKind.PHANTOM_STABLE,
    "ComposableStable": PoolKind.PHANTOM_STABLE,
}


def classify_pool(pool_type: str) -> PoolKind:
    """Return the valuation strategy for a pool type tag.

    Raises:
        UnsupportedPoolType: If the tag is not a known Balancer pool type
    """
    kind = POOL_TYPE_KINDS.get(pool_type)
    if kind is None:
        raise UnsupportedPoolType(f"Unsupported pool type: {pool_type!r}")
    return kind
