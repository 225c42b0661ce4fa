"""Phantom stable (boosted / composable stable) pool liquidity.

These pools list their own BPT among their tokens to represent unminted
supply. The resolver drops that entry; what remains is valued like a
stable pool with each balance scaled by its token's price rate.
"""

from liquidity.models import PoolKind
from liquidity.pools.stable import StablePoolLiquidity


class PhantomStablePoolLiquidity(StablePoolLiquidity):
    """Valuator for phantom stable pools."""

    kind = PoolKind.PHANTOM_STABLE
    rate_adjusted = True
