"""Structural checks on pool snapshots.

Run before any arithmetic so a malformed snapshot never produces a
partial valuation.
"""

from __future__ import annotations

from decimal import Decimal

from liquidity.config import DEFAULT_LIQUIDITY_CONFIG, LiquidityConfig
from liquidity.errors import MalformedSnapshot
from liquidity.models import PoolKind, PoolSnapshot

# Pool kinds whose balances are scaled by per-token price rates
RATE_ADJUSTED_KINDS = frozenset({PoolKind.META_STABLE, PoolKind.PHANTOM_STABLE})


def validate_snapshot(
    pool: PoolSnapshot,
    kind: PoolKind,
    config: LiquidityConfig = DEFAULT_LIQUIDITY_CONFIG,
) -> None:
    """Check the invariants a valuator relies on.

    Args:
        pool: Snapshot to check
        kind: Strategy the pool was classified as
        config: Provides the weight sum tolerance

    Raises:
        MalformedSnapshot: On mismatched list lengths, duplicate tokens,
            missing weights or rates, or weights not summing to one
    """
    n = pool.token_count
    if n == 0:
        raise MalformedSnapshot(f"Pool {pool.id} has no tokens")
    if len(pool.balances) != n:
        raise MalformedSnapshot(
            f"Pool {pool.id} has {n} tokens but {len(pool.balances)} balances"
        )
    if len(set(pool.tokens)) != n:
        raise MalformedSnapshot(f"Pool {pool.id} lists the same token twice")
    if pool.weights is not None and len(pool.weights) != n:
        raise MalformedSnapshot(f"Pool {pool.id} has {n} tokens but {len(pool.weights)} weights")
    if pool.price_rates is not None and len(pool.price_rates) != n:
        raise MalformedSnapshot(
            f"Pool {pool.id} has {n} tokens but {len(pool.price_rates)} price rates"
        )

    if kind == PoolKind.WEIGHTED:
        _validate_weights(pool, config.weight_sum_tolerance)

    if kind in RATE_ADJUSTED_KINDS and pool.price_rates is None:
        raise MalformedSnapshot(f"{kind.value} pool {pool.id} requires price rates")

    if kind == PoolKind.META_STABLE:
        # The pool's own BPT is never valued, so it does not count here
        underlying = [token for token in pool.tokens if token != pool.address]
        if len(underlying) != 2:
            raise MalformedSnapshot(
                f"MetaStable pool {pool.id} must hold exactly 2 tokens, got {len(underlying)}"
            )


def _validate_weights(pool: PoolSnapshot, tolerance: Decimal) -> None:
    if pool.weights is None:
        raise MalformedSnapshot(f"Weighted pool {pool.id} has no weights")
    weights = [Decimal(w) for w in pool.weights]
    total = sum(weights, Decimal(0))
    if abs(total - 1) > tolerance:
        raise MalformedSnapshot(f"Weights of pool {pool.id} sum to {total}, expected 1")
