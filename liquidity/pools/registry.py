"""Registry mapping pool kinds to their valuators.

The registry is closed over PoolKind: construction fails unless every kind
has exactly one valuator, so dispatch can never fall through to a default.
"""

from __future__ import annotations

from collections.abc import Iterable

from liquidity.config import DEFAULT_LIQUIDITY_CONFIG, LiquidityConfig
from liquidity.models import PoolKind
from liquidity.pools.base import PoolValuator
from liquidity.pools.metastable import MetaStablePoolLiquidity
from liquidity.pools.phantom_stable import PhantomStablePoolLiquidity
from liquidity.pools.stable import StablePoolLiquidity
from liquidity.pools.weighted import WeightedPoolLiquidity


class ValuatorRegistry:
    """Exhaustive PoolKind -> PoolValuator mapping.

    Usage:
        registry = ValuatorRegistry.default()
        liquidity = registry.get(PoolKind.STABLE).calc_total(tokens)
    """

    def __init__(self, valuators: Iterable[PoolValuator]) -> None:
        """Build the registry.

        Raises:
            ValueError: If a kind has no valuator or more than one
        """
        self._valuators: dict[PoolKind, PoolValuator] = {}
        for valuator in valuators:
            if valuator.kind in self._valuators:
                raise ValueError(f"Duplicate valuator for {valuator.kind.value}")
            self._valuators[valuator.kind] = valuator

        missing = [kind.value for kind in PoolKind if kind not in self._valuators]
        if missing:
            raise ValueError(f"No valuator registered for: {', '.join(missing)}")

    @classmethod
    def default(cls, config: LiquidityConfig = DEFAULT_LIQUIDITY_CONFIG) -> ValuatorRegistry:
        """Registry with the standard valuator for each pool kind."""
        return cls(
            [
                WeightedPoolLiquidity(config),
                StablePoolLiquidity(config),
                MetaStablePoolLiquidity(),
                PhantomStablePoolLiquidity(config),
            ]
        )

    def get(self, kind: PoolKind) -> PoolValuator:
        return self._valuators[kind]
