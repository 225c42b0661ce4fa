"""Tests for pool type classification."""

import pytest

from liquidity import UnsupportedPoolType
from liquidity.models import PoolKind
from liquidity.pools import POOL_TYPE_KINDS, classify_pool


class TestClassifyPool:
    @pytest.mark.parametrize(
        ("pool_type", "kind"),
        [
            ("Weighted", PoolKind.WEIGHTED),
            ("Investment", PoolKind.WEIGHTED),
            ("LiquidityBootstrapping", PoolKind.WEIGHTED),
            ("Stable", PoolKind.STABLE),
            ("MetaStable", PoolKind.META_STABLE),
            ("PhantomStable", PoolKind.PHANTOM_STABLE),
            ("StablePhantom", PoolKind.PHANTOM_STABLE),
            ("ComposableStable", PoolKind.PHANTOM_STABLE),
        ],
    )
    def test_known_pool_types(self, pool_type, kind):
        assert classify_pool(pool_type) == kind

    @pytest.mark.parametrize("pool_type", ["Element", "AaveLinear", "Gyro2", "", "weighted"])
    def test_unknown_pool_types_raise(self, pool_type):
        """Unknown or differently-cased tags never fall back to a valuator."""
        with pytest.raises(UnsupportedPoolType):
            classify_pool(pool_type)

    def test_every_kind_is_reachable(self):
        assert set(POOL_TYPE_KINDS.values()) == set(PoolKind)
