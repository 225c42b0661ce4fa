"""Pytest configuration and fixtures."""

from pathlib import Path

import pytest

from liquidity import LiquidityEngine, PoolSnapshot
from liquidity.providers import (
    StaticPoolProvider,
    StaticPriceProvider,
    StaticTokenProvider,
    load_pools,
    load_prices,
    load_tokens,
)

FIXTURES_DIR = Path(__file__).parent / "fixtures"
LIQUIDITY_DIR = FIXTURES_DIR / "liquidity"


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the fixtures directory path."""
    return FIXTURES_DIR


@pytest.fixture(scope="session")
def pool_provider() -> StaticPoolProvider:
    """Pools from tests/fixtures/liquidity/pools.json."""
    return load_pools(LIQUIDITY_DIR / "pools.json")


@pytest.fixture(scope="session")
def token_provider() -> StaticTokenProvider:
    """Token metadata from tests/fixtures/liquidity/tokens.json."""
    return load_tokens(LIQUIDITY_DIR / "tokens.json")


@pytest.fixture(scope="session")
def price_provider() -> StaticPriceProvider:
    """USD prices from tests/fixtures/liquidity/token_prices.json."""
    return load_prices(LIQUIDITY_DIR / "token_prices.json")


@pytest.fixture
def engine(
    pool_provider: StaticPoolProvider,
    token_provider: StaticTokenProvider,
    price_provider: StaticPriceProvider,
) -> LiquidityEngine:
    """Engine over the static fixture providers."""
    return LiquidityEngine(tokens=token_provider, prices=price_provider, pools=pool_provider)


@pytest.fixture
def find_pool(pool_provider: StaticPoolProvider):
    """Look up a fixture pool by address, failing the test if it is missing."""

    def _find(address: str) -> PoolSnapshot:
        pool = pool_provider.get_pool(address)
        if pool is None:
            raise LookupError(f"Could not find test pool of address: {address}")
        return pool

    return _find
