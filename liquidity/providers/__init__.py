"""Data providers for pool snapshots, token metadata and prices."""

from liquidity.providers.base import PoolProvider, PriceProvider, TokenProvider
from liquidity.providers.static import (
    StaticPoolProvider,
    StaticPriceProvider,
    StaticTokenProvider,
    load_pools,
    load_prices,
    load_tokens,
)

__all__ = [
    # Protocols
    "PoolProvider",
    "TokenProvider",
    "PriceProvider",
    # Static implementations
    "StaticPoolProvider",
    "StaticTokenProvider",
    "StaticPriceProvider",
    # Loaders
    "load_pools",
    "load_tokens",
    "load_prices",
]
