"""In-memory providers backed by static data.

Used by tests and by the HTTP surface, where the caller ships the pool,
tokens and prices in one request.
"""

from __future__ import annotations

import json
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Any

import structlog

from liquidity.models import PoolSnapshot, PriceInfo, TokenInfo, normalize_address

logger = structlog.get_logger()


class StaticPoolProvider:
    """Pool provider over a fixed list of snapshots.

    Pools can be looked up by pool id or by contract address.
    """

    def __init__(self, pools: Iterable[PoolSnapshot]) -> None:
        self._by_id: dict[str, PoolSnapshot] = {}
        self._by_address: dict[str, PoolSnapshot] = {}
        for pool in pools:
            self._by_id[pool.id.lower()] = pool
            self._by_address[pool.address] = pool

    def get_pool(self, id_or_address: str) -> PoolSnapshot | None:
        key = normalize_address(id_or_address)
        return self._by_id.get(key) or self._by_address.get(key)

    def __len__(self) -> int:
        return len(self._by_id)


class StaticTokenProvider:
    """Token provider over a fixed list of token metadata."""

    def __init__(self, tokens: Iterable[TokenInfo]) -> None:
        self._tokens = {token.address: token for token in tokens}

    def get_token(self, address: str) -> TokenInfo | None:
        return self._tokens.get(normalize_address(address))

    def __len__(self) -> int:
        return len(self._tokens)


class StaticPriceProvider:
    """Price provider over a fixed address -> price mapping."""

    def __init__(self, prices: Mapping[str, PriceInfo]) -> None:
        self._prices = {normalize_address(addr): price for addr, price in prices.items()}

    def get_price(self, address: str) -> PriceInfo | None:
        return self._prices.get(normalize_address(address))

    def __len__(self) -> int:
        return len(self._prices)


def _read_json(path: Path | str) -> Any:
    with open(path) as f:
        return json.load(f)


def load_pools(path: Path | str) -> StaticPoolProvider:
    """Load pool snapshots from a JSON list.

    Args:
        path: File containing a list of subgraph-style pool objects

    Returns:
        StaticPoolProvider over the parsed snapshots
    """
    data = _read_json(path)
    pools = [PoolSnapshot.model_validate(item) for item in data]
    logger.debug("static_pools_loaded", path=str(path), count=len(pools))
    return StaticPoolProvider(pools)


def load_tokens(path: Path | str) -> StaticTokenProvider:
    """Load token metadata from a JSON list of {address, decimals, symbol}."""
    data = _read_json(path)
    tokens = [TokenInfo.model_validate(item) for item in data]
    logger.debug("static_tokens_loaded", path=str(path), count=len(tokens))
    return StaticTokenProvider(tokens)


def load_prices(path: Path | str) -> StaticPriceProvider:
    """Load USD prices from a JSON object keyed by token address.

    Example file content:
        {"0xc02aaa39b223fe8d0a0e5c4f27ead9083c756cc2": {"usd": "3200"}}
    """
    data = _read_json(path)
    prices = {addr: PriceInfo.model_validate(item) for addr, item in data.items()}
    logger.debug("static_prices_loaded", path=str(path), count=len(prices))
    return StaticPriceProvider(prices)
