"""Provider protocols consumed by the liquidity engine.

The engine never performs I/O itself. Pool snapshots, token metadata and
prices come from these narrow capabilities, so valuation can run against
static in-memory fixtures or any live data source.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from liquidity.models import PoolSnapshot, PriceInfo, TokenInfo


class PoolProvider(Protocol):
    """Protocol for pool snapshot lookup."""

    def get_pool(self, id_or_address: str) -> PoolSnapshot | None:
        """Find a pool by its 32-byte pool id or its contract address.

        Returns:
            The snapshot, or None if the pool is unknown
        """
        ...


class TokenProvider(Protocol):
    """Protocol for token metadata lookup."""

    def get_token(self, address: str) -> TokenInfo | None:
        """Return token metadata, or None if the token is unknown."""
        ...


class PriceProvider(Protocol):
    """Protocol for USD price lookup.

    Absence of a price is a valid answer, not an error.
    """

    def get_price(self, address: str) -> PriceInfo | None:
        """Return the token's USD price, or None if no price is available."""
        ...
